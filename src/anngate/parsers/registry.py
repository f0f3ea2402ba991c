"""Registry of built-in annotation parsers."""

from __future__ import annotations

import logging

from anngate.parsers.base import AnnotationParser
from anngate.parsers.opentelemetry import OpenTelemetryParser
from anngate.security.resolver import Resolver

logger = logging.getLogger(__name__)

PARSER_CLASSES: tuple[type[AnnotationParser], ...] = (OpenTelemetryParser,)


def build_parsers(resolver: Resolver, groups: tuple[str, ...] | None = None) -> dict[str, AnnotationParser]:
    """Build parser instances keyed by group name.

    With ``groups`` set, only those groups are built; unknown names are logged
    and skipped.
    """
    known = {parser_cls.annotation_group.name: parser_cls for parser_cls in PARSER_CLASSES}
    selected = groups if groups is not None else tuple(known)
    parsers: dict[str, AnnotationParser] = {}

    for group in selected:
        parser_cls = known.get(group)
        if parser_cls is None:
            logger.warning("Unknown annotation group ignored", extra={"group": group})
            continue
        parsers[group] = parser_cls(resolver)

    return parsers
