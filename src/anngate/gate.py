"""Risk gate: reject annotation sets that reach above the allowed risk level."""

from __future__ import annotations

import logging

from anngate.exceptions import RiskViolationError
from anngate.model.fields import AnnotationGroup
from anngate.model.risk import AnnotationRisk
from anngate.types.common import AnnotationSet
from anngate.utils.naming import trim_annotation_prefix

logger = logging.getLogger(__name__)


def find_risky_annotations(
    annotations: AnnotationSet,
    max_risk: AnnotationRisk,
    group: AnnotationGroup,
    prefix: str = "",
) -> tuple[str, ...]:
    """Return the sorted annotation keys whose field risk exceeds ``max_risk``.

    Only presence matters; values are never inspected.
    """
    offending: list[str] = []
    for annotation in annotations:
        field = group.get(trim_annotation_prefix(annotation, prefix))
        if field is not None and field.risk > max_risk:
            offending.append(annotation)
    return tuple(sorted(offending))


def check_annotation_risk(
    annotations: AnnotationSet,
    max_risk: AnnotationRisk,
    group: AnnotationGroup,
    prefix: str = "",
) -> None:
    """Raise :class:`RiskViolationError` if any annotation is too risky."""
    offending = find_risky_annotations(annotations, max_risk, group, prefix)
    if offending:
        logger.debug(
            "Rejected %d annotation(s) in group %s above risk %s",
            len(offending),
            group.name,
            max_risk.label,
        )
        raise RiskViolationError(offending, max_risk)
