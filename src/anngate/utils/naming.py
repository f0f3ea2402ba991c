"""Helpers for prefixed annotation keys."""

from __future__ import annotations

from anngate.constants.annotations import ANNOTATION_PREFIX_SEPARATOR


def annotation_with_prefix(key: str, prefix: str = "") -> str:
    """Return the full annotation key as it appears on a resource."""
    if not prefix:
        return key
    return f"{prefix.rstrip(ANNOTATION_PREFIX_SEPARATOR)}{ANNOTATION_PREFIX_SEPARATOR}{key}"


def trim_annotation_prefix(annotation: str, prefix: str = "") -> str:
    """Strip ``prefix/`` from an annotation key; keys without it are returned unchanged."""
    if not prefix:
        return annotation
    return annotation.removeprefix(f"{prefix.rstrip(ANNOTATION_PREFIX_SEPARATOR)}{ANNOTATION_PREFIX_SEPARATOR}")
