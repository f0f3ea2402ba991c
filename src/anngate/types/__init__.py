"""Shared type aliases for Anngate."""

from .common import AnnotationSet, FieldKind, FieldValue, JsonObject, JsonScalar, JsonValue

__all__ = [
    "AnnotationSet",
    "FieldKind",
    "FieldValue",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
]
