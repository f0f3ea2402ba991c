"""Core data models for Anngate."""

from .fields import AnnotationGroup, FieldDefinition
from .risk import AnnotationRisk, AnnotationScope, risk_from_string

__all__ = [
    "AnnotationGroup",
    "AnnotationRisk",
    "AnnotationScope",
    "FieldDefinition",
    "risk_from_string",
]
