"""Annotation parser package for Anngate."""

from .base import AnnotationParser
from .opentelemetry import OPENTELEMETRY_ANNOTATIONS, OpenTelemetryConfig, OpenTelemetryParser
from .registry import build_parsers

__all__ = [
    "OPENTELEMETRY_ANNOTATIONS",
    "AnnotationParser",
    "OpenTelemetryConfig",
    "OpenTelemetryParser",
    "build_parsers",
]
