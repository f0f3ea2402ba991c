"""Annotation names and value constraints for the OpenTelemetry group."""

from __future__ import annotations

import re

OPENTELEMETRY_GROUP: str = "opentelemetry"

ENABLE_OPENTELEMETRY_ANNOTATION: str = "enable-opentelemetry"
OTEL_TRUST_SPAN_ANNOTATION: str = "opentelemetry-trust-incoming-span"
OTEL_OPERATION_NAME_ANNOTATION: str = "opentelemetry-operation-name"
OTEL_PROPAGATION_TYPE_ANNOTATION: str = "opentelemetry-propagation-type"

OPERATION_NAME_PATTERN: re.Pattern[str] = re.compile(r"^[A-Za-z0-9_\-]*$")

PROPAGATION_TYPES: tuple[str, ...] = ("w3c", "b3")
