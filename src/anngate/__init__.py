"""Annotation-driven configuration extraction with risk-gated validation.

The package facade re-exports the names callers need to declare a field
group, extract a Config from an annotation set and screen it against the
security policy.
"""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from anngate.exceptions import AnngateError, ConfigError, RegistryError, RiskViolationError
from anngate.extraction import extract_config, lookup_annotation
from anngate.gate import check_annotation_risk
from anngate.model import AnnotationGroup, AnnotationRisk, AnnotationScope, FieldDefinition, risk_from_string
from anngate.parsers import AnnotationParser, OpenTelemetryConfig, OpenTelemetryParser, build_parsers
from anngate.security import Resolver, SecurityConfiguration, StaticResolver, load_security_config

try:
    __version__ = version("anngate")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AnnotationGroup",
    "AnnotationParser",
    "AnnotationRisk",
    "AnnotationScope",
    "AnngateError",
    "ConfigError",
    "FieldDefinition",
    "OpenTelemetryConfig",
    "OpenTelemetryParser",
    "RegistryError",
    "Resolver",
    "RiskViolationError",
    "SecurityConfiguration",
    "StaticResolver",
    "__version__",
    "build_parsers",
    "check_annotation_risk",
    "extract_config",
    "load_security_config",
    "lookup_annotation",
    "risk_from_string",
]
