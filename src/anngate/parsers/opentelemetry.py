"""OpenTelemetry tracing annotations."""

from __future__ import annotations

from dataclasses import dataclass

from anngate.constants.opentelemetry import (
    ENABLE_OPENTELEMETRY_ANNOTATION,
    OPENTELEMETRY_GROUP,
    OPERATION_NAME_PATTERN,
    OTEL_OPERATION_NAME_ANNOTATION,
    OTEL_PROPAGATION_TYPE_ANNOTATION,
    OTEL_TRUST_SPAN_ANNOTATION,
    PROPAGATION_TYPES,
)
from anngate.model.fields import AnnotationGroup, FieldDefinition
from anngate.model.risk import AnnotationRisk, AnnotationScope
from anngate.parsers.base import AnnotationParser
from anngate.types.common import AnnotationSet, JsonObject
from anngate.validators import validate_bool, validate_options, validate_regex

OPENTELEMETRY_ANNOTATIONS = AnnotationGroup(
    OPENTELEMETRY_GROUP,
    (
        FieldDefinition(
            key=ENABLE_OPENTELEMETRY_ANNOTATION,
            validator=validate_bool,
            scope=AnnotationScope.LOCATION,
            risk=AnnotationRisk.LOW,
            documentation="""This annotation defines if the OpenTelemetry collector should be enabled for this
            location. OpenTelemetry should already be configured by the administrator.""",
            kind="bool",
            attribute="enabled",
            set_attribute="set",
        ),
        FieldDefinition(
            key=OTEL_TRUST_SPAN_ANNOTATION,
            validator=validate_bool,
            scope=AnnotationScope.LOCATION,
            risk=AnnotationRisk.LOW,
            documentation=(
                "This annotation enables or disables using spans from incoming requests as parent for created ones."
            ),
            kind="bool",
            attribute="trust_enabled",
            set_attribute="trust_set",
        ),
        FieldDefinition(
            key=OTEL_OPERATION_NAME_ANNOTATION,
            validator=validate_regex(OPERATION_NAME_PATTERN, allow_empty=True),
            scope=AnnotationScope.LOCATION,
            risk=AnnotationRisk.MEDIUM,
            documentation="This annotation defines what operation name should be added to the span.",
            kind="string",
            attribute="operation_name",
        ),
        FieldDefinition(
            key=OTEL_PROPAGATION_TYPE_ANNOTATION,
            validator=validate_options(PROPAGATION_TYPES, case_sensitive=False, trim_space=True),
            scope=AnnotationScope.LOCATION,
            risk=AnnotationRisk.LOW,
            documentation="This annotation defines what propagation type should be used for the span.",
            kind="string",
            attribute="propagation_type",
        ),
    ),
)


@dataclass(frozen=True)
class OpenTelemetryConfig:
    """Tracing configuration for one location.

    ``set`` and ``trust_set`` record whether a valid value was supplied for
    the corresponding boolean, so an explicit ``false`` can be told apart from
    a missing annotation.
    """

    enabled: bool = False
    set: bool = False
    trust_enabled: bool = False
    trust_set: bool = False
    operation_name: str = ""
    propagation_type: str = ""

    def to_dict(self) -> JsonObject:
        return {
            "enabled": self.enabled,
            "set": self.set,
            "trust-enabled": self.trust_enabled,
            "trust-set": self.trust_set,
            "operation-name": self.operation_name,
            "propagation-type": self.propagation_type,
        }


class OpenTelemetryParser(AnnotationParser):
    """Parses ``opentelemetry`` annotations into :class:`OpenTelemetryConfig`."""

    annotation_group = OPENTELEMETRY_ANNOTATIONS
    config_type = OpenTelemetryConfig

    def parse(self, annotations: AnnotationSet) -> OpenTelemetryConfig:
        return super().parse(annotations)
