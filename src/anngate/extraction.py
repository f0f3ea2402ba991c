"""Extraction of typed configuration from an annotation set.

Every field of a group is resolved independently: a missing annotation
silently yields the zero value, an invalid one logs a warning and yields the
same zero value, and a valid one yields the converted value with its set flag
raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from anngate.constants.annotations import CANONICAL_TRUE
from anngate.model.fields import AnnotationGroup, FieldDefinition
from anngate.types.common import AnnotationSet, FieldValue
from anngate.utils.naming import annotation_with_prefix

logger = logging.getLogger(__name__)


class LookupStatus(Enum):
    """Resolution state of a single annotation."""

    MISSING = "missing"
    INVALID = "invalid"
    VALID = "valid"


@dataclass(frozen=True)
class FieldLookup:
    """Result of looking up one field in an annotation set."""

    field: FieldDefinition
    annotation: str
    status: LookupStatus
    value: FieldValue

    @property
    def is_set(self) -> bool:
        return self.status is LookupStatus.VALID


def lookup_annotation(
    field: FieldDefinition,
    annotations: AnnotationSet,
    prefix: str = "",
) -> FieldLookup:
    """Resolve one field against ``annotations`` without logging."""
    name = annotation_with_prefix(field.key, prefix)
    raw = annotations.get(name)
    if raw is None:
        return FieldLookup(field=field, annotation=name, status=LookupStatus.MISSING, value=field.zero_value)

    result = field.validator(raw)
    if not result.accepted:
        return FieldLookup(field=field, annotation=name, status=LookupStatus.INVALID, value=field.zero_value)

    value: FieldValue = result.value == CANONICAL_TRUE if field.kind == "bool" else result.value
    return FieldLookup(field=field, annotation=name, status=LookupStatus.VALID, value=value)


def extract_values(
    annotations: AnnotationSet,
    group: AnnotationGroup,
    prefix: str = "",
) -> dict[str, FieldValue]:
    """Resolve every field of ``group`` into Config constructor keyword arguments."""
    values: dict[str, FieldValue] = {}
    for field in group.fields:
        lookup = lookup_annotation(field, annotations, prefix)
        if lookup.status is LookupStatus.INVALID:
            logger.warning("annotation %s contains invalid directive, defaulting", lookup.annotation)
        values[field.attribute] = lookup.value
        if field.set_attribute is not None:
            values[field.set_attribute] = lookup.is_set
    return values


def extract_config[ConfigT](
    annotations: AnnotationSet,
    group: AnnotationGroup,
    config_type: type[ConfigT],
    prefix: str = "",
) -> ConfigT:
    """Build a complete ``config_type`` instance from ``annotations``."""
    values: dict[str, Any] = extract_values(annotations, group, prefix)
    return config_type(**values)
