"""Declarative field definitions and annotation group registries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from anngate.constants.annotations import (
    ATTRIBUTE_NAME_PATTERN,
    BOOL_ZERO_VALUE,
    GROUP_NAME_PATTERN,
    STRING_ZERO_VALUE,
)
from anngate.exceptions import RegistryError
from anngate.model.risk import AnnotationRisk, AnnotationScope
from anngate.types.common import FieldKind, FieldValue, JsonObject
from anngate.validators import Validator


@dataclass(frozen=True)
class FieldDefinition:
    """One annotation: where it is read from, how it is validated, where it lands."""

    key: str
    validator: Validator
    scope: AnnotationScope
    risk: AnnotationRisk
    documentation: str
    kind: FieldKind
    attribute: str
    set_attribute: str | None = None

    @property
    def zero_value(self) -> FieldValue:
        """Value assigned when the annotation is missing or invalid."""
        return BOOL_ZERO_VALUE if self.kind == "bool" else STRING_ZERO_VALUE

    def to_dict(self) -> JsonObject:
        """Serialize for documentation export."""
        return {
            "key": self.key,
            "scope": self.scope.value,
            "risk": self.risk.label,
            "documentation": " ".join(self.documentation.split()),
        }


class AnnotationGroup:
    """Read-only registry of the field definitions for one feature group.

    Field keys and Config attribute names are unique within a group; the group
    is validated once at construction and never mutated afterwards.
    """

    __slots__ = ("_by_key", "_fields", "_name")

    def __init__(self, name: str, fields: Iterable[FieldDefinition]) -> None:
        if not GROUP_NAME_PATTERN.match(name):
            raise RegistryError(f"group name must be lowercase kebab-case (got {name!r})")
        definitions = tuple(fields)

        by_key: dict[str, FieldDefinition] = {}
        attributes: set[str] = set()
        for definition in definitions:
            if definition.key in by_key:
                raise RegistryError(f"duplicate annotation key {definition.key!r} in group {name!r}")
            if definition.kind not in ("bool", "string"):
                raise RegistryError(f"field {definition.key!r} has unsupported kind {definition.kind!r}")
            targets = [definition.attribute]
            if definition.set_attribute is not None:
                targets.append(definition.set_attribute)
            for target in targets:
                if not ATTRIBUTE_NAME_PATTERN.match(target):
                    raise RegistryError(f"field {definition.key!r} targets invalid attribute name {target!r}")
                if target in attributes:
                    raise RegistryError(f"attribute {target!r} is assigned by more than one field in group {name!r}")
                attributes.add(target)
            by_key[definition.key] = definition

        self._name = name
        self._fields = definitions
        self._by_key: Mapping[str, FieldDefinition] = MappingProxyType(by_key)

    @property
    def name(self) -> str:
        """Group name, e.g. ``opentelemetry``."""
        return self._name

    @property
    def fields(self) -> tuple[FieldDefinition, ...]:
        """All field definitions in declaration order."""
        return self._fields

    def get(self, key: str) -> FieldDefinition | None:
        return self._by_key.get(key)

    def keys(self) -> tuple[str, ...]:
        return tuple(self._by_key)

    def documentation(self) -> Mapping[str, FieldDefinition]:
        """Read-only mapping of annotation key to its definition."""
        return self._by_key

    def to_dict(self) -> JsonObject:
        """Serialize the whole group for documentation export."""
        return {
            "group": self._name,
            "annotations": [definition.to_dict() for definition in self._fields],
        }

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __iter__(self) -> Iterator[FieldDefinition]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"AnnotationGroup(name={self._name!r}, keys={list(self._by_key)!r})"
