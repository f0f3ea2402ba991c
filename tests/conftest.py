"""Shared pytest fixtures for annotation groups, configs and resolvers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest

from anngate.model import AnnotationGroup, AnnotationRisk, AnnotationScope, FieldDefinition
from anngate.security import SecurityConfiguration, StaticResolver
from anngate.validators import validate_bool, validate_regex


@dataclass(frozen=True)
class ExampleConfig:
    """Config for the two-field ``x`` test group."""

    enabled: bool = False
    set: bool = False
    operation_name: str = ""


@pytest.fixture(scope="session")
def schemas_root() -> Path:
    """Return the directory holding the JSON Schema documents."""
    return Path(__file__).resolve().parents[1] / "schemas"


@pytest.fixture(scope="session")
def example_group() -> AnnotationGroup:
    """A low-risk boolean and a medium-risk regex-constrained string."""
    return AnnotationGroup(
        "x",
        (
            FieldDefinition(
                key="enable-x",
                validator=validate_bool,
                scope=AnnotationScope.LOCATION,
                risk=AnnotationRisk.LOW,
                documentation="Enables x.",
                kind="bool",
                attribute="enabled",
                set_attribute="set",
            ),
            FieldDefinition(
                key="x-operation-name",
                validator=validate_regex(r"^[A-Za-z0-9_\-]*$"),
                scope=AnnotationScope.LOCATION,
                risk=AnnotationRisk.MEDIUM,
                documentation="Operation name for x.",
                kind="string",
                attribute="operation_name",
            ),
        ),
    )


@pytest.fixture(scope="session")
def example_config_type() -> type[ExampleConfig]:
    return ExampleConfig


@pytest.fixture()
def make_resolver() -> Callable[..., StaticResolver]:
    """Build a StaticResolver from SecurityConfiguration keyword arguments."""

    def _make(**kwargs: str) -> StaticResolver:
        return StaticResolver(SecurityConfiguration(**kwargs))

    return _make
