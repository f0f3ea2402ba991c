"""Tests for boolean, regex and option validators."""

from __future__ import annotations

import re

import pytest

from anngate.validators import (
    ValidationResult,
    accepted,
    rejected,
    validate_bool,
    validate_options,
    validate_regex,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("true", "true"),
        ("TRUE", "true"),
        ("True", "true"),
        ("tRuE", "true"),
        ("t", "true"),
        ("T", "true"),
        ("1", "true"),
        ("false", "false"),
        ("FALSE", "false"),
        ("False", "false"),
        ("f", "false"),
        ("F", "false"),
        ("0", "false"),
    ],
)
def test_validate_bool_accepts_canonical_spellings(raw: str, expected: str) -> None:
    assert validate_bool(raw) == ValidationResult(accepted=True, value=expected)


@pytest.mark.parametrize(
    "raw",
    ["", "yes", "no", "on", "off", "2", " true", "true ", "truee", "enabled"],
    ids=["empty", "yes", "no", "on", "off", "two", "leading-space", "trailing-space", "typo", "word"],
)
def test_validate_bool_rejects_everything_else(raw: str) -> None:
    result = validate_bool(raw)

    assert result.accepted is False
    assert result.value == ""


def test_validate_regex_requires_full_match() -> None:
    validator = validate_regex(r"[a-z]+")

    assert validator("abc").accepted is True
    assert validator("abc1").accepted is False
    assert validator("1abc").accepted is False


def test_validate_regex_rejects_trailing_newline() -> None:
    validator = validate_regex(r"^[A-Za-z0-9_\-]*$")

    assert validator("checkout\n").accepted is False


def test_validate_regex_accepts_compiled_pattern() -> None:
    validator = validate_regex(re.compile(r"^[A-Za-z0-9_\-]*$"))

    assert validator("checkout_flow-2") == accepted("checkout_flow-2")
    assert validator("bad name!") == rejected()


def test_validate_regex_allow_empty_overrides_pattern() -> None:
    validator = validate_regex(r"^[a-z]+$", allow_empty=True)

    assert validator("") == accepted("")
    assert validator("abc").accepted is True
    assert validator("ABC").accepted is False


def test_validate_regex_without_allow_empty_defers_to_pattern() -> None:
    strict = validate_regex(r"^[a-z]+$")
    permissive = validate_regex(r"^[a-z]*$")

    assert strict("").accepted is False
    assert permissive("").accepted is True


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("w3c", "w3c"),
        ("W3C", "w3c"),
        ("b3", "b3"),
        (" B3 ", "b3"),
    ],
    ids=["exact", "upper", "b3", "padded"],
)
def test_validate_options_case_insensitive_returns_declared_spelling(raw: str, expected: str) -> None:
    validator = validate_options(("w3c", "b3"))

    assert validator(raw) == accepted(expected)


def test_validate_options_rejects_unknown_option() -> None:
    validator = validate_options(("w3c", "b3"))

    assert validator("jaeger").accepted is False


def test_validate_options_case_sensitive() -> None:
    validator = validate_options(("w3c", "b3"), case_sensitive=True)

    assert validator("w3c").accepted is True
    assert validator("W3C").accepted is False


def test_validate_options_without_trim_rejects_padding() -> None:
    validator = validate_options(("w3c",), trim_space=False)

    assert validator(" w3c").accepted is False


def test_validate_options_allow_empty_is_separate_from_options() -> None:
    strict = validate_options(("w3c", "b3"))
    permissive = validate_options(("w3c", "b3"), allow_empty=True)

    assert strict("").accepted is False
    assert permissive("") == accepted("")
    assert permissive("   ") == accepted("")
    assert permissive("zipkin").accepted is False


def test_validators_never_raise_on_odd_input() -> None:
    validators = (validate_bool, validate_regex(r"^[a-z]*$"), validate_options(("a",)))
    for validator in validators:
        for raw in ("\x00", "é", "a" * 10_000, "\n"):
            assert isinstance(validator(raw), ValidationResult)
