"""Value validators for annotation fields.

A validator takes the raw annotation string and returns a
:class:`ValidationResult`. Validators never raise; rejection is a value.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from anngate.constants.annotations import (
    BOOL_FALSE_VALUES,
    BOOL_TRUE_VALUES,
    CANONICAL_FALSE,
    CANONICAL_TRUE,
)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validator: accepted with a normalized value, or rejected."""

    accepted: bool
    value: str = ""


_REJECTED = ValidationResult(accepted=False)

type Validator = Callable[[str], ValidationResult]


def accepted(value: str) -> ValidationResult:
    """Build an accepting result carrying the normalized value."""
    return ValidationResult(accepted=True, value=value)


def rejected() -> ValidationResult:
    """Return the shared rejecting result."""
    return _REJECTED


def validate_bool(raw: str) -> ValidationResult:
    """Accept ``true``/``t``/``1`` and ``false``/``f``/``0`` in any letter case.

    Surrounding whitespace is not stripped. The normalized value is always the
    canonical ``"true"`` or ``"false"``.
    """
    lowered = raw.lower()
    if lowered in BOOL_TRUE_VALUES:
        return accepted(CANONICAL_TRUE)
    if lowered in BOOL_FALSE_VALUES:
        return accepted(CANONICAL_FALSE)
    return rejected()


def validate_regex(pattern: re.Pattern[str] | str, allow_empty: bool = False) -> Validator:
    """Build a validator accepting values that fully match ``pattern``.

    With ``allow_empty`` the empty string is accepted even when the pattern
    would reject it.
    """
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    def _validate(raw: str) -> ValidationResult:
        if raw == "" and allow_empty:
            return accepted(raw)
        if compiled.fullmatch(raw) is None:
            return rejected()
        return accepted(raw)

    return _validate


def validate_options(
    options: Iterable[str],
    case_sensitive: bool = False,
    trim_space: bool = True,
    allow_empty: bool = False,
) -> Validator:
    """Build a validator accepting one of a fixed set of options.

    The normalized value is the option as spelled in ``options``, so a
    case-insensitive match on ``W3C`` yields ``w3c``.
    """
    allowed = tuple(options)
    lookup = {option if case_sensitive else option.lower(): option for option in allowed}

    def _validate(raw: str) -> ValidationResult:
        value = raw.strip() if trim_space else raw
        if value == "" and allow_empty:
            return accepted("")
        key = value if case_sensitive else value.lower()
        option = lookup.get(key)
        if option is None:
            return rejected()
        return accepted(option)

    return _validate
