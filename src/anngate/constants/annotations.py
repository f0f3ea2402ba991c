"""Annotation naming and boolean spelling constants."""

from __future__ import annotations

import re

DEFAULT_ANNOTATION_PREFIX: str = ""
ANNOTATION_PREFIX_SEPARATOR: str = "/"

GROUP_NAME_PATTERN: re.Pattern[str] = re.compile(r"^[a-z][a-z0-9]*(-[a-z0-9]+)*$")
ATTRIBUTE_NAME_PATTERN: re.Pattern[str] = re.compile(r"^[a-z_][a-z0-9_]*$")

# Compared after lowercasing the raw value.
BOOL_TRUE_VALUES: frozenset[str] = frozenset({"true", "t", "1"})
BOOL_FALSE_VALUES: frozenset[str] = frozenset({"false", "f", "0"})

CANONICAL_TRUE: str = "true"
CANONICAL_FALSE: str = "false"

BOOL_ZERO_VALUE: bool = False
STRING_ZERO_VALUE: str = ""
