"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Literal

type AnnotationSet = Mapping[str, str]
type FieldKind = Literal["bool", "string"]
type FieldValue = bool | str

type JsonScalar = str | int | float | bool | None
type JsonValue = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
type JsonObject = dict[str, JsonValue]
