"""Risk level names and security policy defaults."""

from __future__ import annotations

RISK_LEVEL_NAMES: tuple[str, ...] = ("Low", "Medium", "High", "Critical")

DEFAULT_ANNOTATIONS_RISK_LEVEL: str = "High"
