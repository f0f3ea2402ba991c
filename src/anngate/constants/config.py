"""Security configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "anngate.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "annotations_risk_level",
        "annotation_prefix",
    }
)
