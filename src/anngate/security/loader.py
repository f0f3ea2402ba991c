"""Security configuration loading from ``anngate.yaml``."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from anngate.constants.annotations import DEFAULT_ANNOTATION_PREFIX
from anngate.constants.config import ALLOWED_CONFIG_KEYS, CONFIG_FILENAME
from anngate.constants.risk import DEFAULT_ANNOTATIONS_RISK_LEVEL, RISK_LEVEL_NAMES
from anngate.exceptions import ConfigError
from anngate.security.model import SecurityConfiguration


def load_security_config(root: Path, config_path: Path | None = None) -> SecurityConfiguration:
    """Load and validate security config from ``anngate.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return SecurityConfiguration()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            message = f"unknown key `{key}` in {path}"
            hint = _suggest_key(str(key), ALLOWED_CONFIG_KEYS)
            if hint:
                message = f"{message} ({hint})"
            raise ConfigError(message)

    return SecurityConfiguration(
        annotations_risk_level=_parse_risk_level(raw.get("annotations_risk_level", DEFAULT_ANNOTATIONS_RISK_LEVEL)),
        annotation_prefix=_parse_prefix(raw.get("annotation_prefix", DEFAULT_ANNOTATION_PREFIX)),
    )


def _parse_risk_level(value: Any) -> str:
    """Return the canonical spelling of a risk level name."""
    if not isinstance(value, str):
        raise ConfigError("annotations_risk_level must be a string")
    for name in RISK_LEVEL_NAMES:
        if value.strip().lower() == name.lower():
            return name
    raise ConfigError(f"annotations_risk_level must be one of {list(RISK_LEVEL_NAMES)}, got {value!r}")


def _parse_prefix(value: Any) -> str:
    if value is None:
        return DEFAULT_ANNOTATION_PREFIX
    if not isinstance(value, str):
        raise ConfigError("annotation_prefix must be a string")
    prefix = value.strip().rstrip("/")
    if any(ch.isspace() for ch in prefix):
        raise ConfigError(f"annotation_prefix must not contain whitespace, got {value!r}")
    return prefix


def _suggest_key(key: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean' hint for a misspelled key, or empty string."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
