"""Configuration-related exceptions."""

from __future__ import annotations

from anngate.exceptions.base import AnngateError


class ConfigError(AnngateError, ValueError):
    """Raised when the security configuration is invalid."""
