"""Shared exception hierarchy for Anngate."""

from __future__ import annotations

from .base import AnngateError
from .config import ConfigError
from .registry import RegistryError
from .risk import RiskViolationError

__all__ = [
    "AnngateError",
    "ConfigError",
    "RegistryError",
    "RiskViolationError",
]
