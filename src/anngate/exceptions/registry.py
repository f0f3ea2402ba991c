"""Registry construction exceptions."""

from __future__ import annotations

from anngate.exceptions.base import AnngateError


class RegistryError(AnngateError, ValueError):
    """Raised when an annotation group is declared with conflicting or malformed fields."""
