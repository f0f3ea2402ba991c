"""Root exception for Anngate."""

from __future__ import annotations


class AnngateError(Exception):
    """Base class for all errors raised by Anngate."""
