"""Risk classification and scope enums for annotation fields."""

from __future__ import annotations

import logging
from enum import IntEnum, StrEnum

logger = logging.getLogger(__name__)


class AnnotationRisk(IntEnum):
    """Coarse sensitivity classification, totally ordered from LOW to CRITICAL."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2
    CRITICAL = 3

    @property
    def label(self) -> str:
        """Title-cased name as written in security configuration (``High``)."""
        return self.name.capitalize()


class AnnotationScope(StrEnum):
    """Where an annotation may legally apply."""

    LOCATION = "location"
    INGRESS = "ingress"


def risk_from_string(text: str) -> AnnotationRisk:
    """Map a risk level name to :class:`AnnotationRisk`, case-insensitively.

    Unknown names resolve to ``LOW``, the most restrictive ceiling.
    """
    try:
        return AnnotationRisk[text.strip().upper()]
    except KeyError:
        logger.debug("Unknown risk level %r, using Low", text)
        return AnnotationRisk.LOW
