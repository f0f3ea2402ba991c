"""Risk policy exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from anngate.exceptions.base import AnngateError

if TYPE_CHECKING:
    from anngate.model.risk import AnnotationRisk


class RiskViolationError(AnngateError, ValueError):
    """Raised when an annotation set references fields above the allowed risk level.

    This is a hard failure: the caller must not apply the configuration at all,
    which is different from applying defaults.
    """

    def __init__(self, keys: tuple[str, ...], max_risk: AnnotationRisk) -> None:
        self.keys = keys
        self.max_risk = max_risk
        joined = ", ".join(keys)
        super().__init__(f"annotations too risky for environment (max risk {max_risk.label}): {joined}")
