"""Security configuration model."""

from __future__ import annotations

from dataclasses import dataclass

from anngate.constants.annotations import DEFAULT_ANNOTATION_PREFIX
from anngate.constants.risk import DEFAULT_ANNOTATIONS_RISK_LEVEL
from anngate.model.risk import AnnotationRisk, risk_from_string


@dataclass(frozen=True)
class SecurityConfiguration:
    """Administrator-controlled settings consulted by the risk gate."""

    annotations_risk_level: str = DEFAULT_ANNOTATIONS_RISK_LEVEL
    annotation_prefix: str = DEFAULT_ANNOTATION_PREFIX

    @property
    def max_risk(self) -> AnnotationRisk:
        """Highest field risk an annotation set may reference."""
        return risk_from_string(self.annotations_risk_level)
