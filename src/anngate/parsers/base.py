"""Parser interface binding an annotation group to its Config type."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from anngate.extraction import extract_config
from anngate.gate import check_annotation_risk
from anngate.model.fields import AnnotationGroup, FieldDefinition
from anngate.security.resolver import Resolver
from anngate.types.common import AnnotationSet


class AnnotationParser:
    """Base class for feature-area annotation parsers.

    Subclasses bind an :class:`AnnotationGroup` to the Config type it fills.
    """

    annotation_group: ClassVar[AnnotationGroup]
    config_type: ClassVar[type[Any]]

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Validate parser subclasses declare an annotation group and a Config type."""
        super().__init_subclass__(**kwargs)
        group = getattr(cls, "annotation_group", None)
        if not isinstance(group, AnnotationGroup):
            raise TypeError(f"{cls.__name__} must define a class attribute `annotation_group`")
        config_type = getattr(cls, "config_type", None)
        if not isinstance(config_type, type):
            raise TypeError(f"{cls.__name__} must define a class attribute `config_type`")

    def __init__(self, resolver: Resolver) -> None:
        if type(self) is AnnotationParser:
            raise TypeError("AnnotationParser cannot be instantiated directly; subclass it with an annotation_group")
        self.resolver = resolver

    @property
    def group(self) -> str:
        return self.annotation_group.name

    def parse(self, annotations: AnnotationSet) -> Any:
        """Extract this feature area's Config from ``annotations``."""
        prefix = self.resolver.get_security_configuration().annotation_prefix
        return extract_config(annotations, self.annotation_group, self.config_type, prefix)

    def validate(self, annotations: AnnotationSet) -> None:
        """Apply the risk gate using the resolver's current security configuration."""
        security = self.resolver.get_security_configuration()
        check_annotation_risk(annotations, security.max_risk, self.annotation_group, security.annotation_prefix)

    def documentation(self) -> Mapping[str, FieldDefinition]:
        return self.annotation_group.documentation()
