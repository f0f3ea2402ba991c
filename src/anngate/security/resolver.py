"""Security policy providers."""

from __future__ import annotations

from typing import Protocol

from anngate.security.model import SecurityConfiguration


class Resolver(Protocol):
    """Supplies the current security configuration to annotation parsers."""

    def get_security_configuration(self) -> SecurityConfiguration: ...


class StaticResolver:
    """Resolver returning a fixed configuration."""

    def __init__(self, config: SecurityConfiguration | None = None) -> None:
        self._config = config or SecurityConfiguration()

    def get_security_configuration(self) -> SecurityConfiguration:
        return self._config
