"""Security policy configuration and providers."""

from __future__ import annotations

from anngate.security.loader import load_security_config
from anngate.security.model import SecurityConfiguration
from anngate.security.resolver import Resolver, StaticResolver

__all__ = [
    "Resolver",
    "SecurityConfiguration",
    "StaticResolver",
    "load_security_config",
]
