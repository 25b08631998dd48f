"""
Service Locator - capability registry for dependency inversion

Maps abstract capabilities (ABCs and Protocols) to factories that produce
their implementations, so application code can depend on contracts without
knowing which concrete implementation is wired in.
"""

from service_locator.adapters.inbound.facade import (
    a,
    an,
    has_all,
    optional,
    register_factory,
    register_singleton,
    require_all,
    reset,
    resolve,
    resolve_or_none,
)
from service_locator.domain.services import Registry
from service_locator.domain.value_objects import Resolved
from service_locator.infrastructure.container import Provider, get_registry, reset_registry
from service_locator.ports.inbound import (
    InvalidRegistrationError,
    NotFoundError,
    NullArgumentError,
    RegistryError,
    ServiceLocator,
)

__version__ = "0.1.0"
__author__ = "Systems Engineering Portfolio"

__all__ = [
    "InvalidRegistrationError",
    "NotFoundError",
    "NullArgumentError",
    "Provider",
    "Registry",
    "RegistryError",
    "Resolved",
    "ServiceLocator",
    "a",
    "an",
    "get_registry",
    "has_all",
    "optional",
    "register_factory",
    "register_singleton",
    "require_all",
    "reset",
    "reset_registry",
    "resolve",
    "resolve_or_none",
]
