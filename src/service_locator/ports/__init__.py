"""Ports layer - interface definitions following Hexagonal Architecture.

Ports are abstract interfaces (protocols) that define contracts:
- Inbound ports: APIs offered to clients (e.g., ServiceLocator)

The domain Registry implements these ports.
"""

from service_locator.ports.inbound import (
    InvalidRegistrationError,
    NotFoundError,
    NullArgumentError,
    RegistryError,
    ServiceLocator,
)

__all__ = [
    "InvalidRegistrationError",
    "NotFoundError",
    "NullArgumentError",
    "RegistryError",
    "ServiceLocator",
]
