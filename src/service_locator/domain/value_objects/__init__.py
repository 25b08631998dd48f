"""Value objects for the service locator domain.

Exports:
    Capabilities:
        - Capability: An abstract class used as a registration key
        - Factory: Zero-argument callable producing an implementation
        - is_abstract_capability: Check that a class is an abstract contract

    Resolution:
        - Resolved: Immutable optional wrapper around a resolved instance
"""

from service_locator.domain.value_objects.capability import (
    Capability,
    Factory,
    is_abstract_capability,
)
from service_locator.domain.value_objects.resolved import Resolved

__all__ = [
    # Capabilities
    "Capability",
    "Factory",
    "is_abstract_capability",
    # Resolution
    "Resolved",
]
