"""Inbound ports - API contracts for the service locator.

Inbound ports define the interface that application code uses to
register implementations of abstract capabilities and to resolve them
later without knowing which concrete class was wired in.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

if TYPE_CHECKING:
    from service_locator.domain.value_objects import Factory, Resolved

T = TypeVar("T")


# =============================================================================
# Service Locator Port
# =============================================================================


class ServiceLocator(Protocol):
    """Protocol for capability registration and resolution.

    A capability is an abstract class (an ``abc.ABC`` subclass or a
    ``typing.Protocol``). Each capability maps to a zero-argument factory;
    registering a singleton stores a factory that always returns the
    same object.

    Thread Safety:
        All methods must be thread-safe. Registration batches are applied
        atomically and factories are invoked without holding any lock.

    Example:
        locator.register_singleton(SmtpMailer(), Mailer)
        mailer = locator.a(Mailer)
    """

    @abstractmethod
    def reset(self) -> None:
        """Remove every registration."""
        ...

    @abstractmethod
    def register_singleton(self, instance: T, *capabilities: type[Any]) -> T:
        """Register one instance as the implementation of each capability.

        Args:
            instance: The object every resolution will return.
            *capabilities: One or more abstract classes the instance satisfies.

        Returns:
            The registered instance.

        Raises:
            NullArgumentError: If instance or any capability is None.
            InvalidRegistrationError: If no capability is given or one is not abstract.
        """
        ...

    @abstractmethod
    def register_factory(self, factory: Factory[T], *capabilities: type[Any]) -> Factory[T]:
        """Register a factory invoked on every resolution of each capability.

        Args:
            factory: Zero-argument callable producing an implementation.
            *capabilities: One or more abstract classes the products satisfy.

        Returns:
            The registered factory.

        Raises:
            NullArgumentError: If factory or any capability is None.
            InvalidRegistrationError: If no capability is given, one is not
                abstract, or the factory is not callable.
        """
        ...

    @abstractmethod
    def resolve(self, capability: type[T]) -> T:
        """Return an implementation of the capability.

        Raises:
            NotFoundError: If nothing is registered for the capability.
        """
        ...

    @abstractmethod
    def resolve_or_none(self, capability: type[T]) -> T | None:
        """Return an implementation of the capability, or None if unregistered."""
        ...

    @abstractmethod
    def optional(self, capability: type[T]) -> Resolved[T]:
        """Return a Resolved wrapper that is empty if the capability is unregistered."""
        ...

    @abstractmethod
    def require_all(self, *capabilities: type[Any]) -> None:
        """Check that every capability has a registration.

        Raises:
            NullArgumentError: If any capability is None.
            NotFoundError: For the first capability without a registration.
        """
        ...

    @abstractmethod
    def has_all(self, *capabilities: type[Any]) -> bool:
        """Return True if every capability has a registration.

        Raises:
            NullArgumentError: If any capability is None.
        """
        ...


# =============================================================================
# Errors
# =============================================================================


class RegistryError(Exception):
    """Base class for service locator errors."""

    pass


class InvalidRegistrationError(RegistryError, ValueError):
    """Raised when a registration call is malformed.

    Covers an empty capability list, a capability that is not an abstract
    contract, and a factory that is not callable. Nothing is registered.
    """

    pass


class NullArgumentError(RegistryError, TypeError):
    """Raised when an instance, factory or capability is None."""

    pass


class NotFoundError(RegistryError, LookupError):
    """Raised when no implementation is registered for a capability."""

    def __init__(self, capability: Any) -> None:
        self.capability = capability
        super().__init__(f"implementation not found: {describe(capability)}")


def describe(capability: Any) -> str:
    """Return a readable qualified name for a capability."""
    if isinstance(capability, type):
        return f"{capability.__module__}.{capability.__qualname__}"
    return repr(capability)
