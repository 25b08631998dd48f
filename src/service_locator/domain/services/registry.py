"""Capability registry.

This module implements the service locator itself: a map from abstract
capabilities to zero-argument factories, with three resolution idioms
(raise on miss, None on miss, empty Resolved on miss) and existence checks.

Locking:
    One lock guards the map. Registration batches, reset, lookups and
    existence checks each hold it for the duration of the map access only.
    Factories run after the lock is released, so a factory may resolve
    other capabilities from the same registry.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from service_locator.domain.value_objects import Factory, Resolved, is_abstract_capability
from service_locator.infrastructure.logging import get_logger
from service_locator.ports.inbound import (
    InvalidRegistrationError,
    NotFoundError,
    NullArgumentError,
    describe,
)

if TYPE_CHECKING:
    from service_locator.infrastructure.metrics import RegistryMetrics

T = TypeVar("T")


class Registry:
    """Thread-safe map from abstract capabilities to factories.

    Example:
        registry = Registry()
        registry.register_singleton(SmtpMailer(), Mailer)
        registry.register_factory(lambda: PgConnection(dsn), Connection)
        mailer = registry.a(Mailer)
    """

    def __init__(
        self,
        require_abstract: bool = True,
        metrics: RegistryMetrics | None = None,
    ) -> None:
        """Initialize an empty registry.

        Args:
            require_abstract: Reject capabilities that are not ABCs or Protocols.
            metrics: Optional Prometheus metrics to record activity into.
        """
        self._lock = threading.Lock()
        self._require_abstract = require_abstract
        self._metrics = metrics
        self._factories: dict[type, Callable[[], Any]] = {}
        self._logger = get_logger(__name__)

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def reset(self) -> None:
        """Remove every registration."""
        with self._lock:
            cleared = len(self._factories)
            self._factories.clear()
            if self._metrics is not None:
                self._metrics.record_reset()
        self._logger.debug("registry_reset", cleared=cleared)

    def register_singleton(self, instance: T, *capabilities: type[Any]) -> T:
        """Register one instance as the implementation of each capability.

        Args:
            instance: The object every resolution will return.
            *capabilities: One or more abstract classes the instance satisfies.

        Returns:
            The registered instance, for chaining.

        Raises:
            NullArgumentError: If instance or any capability is None.
            InvalidRegistrationError: If no capability is given or one is not abstract.
        """
        if instance is None:
            raise NullArgumentError("implementation may not be None")
        self._store(lambda: instance, capabilities, kind="singleton")
        return instance

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
        self._store(factory, capabilities, kind="factory")
        return factory

    def _store(self, factory: Any, capabilities: tuple[Any, ...], kind: str) -> None:
        # Validate the whole batch before touching the map.
        if not capabilities:
            raise InvalidRegistrationError("at least one capability must be specified")
        if factory is None:
            raise NullArgumentError(f"{kind} may not be None")
        if not callable(factory):
            raise InvalidRegistrationError(f"{kind} must be callable, got {factory!r}")
        for capability in capabilities:
            self._check_capability(capability)

        with self._lock:
            for capability in capabilities:
                self._factories[capability] = factory
            # Gauge must match the map it was read from.
            if self._metrics is not None:
                self._metrics.record_registration(kind, len(self._factories))

        self._logger.debug(
            "capabilities_registered",
            kind=kind,
            capabilities=[describe(c) for c in capabilities],
        )

    def _check_capability(self, capability: Any) -> None:
        if capability is None:
            raise NullArgumentError("null capability specified")
        if self._require_abstract:
            if not is_abstract_capability(capability):
                raise InvalidRegistrationError(
                    "services can only be registered against abstract capabilities: "
                    f"{describe(capability)}"
                )
        elif not isinstance(capability, type):
            raise InvalidRegistrationError(
                f"capabilities must be classes: {describe(capability)}"
            )

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def _lookup(self, capability: Any) -> Callable[[], Any] | None:
        with self._lock:
            factory = self._factories.get(capability)
        if self._metrics is not None:
            self._metrics.record_resolution(hit=factory is not None)
        return factory

    def resolve(self, capability: type[T]) -> T:
        """Return an implementation of the capability.

        Args:
            capability: The abstract class an implementation is wanted for.

        Returns:
            The singleton, or a fresh product of the registered factory.

        Raises:
            NotFoundError: If nothing is registered for the capability.
        """
        factory = self._lookup(capability)
        if factory is None:
            raise NotFoundError(capability)
        return factory()

    def a(self, capability: type[T]) -> T:
        """Alias of resolve(), e.g. ``registry.a(Mailer)``."""
        return self.resolve(capability)

    def an(self, capability: type[T]) -> T:
        """Alias of resolve(), e.g. ``registry.an(EventBus)``."""
        return self.resolve(capability)

    def resolve_or_none(self, capability: type[T]) -> T | None:
        """Return an implementation of the capability, or None if unregistered."""
        factory = self._lookup(capability)
        if factory is None:
            return None
        return factory()

    def optional(self, capability: type[T]) -> Resolved[T]:
        """Return a present Resolved, or an empty one if unregistered.

        Errors raised by the factory itself propagate.
        """
        factory = self._lookup(capability)
        if factory is None:
            return Resolved.empty(capability)
        return Resolved.of(factory(), capability)

    # -------------------------------------------------------------------------
    # Existence checks
    # -------------------------------------------------------------------------

    def require_all(self, *capabilities: type[Any]) -> None:
        """Check that every capability has a registration.

        None is rejected before any lookup, so a missing registration can
        never hide it. The remaining checks run in order under one lock
        acquisition.

        Raises:
            NullArgumentError: If any capability is None.
            NotFoundError: For the first capability without a registration.
        """
        if any(capability is None for capability in capabilities):
            raise NullArgumentError("null capability specified as required")
        with self._lock:
            for capability in capabilities:
                if capability not in self._factories:
                    raise NotFoundError(capability)

    def has_all(self, *capabilities: type[Any]) -> bool:
        """Return True if every capability has a registration.

        Only a missing registration yields False; a None capability is a
        caller error and raises NullArgumentError.
        """
        try:
            self.require_all(*capabilities)
        except NotFoundError:
            return False
        return True

    def __contains__(self, capability: object) -> bool:
        if capability is None:
            return False
        with self._lock:
            return capability in self._factories

    def __len__(self) -> int:
        with self._lock:
            return len(self._factories)

    def snapshot(self) -> list[str]:
        """Return the sorted qualified names of registered capabilities."""
        with self._lock:
            capabilities = list(self._factories)
        return sorted(describe(c) for c in capabilities)
