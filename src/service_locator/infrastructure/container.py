"""Default process-wide registry and lazy providers."""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

from service_locator.domain.services import Registry
from service_locator.infrastructure.config import Config, get_config
from service_locator.infrastructure.logging import setup_logging
from service_locator.infrastructure.metrics import get_metrics

T = TypeVar("T")


def create_registry(config: Config | None = None) -> Registry:
    """
    Build a registry from configuration.

    Applies the observability settings to structlog, so the registry's
    debug events only appear when log_level is DEBUG.

    Args:
        config: Configuration to apply (defaults to the global configuration)

    Returns:
        An empty registry
    """
    config = config or get_config()
    setup_logging(
        level=config.observability.log_level,
        log_format=config.observability.log_format,
    )
    metrics = get_metrics() if config.observability.metrics_enabled else None
    return Registry(
        require_abstract=config.registry.require_abstract,
        metrics=metrics,
    )


class Provider(Generic[T]):
    """
    Lazy capability provider.

    Declares a dependency up front and resolves it on every call, so a
    provider created before wiring works once the capability is registered.
    Factory registrations still produce a fresh instance per call.
    """

    def __init__(self, capability: type[T], registry: Registry | None = None) -> None:
        """
        Initialize the provider.

        Args:
            capability: The capability to provide
            registry: Registry to resolve from (defaults to the process-wide registry)
        """
        self._capability = capability
        self._registry = registry

    @property
    def capability(self) -> type[T]:
        return self._capability

    def get(self) -> T:
        """Resolve the capability now."""
        registry = self._registry if self._registry is not None else get_registry()
        return registry.resolve(self._capability)

    def __call__(self) -> T:
        """Callable shorthand for get()."""
        return self.get()


# Global registry instance
_registry: Registry | None = None
_registry_lock = threading.Lock()


def get_registry() -> Registry:
    """Get the process-wide registry, creating it on first use."""
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = create_registry()
        return _registry


def reset_registry() -> None:
    """Reset the process-wide registry (useful for testing)."""
    global _registry
    with _registry_lock:
        if _registry is not None:
            _registry.reset()
        _registry = None
