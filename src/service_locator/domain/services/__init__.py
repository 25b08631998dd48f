"""Domain services for the service locator."""

from service_locator.domain.services.registry import Registry

__all__ = ["Registry"]
