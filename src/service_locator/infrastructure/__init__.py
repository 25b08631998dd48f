"""Infrastructure layer - cross-cutting concerns."""

from service_locator.infrastructure.config import Config, get_config
from service_locator.infrastructure.container import (
    Provider,
    create_registry,
    get_registry,
    reset_registry,
)
from service_locator.infrastructure.logging import get_logger, setup_logging
from service_locator.infrastructure.metrics import RegistryMetrics, get_metrics

__all__ = [
    "Config",
    "get_config",
    "Provider",
    "create_registry",
    "get_registry",
    "reset_registry",
    "setup_logging",
    "get_logger",
    "RegistryMetrics",
    "get_metrics",
]
