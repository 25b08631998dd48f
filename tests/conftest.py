"""Pytest configuration and fixtures for service_locator tests."""

from __future__ import annotations

from typing import Generator

import pytest
import structlog
from prometheus_client import CollectorRegistry

from service_locator.domain.services import Registry
from service_locator.infrastructure.config import get_config
from service_locator.infrastructure.container import reset_registry
from service_locator.infrastructure.metrics import RegistryMetrics


@pytest.fixture(autouse=True)
def reset_default_registry() -> Generator[None, None, None]:
    """Reset the process-wide registry, cached config and logging around each test."""
    reset_registry()
    get_config.cache_clear()
    yield
    reset_registry()
    get_config.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def registry() -> Generator[Registry, None, None]:
    """Provide a fresh, isolated registry for each test."""
    r = Registry()
    yield r
    r.reset()


@pytest.fixture
def metrics() -> RegistryMetrics:
    """Provide metrics bound to a private collector registry."""
    # Use a separate registry to avoid conflicts between tests
    return RegistryMetrics(registry=CollectorRegistry(auto_describe=True))


@pytest.fixture
def collector(metrics: RegistryMetrics) -> CollectorRegistry:
    """The collector registry behind the metrics fixture."""
    return metrics._registry


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "slow: Slow tests")
