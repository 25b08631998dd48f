"""Prometheus metrics for the service locator."""

from __future__ import annotations

from functools import lru_cache

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Gauge


class RegistryMetrics:
    """Counters and gauges describing registry activity."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics, registering them with the given collector registry."""
        self._registry = registry or REGISTRY

        self.registrations_total = Counter(
            "service_locator_registrations_total",
            "Total number of registration calls",
            ["kind"],  # singleton, factory
            registry=self._registry,
        )

        self.resolutions_total = Counter(
            "service_locator_resolutions_total",
            "Total number of capability lookups",
            ["outcome"],  # hit, miss
            registry=self._registry,
        )

        self.resets_total = Counter(
            "service_locator_resets_total",
            "Total number of registry resets",
            registry=self._registry,
        )

        self.capabilities_registered = Gauge(
            "service_locator_capabilities_registered",
            "Number of capabilities with a registered factory",
            registry=self._registry,
        )

    def record_registration(self, kind: str, total: int) -> None:
        self.registrations_total.labels(kind=kind).inc()
        self.capabilities_registered.set(total)

    def record_resolution(self, hit: bool) -> None:
        self.resolutions_total.labels(outcome="hit" if hit else "miss").inc()

    def record_reset(self) -> None:
        self.resets_total.inc()
        self.capabilities_registered.set(0)


@lru_cache
def get_metrics() -> RegistryMetrics:
    """Get the process-wide metrics, bound to the default collector registry."""
    return RegistryMetrics()
