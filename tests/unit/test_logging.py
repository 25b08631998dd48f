"""Unit tests for structured logging."""

from __future__ import annotations

import json
from abc import ABC
from collections.abc import Hashable
from typing import Generator

import pytest
import structlog
from structlog.testing import capture_logs

from service_locator.domain.services import Registry
from service_locator.infrastructure.config import Config, ObservabilityConfig
from service_locator.infrastructure.container import create_registry, get_registry
from service_locator.infrastructure.logging import get_logger, setup_logging


class Cache(ABC):
    pass


@pytest.fixture
def restore_structlog() -> Generator[None, None, None]:
    yield
    structlog.reset_defaults()


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging and get_logger."""

    @pytest.mark.parametrize("log_format", ["json", "console"])
    def test_setup_configures_structlog(
        self, log_format: str, restore_structlog: None
    ) -> None:
        """setup_logging installs a structlog configuration."""
        setup_logging(level="DEBUG", log_format=log_format)

        assert structlog.is_configured()

    def test_get_logger_binds_context(self) -> None:
        """Initial context is bound to the returned logger."""
        with capture_logs() as logs:
            get_logger("tests", component="registry").info("hello")

        assert logs == [{"event": "hello", "log_level": "info", "component": "registry"}]


@pytest.mark.unit
class TestRegistryEvents:
    """Tests for events emitted by the registry."""

    def test_registration_and_reset_events(self) -> None:
        """Registrations and resets are logged at debug level."""
        registry = Registry()

        with capture_logs() as logs:
            registry.register_singleton("x", Cache)
            registry.reset()

        events = [entry["event"] for entry in logs]
        assert events == ["capabilities_registered", "registry_reset"]
        assert logs[0]["kind"] == "singleton"
        assert logs[0]["capabilities"] == [f"{__name__}.Cache"]
        assert logs[1]["cleared"] == 1

    def test_errors_are_not_logged(self) -> None:
        """Failed lookups raise without emitting log events."""
        registry = Registry()

        with capture_logs() as logs:
            with pytest.raises(LookupError):
                registry.resolve(Hashable)

        assert logs == []


@pytest.mark.unit
class TestConfiguredLogLevel:
    """Tests for observability settings applied by create_registry."""

    def test_info_level_filters_debug_events(self, capsys: pytest.CaptureFixture[str]) -> None:
        """At INFO the registry's debug events are not written."""
        registry = create_registry(
            Config(observability=ObservabilityConfig(log_level="INFO", metrics_enabled=False))
        )

        registry.register_singleton("x", Cache)
        registry.reset()

        out = capsys.readouterr().out
        assert "capabilities_registered" not in out
        assert "registry_reset" not in out

    def test_debug_level_writes_events(self, capsys: pytest.CaptureFixture[str]) -> None:
        """At DEBUG the registry's events are rendered as JSON lines."""
        registry = create_registry(
            Config(observability=ObservabilityConfig(log_level="DEBUG", metrics_enabled=False))
        )

        registry.register_singleton("x", Cache)

        lines = [line for line in capsys.readouterr().out.splitlines() if line]
        events = [json.loads(line) for line in lines]
        assert [e["event"] for e in events] == ["capabilities_registered"]
        assert events[0]["level"] == "debug"
        assert events[0]["kind"] == "singleton"

    def test_default_registry_reads_log_level_from_environment(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """SERVICE_LOCATOR_OBSERVABILITY__LOG_LEVEL controls the default registry."""
        monkeypatch.setenv("SERVICE_LOCATOR_OBSERVABILITY__LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("SERVICE_LOCATOR_OBSERVABILITY__LOG_FORMAT", "console")

        get_registry().register_singleton("x", Cache)

        assert "capabilities_registered" in capsys.readouterr().out
