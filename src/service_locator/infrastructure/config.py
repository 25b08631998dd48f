"""Configuration management for the service locator."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RegistryConfig(BaseModel):
    """Registry behaviour configuration."""

    require_abstract: bool = Field(
        default=True,
        description="Reject capabilities that are not ABCs or Protocols",
    )


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="json", description="Log format")
    metrics_enabled: bool = Field(
        default=True, description="Record Prometheus metrics for the default registry"
    )


class Config(BaseSettings):
    """Main configuration for the service locator."""

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_LOCATOR_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
