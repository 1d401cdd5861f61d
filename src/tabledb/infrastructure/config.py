"""Configuration management for the table store."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParserConfig(BaseModel):
    """Query parser configuration."""

    quote_aware: bool = Field(
        default=True,
        description="Keep quoted literals containing spaces as one token",
    )
    max_query_length: int = Field(
        default=4096, ge=16, description="Longest accepted query text in characters"
    )


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="console", description="Log format")
    otel_endpoint: str | None = Field(
        default=None, description="OpenTelemetry collector endpoint"
    )
    otel_service_name: str = Field(default="tabledb", description="Service name for tracing")


class MetricsConfig(BaseModel):
    """Prometheus exporter configuration."""

    enabled: bool = Field(default=False, description="Start the metrics HTTP server")
    port: int = Field(default=8001, ge=1, le=65535, description="Prometheus metrics port")


class Config(BaseSettings):
    """Main configuration for the table store."""

    model_config = SettingsConfigDict(
        env_prefix="TABLEDB_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    parser: ParserConfig = Field(default_factory=ParserConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    metrics: MetricsConfig = Field(default_factory=MetricsConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
