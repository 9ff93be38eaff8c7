"""Configuration management for the customer database."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FilesConfig(BaseModel):
    """Locations of the seed, command and output files."""

    input_path: Path = Field(default=Path("input.txt"), description="Seed data file")
    commands_path: Path = Field(default=Path("commands.txt"), description="Command batch file")
    output_path: Path = Field(default=Path("output.txt"), description="Snapshot log file")
    encoding: str = Field(default="utf-8", description="Text encoding for all three files")


class OutputConfig(BaseModel):
    """Snapshot log formatting."""

    separator: str = Field(default="----------", description="Line written before each block")
    error_marker: str = Field(
        default="error", description="Line written instead of the table after a failed UPDATE"
    )


class StorageConfig(BaseModel):
    """Customer table sizing."""

    initial_capacity: int = Field(default=10, ge=1, description="Slots allocated on first insert")
    growth_factor: int = Field(default=2, ge=2, description="Capacity multiplier on overflow")


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="json", description="Log format")
    metrics_port: int | None = Field(
        default=None, ge=1, le=65535, description="Prometheus metrics port (disabled if unset)"
    )
    otel_endpoint: str | None = Field(
        default=None, description="OpenTelemetry collector endpoint"
    )
    otel_service_name: str = Field(default="customer_db", description="Service name for tracing")


class Config(BaseSettings):
    """Main configuration for the customer database."""

    model_config = SettingsConfigDict(
        env_prefix="CUSTOMER_DB_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    files: FilesConfig = Field(default_factory=FilesConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
