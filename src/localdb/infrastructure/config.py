"""Configuration management for localdb."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageConfig(BaseModel):
    """Document storage configuration."""

    recovery_policy: Literal["empty", "strict"] = Field(
        default="empty",
        description="What load() does with an undecodable document: "
        "'empty' substitutes an empty database, 'strict' raises",
    )
    indent: int = Field(default=2, ge=0, le=8, description="JSON indentation on save")
    atomic_writes: bool = Field(
        default=True, description="Write to a temporary file and rename over the document"
    )
    sync_mode: Literal["fsync", "none"] = Field(
        default="fsync", description="Sync mode for the temporary file before rename"
    )


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="json", description="Log format")
    otel_endpoint: str | None = Field(
        default=None, description="OpenTelemetry collector endpoint"
    )
    otel_service_name: str = Field(default="localdb", description="Service name for tracing")


class Config(BaseSettings):
    """Main configuration for localdb."""

    model_config = SettingsConfigDict(
        env_prefix="LOCALDB_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    storage: StorageConfig = Field(default_factory=StorageConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
