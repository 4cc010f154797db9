"""Typed configuration models for cache runtime settings."""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "cache" / "cache.yaml"

_CONFIG_PATH: ContextVar[Path] = ContextVar("cache_config_path", default=DEFAULT_CONFIG_PATH)


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = True
    service: str = "cache"
    environment: str = "dev"


class SecondaryStorageSettings(BaseModel):
    """Secondary storage endpoint URL plus its backend attribute mapping."""

    url: str = "redis://localhost:6379"
    attributes: dict[str, str | int] = Field(default_factory=dict)


class CacheSettings(BaseSettings):
    """Root runtime settings resolved from init/env/yaml/defaults sources."""

    model_config = SettingsConfigDict(
        env_prefix="CACHE_",
        env_nested_delimiter="__",
        extra="ignore",
        nested_model_default_partial_update=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    secondary_storage: SecondaryStorageSettings = Field(
        default_factory=SecondaryStorageSettings
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Apply precedence: init > env > yaml > model defaults."""
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(
                settings_cls,
                yaml_file=_CONFIG_PATH.get(),
                yaml_file_encoding="utf-8",
            ),
        )
