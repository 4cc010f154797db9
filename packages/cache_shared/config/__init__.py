"""Public API for shared cache configuration utilities."""

from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    CacheSettings,
    LoggingSettings,
    SecondaryStorageSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "CacheSettings",
    "LoggingSettings",
    "SecondaryStorageSettings",
    "load_settings",
]
