"""Settings loading with deterministic precedence.

The cascade is always:
1) CLI params
2) Environment variables (``CACHE_`` prefix, ``__`` for nesting)
3) ``~/.config/cache/cache.yaml``
4) Model defaults

Example: ``CACHE_SECONDARY_STORAGE__URL=redis://cache:6379`` sets
``secondary_storage.url``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from .models import _CONFIG_PATH, DEFAULT_CONFIG_PATH, CacheSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> CacheSettings:
    """Resolve root settings from CLI params, environment, and YAML file."""
    resolved = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    token = _CONFIG_PATH.set(resolved)
    try:
        return CacheSettings(**dict(cli_params or {}))
    finally:
        _CONFIG_PATH.reset(token)
