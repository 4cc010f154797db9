"""Secondary storage construction from runtime settings."""

from __future__ import annotations

from urllib.parse import urlsplit

from packages.cache_shared.config import CacheSettings
from resources.secondary_storage.storage import SecondaryStorage


def build_storage(settings: CacheSettings) -> SecondaryStorage:
    """Build the secondary storage backend named by the configured URL scheme."""
    storage_settings = settings.secondary_storage
    scheme = urlsplit(storage_settings.url).scheme
    if scheme == "redis":
        from resources.secondary_storage.redis.redis_storage import RedisStorage

        return RedisStorage.from_url(storage_settings.url, storage_settings.attributes)
    raise ValueError(f"unsupported secondary storage scheme: {scheme!r}")
