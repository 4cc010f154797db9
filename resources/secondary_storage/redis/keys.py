"""Redis key naming for cached artifacts."""

from __future__ import annotations

from packages.cache_shared.digest import Digest

from resources.secondary_storage.redis.config import KEY_PREFIX


def encode_key(digest: Digest) -> str:
    """Return the namespaced Redis key for ``digest``."""
    return f"{KEY_PREFIX}:{digest.to_string()}"
