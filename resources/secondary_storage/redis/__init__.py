"""Redis secondary storage backend."""

from resources.secondary_storage.redis.config import (
    Endpoint,
    RedisStorageSettings,
)
from resources.secondary_storage.redis.keys import encode_key
from resources.secondary_storage.redis.redis_storage import RedisStorage
from resources.secondary_storage.redis.session import RedisSession, SessionState

__all__ = [
    "Endpoint",
    "RedisSession",
    "RedisStorage",
    "RedisStorageSettings",
    "SessionState",
    "encode_key",
]
