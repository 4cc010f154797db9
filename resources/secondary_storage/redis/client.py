"""Redis connection construction helpers."""

from __future__ import annotations

import warnings

from redis import Connection, UnixDomainSocketConnection
from redis.backoff import NoBackoff
from redis.retry import Retry

from resources.secondary_storage.redis.config import Endpoint, RedisStorageSettings


def create_redis_connection(
    endpoint: Endpoint, settings: RedisStorageSettings
) -> Connection | UnixDomainSocketConnection:
    """Construct one unconnected Redis connection handle for ``endpoint``.

    Replies stay raw bytes and the handle never retries on its own. The handle
    speaks RESP2 and skips ``CLIENT SETINFO``, so connecting sends no command
    at all and AUTH is the first command a password-protected server sees.
    """
    options = {
        "socket_connect_timeout": settings.connect_timeout_seconds,
        "socket_timeout": settings.operation_timeout_seconds,
        "retry": Retry(NoBackoff(), 0),
        "decode_responses": False,
        "protocol": 2,
        "lib_name": None,
        "lib_version": None,
    }
    # Newer redis-py deprecates lib_name/lib_version in favour of driver_info,
    # which cannot switch CLIENT SETINFO off.
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", DeprecationWarning)
        if endpoint.is_tcp:
            return Connection(host=endpoint.host, port=endpoint.port, **options)
        return UnixDomainSocketConnection(path=endpoint.socket_path, **options)
