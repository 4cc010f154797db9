"""Redis-backed secondary storage implementation."""

from __future__ import annotations

from types import TracebackType
from typing import Any, Mapping

from packages.cache_shared.digest import Digest
from packages.cache_shared.logging import fields, get_logger, log_context
from resources.secondary_storage.redis.config import Endpoint, RedisStorageSettings
from resources.secondary_storage.redis.errors import normalize_reply_error
from resources.secondary_storage.redis.keys import encode_key
from resources.secondary_storage.redis.reply import Reply, ReplyKind, issue
from resources.secondary_storage.redis.session import RedisSession, SessionState
from resources.secondary_storage.storage import StorageResult

_LOGGER = get_logger(__name__)


class RedisStorage:
    """Secondary storage that keeps cache entries as plain Redis strings.

    Every operation first makes sure the session is ready, then issues its
    commands and classifies the tagged replies. Remote failures come back as
    failed results; nothing here raises for them.
    """

    def __init__(self, *, endpoint: Endpoint, settings: RedisStorageSettings) -> None:
        self._session = RedisSession(endpoint=endpoint, settings=settings)

    @classmethod
    def from_url(
        cls, url: str, attributes: Mapping[str, Any] | None = None
    ) -> "RedisStorage":
        """Build a backend from an endpoint URL and its attribute mapping."""
        return cls(
            endpoint=Endpoint.from_url(url),
            settings=RedisStorageSettings.from_attributes(attributes or {}),
        )

    @property
    def state(self) -> SessionState:
        return self._session.state

    def get(self, key: Digest) -> StorageResult[bytes]:
        """Fetch one value; a successful result with ``None`` is a miss."""
        connect_error = self._session.ensure_connected()
        if connect_error is not None:
            return StorageResult.failure(connect_error)

        key_string = encode_key(key)
        with log_context(_operation_context("get", key_string)):
            _LOGGER.debug("Redis GET %s", key_string)
            reply = self._issue("GET", key_string)
            if reply.kind is ReplyKind.STRING:
                return StorageResult.success(bytes(reply.value))
            if reply.kind is ReplyKind.NIL:
                return StorageResult.success(None)
            return self._failed("get", key_string, reply)

    def put(
        self, key: Digest, value: bytes, *, only_if_missing: bool = False
    ) -> StorageResult[bool]:
        """Store one value; ``False`` when ``only_if_missing`` kept an existing one."""
        connect_error = self._session.ensure_connected()
        if connect_error is not None:
            return StorageResult.failure(connect_error)

        key_string = encode_key(key)
        with log_context(_operation_context("put", key_string)):
            if only_if_missing:
                _LOGGER.debug("Redis EXISTS %s", key_string)
                reply = self._issue("EXISTS", key_string)
                if reply.kind is ReplyKind.INTEGER and reply.value > 0:
                    return StorageResult.success(False)
                if reply.kind is ReplyKind.NULL:
                    return self._failed("check", key_string, reply)
                if reply.kind is not ReplyKind.INTEGER:
                    _LOGGER.warning(
                        "Failed to check %s in redis: %s", key_string, reply.describe()
                    )

            _LOGGER.debug("Redis SET %s", key_string)
            reply = self._issue("SET", key_string, bytes(value))
            if reply.kind is ReplyKind.STATUS:
                return StorageResult.success(True)
            return self._failed("set", key_string, reply)

    def remove(self, key: Digest) -> StorageResult[bool]:
        """Delete one value; ``False`` when it was already absent."""
        connect_error = self._session.ensure_connected()
        if connect_error is not None:
            return StorageResult.failure(connect_error)

        key_string = encode_key(key)
        with log_context(_operation_context("remove", key_string)):
            _LOGGER.debug("Redis DEL %s", key_string)
            reply = self._issue("DEL", key_string)
            if reply.kind is ReplyKind.INTEGER:
                return StorageResult.success(reply.value > 0)
            return self._failed("del", key_string, reply)

    def close(self) -> None:
        """Disconnect from Redis; the backend refuses operations afterwards."""
        self._session.close()

    def __enter__(self) -> "RedisStorage":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def _issue(self, *args: Any) -> Reply:
        reply = issue(self._session.handle, *args)
        if reply.kind is ReplyKind.NULL:
            self._session.mark_stale()
        return reply

    def _failed(self, action: str, key_string: str, reply: Reply) -> StorageResult[Any]:
        error = normalize_reply_error(reply)
        with log_context({fields.ERROR_CODE: error.code}):
            _LOGGER.warning(
                "Failed to %s %s in redis: %s", action, key_string, reply.describe()
            )
        return StorageResult.failure(error)


def _operation_context(operation: str, key_string: str) -> dict[str, str]:
    return {
        fields.BACKEND: "redis",
        fields.OPERATION: operation,
        fields.KEY: key_string,
    }
