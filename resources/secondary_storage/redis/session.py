"""Lazy Redis session management for the secondary storage backend.

A session owns at most one connection handle. It connects on first use,
authenticates when a password is configured, reconnects a handle that was
dropped mid-operation, and latches into ``INVALID`` once a connection attempt
fails so later operations never wait on a dead endpoint again.
"""

from __future__ import annotations

from enum import Enum

from redis import Connection, UnixDomainSocketConnection
from redis.exceptions import RedisError

from packages.cache_shared.errors import ErrorDetail, codes, storage_error
from packages.cache_shared.logging import fields, get_logger, log_context
from resources.secondary_storage.redis.client import create_redis_connection
from resources.secondary_storage.redis.config import (
    REDIS_SCHEME,
    Endpoint,
    RedisStorageSettings,
)
from resources.secondary_storage.redis.errors import normalize_connect_error
from resources.secondary_storage.redis.reply import ReplyKind, issue

_LOGGER = get_logger(__name__)

DEFAULT_USERNAME = "default"
MASKED_PASSWORD = "*******"

# redis-py wraps socket errors, but host name encoding (IDNA) fails earlier
# with a bare ValueError.
_CONNECT_ERRORS = (RedisError, OSError, ValueError)


class SessionState(str, Enum):
    """Lifecycle states of a Redis session; ``INVALID`` is terminal."""

    UNCONNECTED = "unconnected"
    CONNECTING = "connecting"
    READY = "ready"
    INVALID = "invalid"


class RedisSession:
    """Owns the connection handle and its liveness state."""

    def __init__(self, *, endpoint: Endpoint, settings: RedisStorageSettings) -> None:
        self._endpoint = endpoint
        self._settings = settings
        self._handle: Connection | UnixDomainSocketConnection | None = None
        self._state = SessionState.UNCONNECTED

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def handle(self) -> Connection | UnixDomainSocketConnection:
        """Return the live handle; only valid while the session is ready."""
        assert self._state is SessionState.READY and self._handle is not None
        return self._handle

    def ensure_connected(self) -> ErrorDetail | None:
        """Make the session ready, returning the failure when it cannot be."""
        if self._state is SessionState.READY:
            return None
        if self._state is SessionState.INVALID:
            return storage_error(
                "redis backend is invalid", code=codes.BACKEND_INVALID
            )

        self._state = SessionState.CONNECTING
        with log_context(
            {
                fields.BACKEND: "redis",
                fields.ENDPOINT: self._endpoint.describe() or self._endpoint.url,
            }
        ):
            if self._handle is not None and self._reconnect():
                return self._authenticate()
            return self._connect()

    def mark_stale(self) -> None:
        """Record that the handle dropped; the next operation reconnects."""
        if self._state is SessionState.READY:
            _LOGGER.debug("Redis connection lost: endpoint=%s", self._endpoint.describe())
            self._state = SessionState.UNCONNECTED

    def close(self) -> None:
        """Release the handle, if any, and refuse further operations."""
        if self._handle is not None:
            _LOGGER.debug("Redis disconnect")
            self._handle.disconnect()
            self._handle = None
        self._state = SessionState.INVALID

    def _reconnect(self) -> bool:
        """Re-open the existing handle; discard it when that fails."""
        assert self._handle is not None
        handle = self._handle
        handle.disconnect()
        try:
            handle.connect()
        except _CONNECT_ERRORS as exc:
            _LOGGER.warning("Redis reconnection error: %s", exc)
            handle.disconnect()
            self._handle = None
            return False
        return True

    def _connect(self) -> ErrorDetail | None:
        endpoint = self._endpoint
        assert endpoint.scheme == REDIS_SCHEME, endpoint.scheme

        timeout_ms = self._settings.connect_timeout_ms
        if endpoint.is_tcp:
            _LOGGER.info(
                "Redis connecting to %s:%d (timeout %d ms)",
                endpoint.host,
                endpoint.port,
                timeout_ms,
            )
        elif endpoint.is_unix:
            _LOGGER.info(
                "Redis connecting to %s (timeout %d ms)",
                endpoint.socket_path,
                timeout_ms,
            )
        else:
            _LOGGER.warning("Invalid Redis URL: %s", endpoint.url)
            return self._invalidate(
                storage_error(
                    f"redis URL has neither host nor socket path: {endpoint.url}",
                    code=codes.INVALID_ENDPOINT,
                )
            )

        handle = create_redis_connection(endpoint, self._settings)
        try:
            handle.connect()
        except _CONNECT_ERRORS as exc:
            _LOGGER.warning("Redis connection error: %s", exc)
            handle.disconnect()
            return self._invalidate(normalize_connect_error(exc))

        _LOGGER.info("Redis connection to %s OK", endpoint.describe())
        self._handle = handle
        return self._authenticate()

    def _authenticate(self) -> ErrorDetail | None:
        """Send AUTH when a password is configured, then mark ready."""
        assert self._handle is not None
        password = self._settings.password
        if password is None:
            self._state = SessionState.READY
            return None

        username = self._settings.username or DEFAULT_USERNAME
        _LOGGER.info("Redis AUTH %s %s", username, MASKED_PASSWORD)
        if self._settings.username:
            reply = issue(
                self._handle, "AUTH", self._settings.username, password.get_secret_value()
            )
        else:
            reply = issue(self._handle, "AUTH", password.get_secret_value())

        if reply.kind in (ReplyKind.NULL, ReplyKind.ERROR):
            _LOGGER.warning("Failed to auth %s in redis: %s", username, reply.describe())
            return self._invalidate(
                storage_error(
                    f"redis authentication failed for {username}",
                    code=codes.AUTH_REJECTED,
                    metadata={"reply_kind": reply.kind.value},
                )
            )

        self._state = SessionState.READY
        return None

    def _invalidate(self, error: ErrorDetail) -> ErrorDetail:
        """Latch the terminal state and drop any handle."""
        if self._handle is not None:
            self._handle.disconnect()
            self._handle = None
        self._state = SessionState.INVALID
        return error
