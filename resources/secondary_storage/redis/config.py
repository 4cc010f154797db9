"""Pydantic settings for the Redis secondary storage backend."""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import unquote, urlsplit

from pydantic import BaseModel, ConfigDict, Field, SecretStr

REDIS_SCHEME = "redis"
DEFAULT_PORT = 6379
DEFAULT_CONNECT_TIMEOUT_MS = 100
DEFAULT_OPERATION_TIMEOUT_MS = 10_000
MAX_TIMEOUT_MS = 1000 * 3600
KEY_PREFIX = "ccache"


class Endpoint(BaseModel):
    """Where the Redis server lives: a TCP host/port or a local socket path."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    url: str
    scheme: str
    host: str = ""
    port: int = Field(default=DEFAULT_PORT, gt=0, le=65535)
    socket_path: str = ""

    @classmethod
    def from_url(cls, url: str) -> "Endpoint":
        """Parse an endpoint from ``redis://host[:port]`` or ``redis:///path``.

        A URL with neither host nor path is accepted here; connecting to it
        fails and invalidates the backend.
        """
        parts = urlsplit(url)
        try:
            port = parts.port
        except ValueError as exc:
            raise ValueError(f"invalid port in Redis URL {url!r}") from exc
        host = parts.hostname or ""
        return cls(
            url=url,
            scheme=parts.scheme,
            host=host,
            port=port if port is not None else DEFAULT_PORT,
            socket_path="" if host else unquote(parts.path),
        )

    @property
    def is_tcp(self) -> bool:
        return self.host != ""

    @property
    def is_unix(self) -> bool:
        return not self.is_tcp and self.socket_path != ""

    def describe(self) -> str:
        """Return a short human-readable target for log lines."""
        if self.is_tcp:
            return f"{self.host}:{self.port}"
        return self.socket_path


class RedisStorageSettings(BaseModel):
    """Timeouts and credentials parsed from backend attributes.

    Attribute names are hyphenated (``connect-timeout``); unknown attributes
    are ignored because they are validated elsewhere.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    connect_timeout_ms: int = Field(
        default=DEFAULT_CONNECT_TIMEOUT_MS,
        ge=1,
        le=MAX_TIMEOUT_MS,
        alias="connect-timeout",
    )
    operation_timeout_ms: int = Field(
        default=DEFAULT_OPERATION_TIMEOUT_MS,
        ge=1,
        le=MAX_TIMEOUT_MS,
        alias="operation-timeout",
    )
    username: str | None = None
    password: SecretStr | None = None

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, Any]) -> "RedisStorageSettings":
        """Build settings from a backend attribute mapping."""
        return cls.model_validate(dict(attributes))

    @property
    def connect_timeout_seconds(self) -> float:
        return self.connect_timeout_ms / 1000

    @property
    def operation_timeout_seconds(self) -> float:
        return self.operation_timeout_ms / 1000
