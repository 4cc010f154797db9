"""redis-py exception and reply normalization helpers."""

from __future__ import annotations

from redis.exceptions import AuthenticationError
from redis.exceptions import TimeoutError as RedisTimeoutError

from packages.cache_shared.errors import (
    ErrorDetail,
    codes,
    storage_error,
    timeout_error,
)
from resources.secondary_storage.redis.reply import Reply, ReplyKind


def normalize_connect_error(exc: Exception) -> ErrorDetail:
    """Map a failed connection attempt into shared error semantics."""
    metadata = {"exception_type": type(exc).__name__}

    if isinstance(exc, (RedisTimeoutError, TimeoutError)):
        return timeout_error(
            "timed out connecting to redis",
            code=codes.CONNECT_TIMEOUT,
            metadata=metadata,
        )

    if isinstance(exc, AuthenticationError):
        return storage_error(
            "redis rejected the credentials",
            code=codes.AUTH_REJECTED,
            metadata=metadata,
        )

    return storage_error(
        str(exc) or "redis connection failed",
        code=codes.CONNECTION_FAILED,
        metadata=metadata,
    )


def normalize_reply_error(reply: Reply) -> ErrorDetail:
    """Map a reply that does not fit the command's outcomes into an error."""
    metadata = {"reply_kind": reply.kind.value}

    if reply.kind is ReplyKind.NULL:
        metadata["exception_type"] = type(reply.failure).__name__
        if reply.is_timeout:
            return timeout_error(
                "redis operation timed out",
                code=codes.OPERATION_TIMEOUT,
                metadata=metadata,
            )
        return storage_error(
            "redis connection lost",
            code=codes.CONNECTION_FAILED,
            metadata=metadata,
        )

    if reply.kind is ReplyKind.ERROR:
        return storage_error(str(reply.value), code=codes.ERROR_REPLY, metadata=metadata)

    return storage_error(
        f"unexpected {reply.kind.value} reply from redis",
        code=codes.UNEXPECTED_REPLY,
        metadata=metadata,
    )
