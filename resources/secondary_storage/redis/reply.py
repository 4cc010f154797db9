"""Tagged representation of Redis replies.

redis-py hands back plain Python values and raises for server errors and
transport failures. Operations here need to tell those shapes apart without
guessing, so every reply is tagged once and classified by its tag.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from redis.exceptions import AuthenticationError, RedisError, ResponseError
from redis.exceptions import TimeoutError as RedisTimeoutError

# redis-py decodes simple-string replies to bytes exactly like bulk strings.
_STATUS_COMMANDS = frozenset({"SET", "AUTH"})


class ReplyKind(str, Enum):
    """Reply shapes a Redis command can produce."""

    STRING = "string"
    INTEGER = "integer"
    STATUS = "status"
    NIL = "nil"
    ERROR = "error"
    NULL = "null"
    OTHER = "other"


@dataclass(frozen=True)
class Reply:
    """One tagged reply.

    ``NULL`` means no reply arrived at all; ``failure`` holds the transport
    exception in that case.
    """

    kind: ReplyKind
    value: Any = None
    failure: Exception | None = None

    @property
    def is_timeout(self) -> bool:
        return isinstance(self.failure, (RedisTimeoutError, TimeoutError))

    def describe(self) -> str:
        """Return a loggable summary of the reply."""
        if self.kind is ReplyKind.NULL:
            return f"no reply ({self.failure})"
        if self.kind is ReplyKind.ERROR:
            return str(self.value)
        return f"unexpected {self.kind.value} reply"


class CommandConnection(Protocol):
    """The part of a redis-py connection needed to run single commands."""

    def send_command(self, *args: Any, **kwargs: Any) -> None:
        """Pack and send one command."""

    def read_response(self, *args: Any, **kwargs: Any) -> Any:
        """Read and parse one reply."""


def issue(connection: CommandConnection, *args: Any) -> Reply:
    """Send one command and return its tagged reply; never raises RedisError."""
    command = str(args[0]).upper()
    try:
        connection.send_command(*args)
        raw = connection.read_response()
    except (ResponseError, AuthenticationError) as exc:
        return Reply(kind=ReplyKind.ERROR, value=str(exc))
    except RedisError as exc:
        return Reply(kind=ReplyKind.NULL, failure=exc)
    return tag_reply(command, raw)


def tag_reply(command: str, raw: Any) -> Reply:
    """Tag a raw redis-py reply value for ``command``."""
    if raw is None:
        return Reply(kind=ReplyKind.NIL)
    if isinstance(raw, ResponseError):
        return Reply(kind=ReplyKind.ERROR, value=str(raw))
    if isinstance(raw, bytes):
        if command in _STATUS_COMMANDS:
            return Reply(kind=ReplyKind.STATUS, value=raw)
        return Reply(kind=ReplyKind.STRING, value=raw)
    if isinstance(raw, int) and not isinstance(raw, bool):
        return Reply(kind=ReplyKind.INTEGER, value=raw)
    return Reply(kind=ReplyKind.OTHER, value=raw)
