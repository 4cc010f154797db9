"""In-memory stand-ins for redis-py connections used by backend tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from redis.exceptions import AuthenticationError, ConnectionError, ResponseError

from resources.secondary_storage.redis.config import Endpoint, RedisStorageSettings


@dataclass
class FakeRedisServer:
    """Shared server state plus call counters for every fake connection."""

    values: dict[str, bytes] = field(default_factory=dict)
    password: str | None = None
    username: str = "default"
    connect_error: Exception | None = None
    command_errors: dict[str, Exception] = field(default_factory=dict)
    reply_overrides: dict[str, Any] = field(default_factory=dict)
    commands: list[tuple[Any, ...]] = field(default_factory=list)
    endpoints: list[Endpoint] = field(default_factory=list)
    settings: list[RedisStorageSettings] = field(default_factory=list)
    connect_calls: int = 0
    disconnect_calls: int = 0

    def create_connection(
        self, endpoint: Endpoint, settings: RedisStorageSettings
    ) -> "FakeRedisConnection":
        self.endpoints.append(endpoint)
        self.settings.append(settings)
        return FakeRedisConnection(self)

    @property
    def command_names(self) -> list[str]:
        return [str(command[0]) for command in self.commands]

    def execute(self, args: tuple[Any, ...]) -> Any:
        name = str(args[0]).upper()
        if name in self.reply_overrides:
            return self.reply_overrides[name]
        if name == "AUTH":
            return self._auth(args[1:])
        if name == "GET":
            return self.values.get(args[1])
        if name == "SET":
            self.values[args[1]] = bytes(args[2])
            return b"OK"
        if name == "EXISTS":
            return int(args[1] in self.values)
        if name == "DEL":
            return int(self.values.pop(args[1], None) is not None)
        return ResponseError(f"unknown command '{name}'")

    def _auth(self, credentials: tuple[Any, ...]) -> Any:
        if self.password is None:
            return ResponseError("AUTH <password> called without any password configured")
        username = credentials[0] if len(credentials) == 2 else "default"
        if username == self.username and credentials[-1] == self.password:
            return b"OK"
        return AuthenticationError("WRONGPASS invalid username-password pair")


class FakeRedisConnection:
    """Connection handle exposing the redis-py calls the backend makes."""

    def __init__(self, server: FakeRedisServer) -> None:
        self._server = server
        self._pending: Any = None
        self.connected = False

    def connect(self) -> None:
        self._server.connect_calls += 1
        if self._server.connect_error is not None:
            raise self._server.connect_error
        self.connected = True

    def disconnect(self, *args: Any) -> None:
        self._server.disconnect_calls += 1
        self.connected = False

    def send_command(self, *args: Any, **kwargs: Any) -> None:
        self._server.commands.append(args)
        if not self.connected:
            raise ConnectionError("Connection closed by server.")
        error = self._server.command_errors.pop(str(args[0]).upper(), None)
        if error is not None:
            self.connected = False
            raise error
        self._pending = self._server.execute(args)

    def read_response(self, *args: Any, **kwargs: Any) -> Any:
        response, self._pending = self._pending, None
        if isinstance(response, Exception):
            raise response
        return response
