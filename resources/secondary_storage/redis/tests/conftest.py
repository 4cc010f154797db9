"""Shared fixtures for Redis backend tests."""

from __future__ import annotations

import pytest

import resources.secondary_storage.redis.session as session_module
from resources.secondary_storage.redis.tests.fakes import FakeRedisServer


@pytest.fixture
def fake_server(monkeypatch: pytest.MonkeyPatch) -> FakeRedisServer:
    """Route every connection the backend creates to one in-memory server."""
    server = FakeRedisServer()
    monkeypatch.setattr(
        session_module,
        "create_redis_connection",
        server.create_connection,
    )
    return server
