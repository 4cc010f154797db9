"""Real-server integration tests for the Redis secondary storage backend."""

from __future__ import annotations

from time import perf_counter

import pytest

from packages.cache_shared.config import load_settings
from packages.cache_shared.digest import Digest
from resources.secondary_storage.component import build_storage
from resources.secondary_storage.redis.redis_storage import RedisStorage
from resources.secondary_storage.redis.session import SessionState
from tests.integration.helpers import real_provider_tests_enabled

pytestmark = pytest.mark.skipif(
    not real_provider_tests_enabled(),
    reason="set CACHE_RUN_INTEGRATION_REAL=1 to run real-server integration tests",
)


def test_put_get_remove_roundtrip_against_real_redis() -> None:
    """Redis backend should honor found/missing/removed semantics end to end."""
    digest = Digest.of(b"integration:redis:roundtrip")
    payload = b"\x00binary\x00payload"
    storage = build_storage(load_settings())
    try:
        storage.remove(digest)

        assert storage.get(digest).value is None
        assert storage.put(digest, payload).value is True
        assert storage.put(digest, b"other", only_if_missing=True).value is False
        assert storage.get(digest).value == payload
        assert storage.remove(digest).value is True
        assert storage.remove(digest).value is False
    finally:
        storage.close()


def test_unreachable_endpoint_fails_within_connect_timeout() -> None:
    """A blackholed address should fail near the connect timeout, not hang."""
    storage = RedisStorage.from_url("redis://10.255.255.1:6379", {"connect-timeout": 50})
    started = perf_counter()

    result = storage.get(Digest.of(b"integration:redis:unreachable"))

    assert result.error is not None
    assert perf_counter() - started < 1.0
    assert storage.state is SessionState.INVALID
