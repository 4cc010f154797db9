"""Tests for the content digest value type."""

from __future__ import annotations

import pytest

from packages.cache_shared.digest import DIGEST_SIZE, Digest


def test_digest_string_form_roundtrips_through_hex() -> None:
    digest = Digest.of(b"int main() {}")

    assert len(digest.to_string()) == DIGEST_SIZE * 2
    assert Digest.from_hex(digest.to_string()) == digest
    assert str(digest) == digest.to_string()


def test_digest_rejects_wrong_size() -> None:
    with pytest.raises(ValueError, match="must be 20 bytes"):
        Digest(b"short")
