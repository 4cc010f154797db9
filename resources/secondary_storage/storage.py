"""Transport-agnostic contract for secondary storage backends."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from packages.cache_shared.digest import Digest
from packages.cache_shared.errors import ErrorDetail

T = TypeVar("T")


@dataclass(frozen=True)
class StorageResult(Generic[T]):
    """Outcome of one storage operation: a value, or an error, never both."""

    value: T | None = None
    error: ErrorDetail | None = None

    @property
    def ok(self) -> bool:
        """Return True when the remote interaction itself succeeded."""
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "StorageResult[T]":
        """Build a successful result carrying ``value``."""
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorDetail) -> "StorageResult[T]":
        """Build a failed result carrying ``error``."""
        return cls(error=error)


class SecondaryStorage(Protocol):
    """Protocol for remote, shared cache tiers addressed by digest."""

    def get(self, key: Digest) -> StorageResult[bytes]:
        """Fetch a value; ``value is None`` on success means not found."""

    def put(
        self, key: Digest, value: bytes, *, only_if_missing: bool = False
    ) -> StorageResult[bool]:
        """Store a value; ``False`` means an existing value was kept."""

    def remove(self, key: Digest) -> StorageResult[bool]:
        """Delete a value; ``False`` means it was already absent."""

    def close(self) -> None:
        """Release any connection held by the backend."""
