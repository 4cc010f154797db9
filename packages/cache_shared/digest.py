"""Content digest value used to address cached artifacts."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

DIGEST_SIZE = 20


@dataclass(frozen=True)
class Digest:
    """Fixed-size content fingerprint with a canonical hex string form."""

    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) != DIGEST_SIZE:
            raise ValueError(
                f"digest must be {DIGEST_SIZE} bytes, got {len(self.raw)}"
            )

    @classmethod
    def of(cls, data: bytes) -> "Digest":
        """Compute the digest of ``data``."""
        return cls(hashlib.blake2b(data, digest_size=DIGEST_SIZE).digest())

    @classmethod
    def from_hex(cls, text: str) -> "Digest":
        """Parse a digest from its canonical string form."""
        return cls(bytes.fromhex(text))

    def to_string(self) -> str:
        """Return the canonical, collision-free string form."""
        return self.raw.hex()

    def __str__(self) -> str:
        return self.to_string()
