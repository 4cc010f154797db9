"""Canonical error types for secondary storage results.

The cache tier only needs to know whether a failure was a timeout or anything
else; the detail fields exist for diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class ErrorCategory(str, Enum):
    """Error kinds a storage operation can report."""

    TIMEOUT = "timeout"
    ERROR = "error"


@dataclass(frozen=True)
class ErrorDetail:
    """Structured error object carried by failed storage results."""

    code: str
    message: str
    category: ErrorCategory
    metadata: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_timeout(self) -> bool:
        """Return True when the failure was a connect or operation timeout."""
        return self.category is ErrorCategory.TIMEOUT
