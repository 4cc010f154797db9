"""Factory helpers for creating consistent storage errors."""

from __future__ import annotations

from typing import Mapping

from . import codes
from .types import ErrorCategory, ErrorDetail


def timeout_error(
    message: str,
    *,
    code: str = codes.OPERATION_TIMEOUT,
    metadata: Mapping[str, str] | None = None,
) -> ErrorDetail:
    """Create a timeout-category error."""
    return ErrorDetail(
        code=code,
        message=message,
        category=ErrorCategory.TIMEOUT,
        metadata=_meta(metadata),
    )


def storage_error(
    message: str,
    *,
    code: str = codes.CONNECTION_FAILED,
    metadata: Mapping[str, str] | None = None,
) -> ErrorDetail:
    """Create a generic-category error."""
    return ErrorDetail(
        code=code,
        message=message,
        category=ErrorCategory.ERROR,
        metadata=_meta(metadata),
    )


def _meta(metadata: Mapping[str, str] | None) -> dict[str, str]:
    """Normalize optional metadata into a mutable plain dict."""
    if metadata is None:
        return {}
    return dict(metadata)
