"""Public shared error API for secondary storage backends."""

from . import codes
from .factories import storage_error, timeout_error
from .types import ErrorCategory, ErrorDetail

__all__ = [
    "ErrorCategory",
    "ErrorDetail",
    "codes",
    "storage_error",
    "timeout_error",
]
