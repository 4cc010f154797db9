"""Public logging API for the secondary cache backends.

This package wraps Python's ``logging`` module with stdout emission and
structured context propagation.
"""

from .config import configure_logging, get_logger
from .context import log_context

__all__ = [
    "configure_logging",
    "get_logger",
    "log_context",
]
