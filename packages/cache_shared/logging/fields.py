"""Canonical logging field names shared by storage backends.

Keeping names centralized prevents drift between backends that log the same
concepts.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"

# Storage operation fields.
BACKEND = "backend"
OPERATION = "operation"
KEY = "key"
ENDPOINT = "endpoint"
ERROR_CODE = "error_code"

# Common process-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
