"""Shared error code constants.

Categories tell callers how to react; codes tell operators what happened.
"""

# Timeout
CONNECT_TIMEOUT = "CONNECT_TIMEOUT"
OPERATION_TIMEOUT = "OPERATION_TIMEOUT"

# Connection / session
CONNECTION_FAILED = "CONNECTION_FAILED"
INVALID_ENDPOINT = "INVALID_ENDPOINT"
AUTH_REJECTED = "AUTH_REJECTED"
BACKEND_INVALID = "BACKEND_INVALID"

# Replies
ERROR_REPLY = "ERROR_REPLY"
UNEXPECTED_REPLY = "UNEXPECTED_REPLY"
