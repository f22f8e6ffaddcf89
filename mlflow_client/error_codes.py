"""
Error codes returned by the MLflow Tracking REST API in the ``error_code`` field of a failed
response. These mirror the ``ErrorCode`` enum of the server's ``databricks.proto``.
"""

INTERNAL_ERROR = "INTERNAL_ERROR"
TEMPORARILY_UNAVAILABLE = "TEMPORARILY_UNAVAILABLE"
IO_ERROR = "IO_ERROR"
BAD_REQUEST = "BAD_REQUEST"
SERVICE_UNDER_MAINTENANCE = "SERVICE_UNDER_MAINTENANCE"
WORKSPACE_TEMPORARILY_UNAVAILABLE = "WORKSPACE_TEMPORARILY_UNAVAILABLE"
DEADLINE_EXCEEDED = "DEADLINE_EXCEEDED"
CANCELLED = "CANCELLED"
RESOURCE_EXHAUSTED = "RESOURCE_EXHAUSTED"
ABORTED = "ABORTED"
NOT_FOUND = "NOT_FOUND"
ALREADY_EXISTS = "ALREADY_EXISTS"
UNAUTHENTICATED = "UNAUTHENTICATED"
INVALID_PARAMETER_VALUE = "INVALID_PARAMETER_VALUE"
ENDPOINT_NOT_FOUND = "ENDPOINT_NOT_FOUND"
MALFORMED_REQUEST = "MALFORMED_REQUEST"
INVALID_STATE = "INVALID_STATE"
PERMISSION_DENIED = "PERMISSION_DENIED"
FEATURE_DISABLED = "FEATURE_DISABLED"
CUSTOMER_UNAUTHORIZED = "CUSTOMER_UNAUTHORIZED"
REQUEST_LIMIT_EXCEEDED = "REQUEST_LIMIT_EXCEEDED"
RESOURCE_CONFLICT = "RESOURCE_CONFLICT"
UNPARSEABLE_HTTP_ERROR = "UNPARSEABLE_HTTP_ERROR"
NOT_IMPLEMENTED = "NOT_IMPLEMENTED"
DATA_LOSS = "DATA_LOSS"
RESOURCE_ALREADY_EXISTS = "RESOURCE_ALREADY_EXISTS"
RESOURCE_DOES_NOT_EXIST = "RESOURCE_DOES_NOT_EXIST"
QUOTA_EXCEEDED = "QUOTA_EXCEEDED"
MAX_BLOCK_SIZE_EXCEEDED = "MAX_BLOCK_SIZE_EXCEEDED"
MAX_READ_SIZE_EXCEEDED = "MAX_READ_SIZE_EXCEEDED"

ALL_ERROR_CODES = frozenset(
    value for name, value in dict(globals()).items() if name.isupper() and isinstance(value, str)
)


def is_valid_error_code(error_code):
    return error_code in ALL_ERROR_CODES
