import json
import logging

from mlflow_client.error_codes import (
    ABORTED,
    ALREADY_EXISTS,
    BAD_REQUEST,
    CANCELLED,
    CUSTOMER_UNAUTHORIZED,
    DATA_LOSS,
    DEADLINE_EXCEEDED,
    ENDPOINT_NOT_FOUND,
    INTERNAL_ERROR,
    INVALID_PARAMETER_VALUE,
    INVALID_STATE,
    NOT_FOUND,
    NOT_IMPLEMENTED,
    PERMISSION_DENIED,
    REQUEST_LIMIT_EXCEEDED,
    RESOURCE_ALREADY_EXISTS,
    RESOURCE_CONFLICT,
    RESOURCE_DOES_NOT_EXIST,
    RESOURCE_EXHAUSTED,
    TEMPORARILY_UNAVAILABLE,
    UNAUTHENTICATED,
    is_valid_error_code,
)

ERROR_CODE_TO_HTTP_STATUS = {
    INTERNAL_ERROR: 500,
    INVALID_STATE: 500,
    DATA_LOSS: 500,
    NOT_IMPLEMENTED: 501,
    TEMPORARILY_UNAVAILABLE: 503,
    DEADLINE_EXCEEDED: 504,
    REQUEST_LIMIT_EXCEEDED: 429,
    CANCELLED: 499,
    RESOURCE_EXHAUSTED: 429,
    ABORTED: 409,
    RESOURCE_CONFLICT: 409,
    ALREADY_EXISTS: 409,
    NOT_FOUND: 404,
    ENDPOINT_NOT_FOUND: 404,
    RESOURCE_DOES_NOT_EXIST: 404,
    PERMISSION_DENIED: 403,
    CUSTOMER_UNAUTHORIZED: 401,
    UNAUTHENTICATED: 401,
    BAD_REQUEST: 400,
    RESOURCE_ALREADY_EXISTS: 400,
    INVALID_PARAMETER_VALUE: 400,
}

HTTP_STATUS_TO_ERROR_CODE = {v: k for k, v in ERROR_CODE_TO_HTTP_STATUS.items()}
HTTP_STATUS_TO_ERROR_CODE[400] = BAD_REQUEST
HTTP_STATUS_TO_ERROR_CODE[404] = ENDPOINT_NOT_FOUND
HTTP_STATUS_TO_ERROR_CODE[500] = INTERNAL_ERROR

_logger = logging.getLogger(__name__)


def get_error_code(http_status):
    return HTTP_STATUS_TO_ERROR_CODE.get(http_status, INTERNAL_ERROR)


class MlflowException(Exception):
    """
    Generic exception thrown to surface failure information about tracking operations.
    Every exception raised by this package is an instance of this class.
    """

    def __init__(self, message, error_code=INTERNAL_ERROR, **kwargs):
        """
        Args:
            message: The message or exception describing the error that occurred. This will be
                included in the exception's serialized JSON representation.
            error_code: An appropriate error code for the error that occurred; it will be
                included in the exception's serialized JSON representation. This should
                be one of the codes listed in :py:mod:`mlflow_client.error_codes`.
            kwargs: Additional key-value pairs to include in the serialized JSON representation
                of the MlflowException.
        """
        self.error_code = error_code if is_valid_error_code(error_code) else INTERNAL_ERROR
        message = str(message)
        self.message = message
        self.json_kwargs = kwargs
        super().__init__(message)

    def serialize_as_json(self):
        exception_dict = {"error_code": self.error_code, "message": self.message}
        exception_dict.update(self.json_kwargs)
        return json.dumps(exception_dict)

    def get_http_status_code(self):
        return ERROR_CODE_TO_HTTP_STATUS.get(self.error_code, 500)

    @classmethod
    def invalid_parameter_value(cls, message, **kwargs):
        """Constructs an `MlflowException` object with the `INVALID_PARAMETER_VALUE` error code.

        Args:
            message: The message describing the error that occurred. This will be included in the
                exception's serialized JSON representation.
            kwargs: Additional key-value pairs to include in the serialized JSON representation
                of the MlflowException.
        """
        return cls(message, error_code=INVALID_PARAMETER_VALUE, **kwargs)


class RestException(MlflowException):
    """Exception thrown on non 200-level responses from the REST API"""

    def __init__(self, json, status_code=None):
        self.json = json
        self.status_code = status_code

        error_code = json.get("error_code", INTERNAL_ERROR)
        message = "{}: {}".format(
            error_code,
            json["message"] if "message" in json else "Response: " + str(json),
        )
        self.server_message = json.get("message")

        if not is_valid_error_code(error_code):
            # The `error_code` can be an http status code, e.g. when a proxy in front of the
            # tracking server answers the request.
            try:
                error_code = HTTP_STATUS_TO_ERROR_CODE[int(error_code)]
            except (ValueError, KeyError, TypeError):
                _logger.warning(
                    f"Received error code not recognized by MLflow: {error_code}, this may "
                    "indicate your request encountered an error before reaching MLflow server, "
                    "e.g., within a proxy server or authentication / authorization service."
                )
                error_code = get_error_code(status_code) if status_code else INTERNAL_ERROR
        super().__init__(message, error_code=error_code)

    def is_resource_does_not_exist(self):
        return self.error_code == RESOURCE_DOES_NOT_EXIST

    def is_resource_already_exists(self):
        return self.error_code == RESOURCE_ALREADY_EXISTS

    def __reduce__(self):
        """
        Overriding `__reduce__` to make `RestException` instance pickle-able.
        """
        return RestException, (self.json, self.status_code)


class InvalidUrlException(MlflowException):
    """Exception thrown when a http request fails to send due to an invalid URL"""


class RunFinishedException(MlflowException):
    """Exception thrown when logging to, or finishing, a run that has already been finished"""

    def __init__(self, run_id):
        super().__init__(
            f"Run '{run_id}' has already been finished. No further logging is permitted.",
            error_code=INVALID_STATE,
        )
        self.run_id = run_id
