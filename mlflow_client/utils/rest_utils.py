import base64
import json
import logging

import requests

from mlflow_client.environment_variables import MLFLOW_HTTP_REQUEST_TIMEOUT
from mlflow_client.error_codes import INVALID_PARAMETER_VALUE
from mlflow_client.exceptions import (
    InvalidUrlException,
    MlflowException,
    RestException,
    get_error_code,
)
from mlflow_client.utils.string_utils import strip_suffix
from mlflow_client.version import VERSION

_logger = logging.getLogger(__name__)

_REST_API_PATH_PREFIX = "/api/2.0"
_TRACKING_REST_API_PATH_PREFIX = f"{_REST_API_PATH_PREFIX}/mlflow"
_DEFAULT_HEADERS = {"User-Agent": f"mlflow-client-python/{VERSION}"}


def http_request(
    host_creds,
    endpoint,
    method,
    extra_headers=None,
    timeout=None,
    **kwargs,
):
    """Makes an HTTP request with the specified method to the specified hostname/endpoint.
    Exactly one request is sent; failures are not retried.

    Args:
        host_creds: A :py:class:`mlflow_client.utils.rest_utils.MlflowHostCreds` object
            containing hostname and optional authentication.
        endpoint: A string for service endpoint, e.g. "/path/to/object".
        method: A string indicating the method to use, e.g. "GET", "POST", "PUT".
        extra_headers: A dict of HTTP header name-value pairs to be included in the request.
        timeout: Wait for timeout seconds for response from remote server for connect and
            read request. Defaults to ``MLFLOW_HTTP_REQUEST_TIMEOUT``, or no timeout if unset.
        kwargs: Additional keyword arguments to pass to `requests.request()`

    Returns:
        requests.Response object.
    """
    cleaned_hostname = strip_suffix(host_creds.host, "/")
    url = f"{cleaned_hostname}{endpoint}"

    headers = dict(_DEFAULT_HEADERS)
    if extra_headers:
        headers = dict(**headers, **extra_headers)

    auth_str = None
    if host_creds.username and host_creds.password:
        basic_auth_str = f"{host_creds.username}:{host_creds.password}".encode()
        auth_str = "Basic " + base64.standard_b64encode(basic_auth_str).decode("utf-8")
    elif host_creds.token:
        auth_str = f"Bearer {host_creds.token}"

    if auth_str:
        headers["Authorization"] = auth_str

    if host_creds.client_cert_path is not None:
        kwargs["cert"] = host_creds.client_cert_path

    timeout = MLFLOW_HTTP_REQUEST_TIMEOUT.get() if timeout is None else timeout

    _logger.debug(f"Sending {method} request to {url}")
    try:
        return requests.request(
            method=method,
            url=url,
            headers=headers,
            verify=host_creds.verify,
            timeout=timeout,
            **kwargs,
        )
    except requests.exceptions.Timeout as to:
        raise MlflowException(
            f"API request to {url} failed with timeout exception {to}."
            " To increase the timeout, set the environment variable "
            f"{MLFLOW_HTTP_REQUEST_TIMEOUT!s} to a larger value."
        ) from to
    except (requests.exceptions.InvalidURL, requests.exceptions.MissingSchema) as iu:
        raise InvalidUrlException(f"Invalid url: {url}") from iu
    except requests.exceptions.RequestException as e:
        raise MlflowException(f"API request to {url} failed with exception {e}") from e


def _can_parse_as_json_object(string):
    try:
        return isinstance(json.loads(string), dict)
    except Exception:
        return False


def _is_success(status_code):
    return 200 <= status_code < 300


def verify_rest_response(response, endpoint):
    """Verify the return code and format, raise exception if the request was not successful."""
    # Some endpoints answer a successful call with an empty body
    if _is_success(response.status_code) and response.text.strip() == "":
        response._content = b"{}"
        return response

    if not _is_success(response.status_code):
        if _can_parse_as_json_object(response.text):
            raise RestException(json.loads(response.text), status_code=response.status_code)
        else:
            base_msg = (
                f"API request to endpoint {endpoint} "
                f"failed with error code {response.status_code}"
            )
            error_code = get_error_code(response.status_code)
            raise RestException(
                {
                    "error_code": error_code,
                    "message": f"{base_msg}. Response body: '{response.text}'",
                },
                status_code=response.status_code,
            )

    if not _can_parse_as_json_object(response.text):
        base_msg = (
            "API request to endpoint was successful but the response body was not "
            "in a valid JSON format"
        )
        raise MlflowException(f"{base_msg}. Response body: '{response.text}'")

    return response


def _strip_none_values(body):
    return {k: v for k, v in body.items() if v is not None}


def call_endpoint(host_creds, endpoint, method, json_body, extra_headers=None):
    """
    Sends ``json_body`` to the endpoint, as query parameters for ``GET`` and as a JSON body
    otherwise, and returns the decoded JSON response. Fields set to ``None`` are omitted.
    """
    call_kwargs = {
        "host_creds": host_creds,
        "endpoint": endpoint,
        "method": method,
    }
    if extra_headers is not None:
        call_kwargs["extra_headers"] = extra_headers
    if json_body is not None:
        json_body = _strip_none_values(json_body)
    if method == "GET":
        call_kwargs["params"] = json_body
    else:
        call_kwargs["json"] = json_body
    response = http_request(**call_kwargs)

    response = verify_rest_response(response, endpoint)
    response_text = response.text.strip()
    return json.loads(response_text) if response_text else {}


def get_tracking_endpoint(path):
    return f"{_TRACKING_REST_API_PATH_PREFIX}/{path}"


class MlflowHostCreds:
    """
    Provides a hostname and optional authentication for talking to an MLflow tracking server.

    Args:
        host: Hostname (e.g., http://localhost:5000) to MLflow server. Required.
        username: Username to use with Basic authentication when talking to server.
            If this is specified, password must also be specified.
        password: Password to use with Basic authentication when talking to server.
            If this is specified, username must also be specified.
        token: Token to use with Bearer authentication when talking to server.
            If provided, user/password authentication will be ignored.
        ignore_tls_verification: If true, we will not verify the server's hostname or TLS
            certificate. This is useful for certain testing situations, but should never be
            true in production.
            If this is set to true ``server_cert_path`` must not be set.
        client_cert_path: Path to ssl client cert file (.pem).
            Sets the cert param of the ``requests.request``
            function (see https://requests.readthedocs.io/en/master/api/).
        server_cert_path: Path to a CA bundle to use.
            Sets the verify param of the ``requests.request``
            function (see https://requests.readthedocs.io/en/master/api/).
            If this is set ``ignore_tls_verification`` must be false.
    """

    def __init__(
        self,
        host,
        username=None,
        password=None,
        token=None,
        ignore_tls_verification=False,
        client_cert_path=None,
        server_cert_path=None,
    ):
        if not host:
            raise MlflowException(
                message="host is a required parameter for MlflowHostCreds",
                error_code=INVALID_PARAMETER_VALUE,
            )
        if ignore_tls_verification and (server_cert_path is not None):
            raise MlflowException(
                message=(
                    "When 'ignore_tls_verification' is true then 'server_cert_path' "
                    "must not be set! This error may have occurred because the "
                    "'MLFLOW_TRACKING_INSECURE_TLS' and 'MLFLOW_TRACKING_SERVER_CERT_PATH' "
                    "environment variables are both set - only one of these environment "
                    "variables may be set."
                ),
                error_code=INVALID_PARAMETER_VALUE,
            )
        self.host = host
        self.username = username
        self.password = password
        self.token = token
        self.ignore_tls_verification = ignore_tls_verification
        self.client_cert_path = client_cert_path
        self.server_cert_path = server_cert_path

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return self.__dict__ == other.__dict__
        return NotImplemented

    def __hash__(self):
        return hash(frozenset(self.__dict__.items()))

    @property
    def verify(self):
        if self.server_cert_path is None:
            return not self.ignore_tls_verification
        else:
            return self.server_cert_path
