import logging
from urllib.parse import urlparse

from mlflow_client.environment_variables import (
    MLFLOW_TRACKING_CLIENT_CERT_PATH,
    MLFLOW_TRACKING_INSECURE_TLS,
    MLFLOW_TRACKING_PASSWORD,
    MLFLOW_TRACKING_SERVER_CERT_PATH,
    MLFLOW_TRACKING_TOKEN,
    MLFLOW_TRACKING_URI,
    MLFLOW_TRACKING_USERNAME,
)
from mlflow_client.exceptions import MlflowException, RestException
from mlflow_client.utils.rest_utils import MlflowHostCreds

_logger = logging.getLogger(__name__)

DEFAULT_TRACKING_URI = "http://localhost:5000"
_SUPPORTED_SCHEMES = ("http", "https")


def _resolve_tracking_uri(tracking_uri=None):
    """
    Returns the tracking URI to use: the explicit value if given, else ``MLFLOW_TRACKING_URI``,
    else ``http://localhost:5000``. Only HTTP(S) tracking servers are supported.
    """
    uri = tracking_uri or MLFLOW_TRACKING_URI.get() or DEFAULT_TRACKING_URI
    parsed = urlparse(uri)
    if parsed.scheme not in _SUPPORTED_SCHEMES or not parsed.netloc:
        raise MlflowException.invalid_parameter_value(
            f"Invalid tracking URI '{uri}'. Only http:// and https:// tracking servers are "
            "supported."
        )
    return uri


def get_default_host_creds(store_uri):
    return MlflowHostCreds(
        host=store_uri,
        username=MLFLOW_TRACKING_USERNAME.get(),
        password=MLFLOW_TRACKING_PASSWORD.get(),
        token=MLFLOW_TRACKING_TOKEN.get(),
        ignore_tls_verification=MLFLOW_TRACKING_INSECURE_TLS.get(),
        client_cert_path=MLFLOW_TRACKING_CLIENT_CERT_PATH.get(),
        server_cert_path=MLFLOW_TRACKING_SERVER_CERT_PATH.get(),
    )


def none_if_not_exist(func, *args, **kwargs):
    """
    Calls ``func`` and returns its result, or None if the server reports that the requested
    resource does not exist. Any other error propagates.
    """
    try:
        return func(*args, **kwargs)
    except RestException as e:
        if e.is_resource_does_not_exist():
            _logger.debug(f"Resource not found: {e.message}")
            return None
        raise
