from unittest import mock

import pytest

from mlflow_client.tracking import MlflowClient

from tests.helper_functions import FakeTrackingServer

_MLFLOW_ENV_VARS = [
    "MLFLOW_TRACKING_URI",
    "MLFLOW_TRACKING_USERNAME",
    "MLFLOW_TRACKING_PASSWORD",
    "MLFLOW_TRACKING_TOKEN",
    "MLFLOW_TRACKING_INSECURE_TLS",
    "MLFLOW_TRACKING_SERVER_CERT_PATH",
    "MLFLOW_TRACKING_CLIENT_CERT_PATH",
    "MLFLOW_HTTP_REQUEST_TIMEOUT",
    "MLFLOW_LOGGING_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_mlflow_env_vars(monkeypatch):
    for name in _MLFLOW_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def tracking_server():
    server = FakeTrackingServer()
    with mock.patch("requests.request", side_effect=server) as request_mock:
        server.request_mock = request_mock
        yield server


@pytest.fixture
def client(tracking_server):
    return MlflowClient("http://tracking-server:5000")
