from unittest import mock

import pytest

from mlflow_client.entities import ViewType
from mlflow_client.error_codes import (
    INVALID_PARAMETER_VALUE,
    PERMISSION_DENIED,
    RESOURCE_ALREADY_EXISTS,
)
from mlflow_client.exceptions import MlflowException, RestException
from mlflow_client.tracking import MlflowClient, MlflowExperiment
from mlflow_client.tracking._tracking_utils import get_default_host_creds

from tests.helper_functions import mock_response, random_str


def test_default_tracking_uri():
    assert MlflowClient().tracking_uri == "http://localhost:5000"


def test_tracking_uri_from_env(monkeypatch):
    monkeypatch.setenv("MLFLOW_TRACKING_URI", "https://mlflow.example.com")
    assert MlflowClient().tracking_uri == "https://mlflow.example.com"
    assert MlflowClient("http://other:5000").tracking_uri == "http://other:5000"


@pytest.mark.parametrize(
    "uri", ["file:///tmp/mlruns", "databricks", "sqlite:///db.sqlite", "http://"]
)
def test_unsupported_tracking_uri(uri):
    with pytest.raises(MlflowException, match="Invalid tracking URI") as e:
        MlflowClient(uri)
    assert e.value.error_code == INVALID_PARAMETER_VALUE


def test_host_creds_from_env(monkeypatch):
    monkeypatch.setenv("MLFLOW_TRACKING_TOKEN", "secret")
    monkeypatch.setenv("MLFLOW_TRACKING_INSECURE_TLS", "true")
    creds = get_default_host_creds("https://mlflow.example.com")
    assert creds.host == "https://mlflow.example.com"
    assert creds.token == "secret"
    assert creds.verify is False


def test_requests_carry_auth_from_env(monkeypatch, client, tracking_server):
    monkeypatch.setenv("MLFLOW_TRACKING_USERNAME", "user")
    monkeypatch.setenv("MLFLOW_TRACKING_PASSWORD", "pass")
    client.create_experiment(random_str())
    headers = tracking_server.request_mock.call_args.kwargs["headers"]
    assert headers["Authorization"] == "Basic dXNlcjpwYXNz"
    assert tracking_server.request_mock.call_args.kwargs["url"].startswith(
        "http://tracking-server:5000/api/2.0/mlflow/"
    )


def test_create_experiment(client, tracking_server):
    name = random_str()
    experiment = client.create_experiment(
        name, artifact_location="s3://bucket/path", tags={"team": "vision"}
    )
    assert isinstance(experiment, MlflowExperiment)
    assert experiment.name == name
    assert experiment.data.artifact_location == "s3://bucket/path"
    assert experiment.data.tags == {"team": "vision"}


def test_create_experiment_duplicate_name(client, tracking_server):
    name = random_str()
    client.create_experiment(name)
    with pytest.raises(RestException, match="already exists") as e:
        client.create_experiment(name)
    assert e.value.error_code == RESOURCE_ALREADY_EXISTS


def test_create_experiment_if_not_exists_is_idempotent(client, tracking_server):
    name = random_str()
    first = client.create_experiment_if_not_exists(name)
    second = client.create_experiment_if_not_exists(name)
    assert first.experiment_id == second.experiment_id
    assert first.name == second.name == name
    assert len(tracking_server.requests_to("experiments/create")) == 1


def test_create_experiment_if_not_exists_returns_existing(client, tracking_server):
    name = random_str()
    existing = client.create_experiment(name)
    experiment = client.create_experiment_if_not_exists(name, tags={"ignored": "yes"})
    assert experiment.experiment_id == existing.experiment_id
    assert experiment.data.tags == {}


def test_create_experiment_if_not_exists_handles_concurrent_creation(client, tracking_server):
    name = random_str()
    created_elsewhere = MlflowClient("http://tracking-server:5000").create_experiment(name)
    # The lookup misses the experiment, which then exists by the time it is created
    with mock.patch.object(client, "get_experiment_by_name", return_value=None):
        experiment = client.create_experiment_if_not_exists(name)
    assert experiment.experiment_id == created_elsewhere.experiment_id


def test_create_experiment_if_not_exists_propagates_other_errors(client):
    response = mock_response(403, {"error_code": PERMISSION_DENIED, "message": "nope"})
    with mock.patch("requests.request", return_value=response):
        with pytest.raises(RestException, match="PERMISSION_DENIED: nope"):
            client.create_experiment_if_not_exists(random_str())


def test_get_experiment(client, tracking_server):
    experiment = client.create_experiment(random_str())
    fetched = client.get_experiment(experiment.experiment_id)
    assert fetched.data == experiment.data
    assert client.get_experiment("does-not-exist") is None


def test_get_experiment_by_name(client, tracking_server):
    name = random_str()
    experiment = client.create_experiment(name)
    assert client.get_experiment_by_name(name).experiment_id == experiment.experiment_id
    assert client.get_experiment_by_name(random_str()) is None


def test_search_experiments_returns_all(client, tracking_server):
    names = [random_str() for _ in range(5)]
    for name in names:
        client.create_experiment(name)
    experiments = client.search_experiments()
    assert [e.name for e in experiments] == names


def test_search_experiments_paginates(client):
    page_1 = mock_response(
        body={
            "experiments": [{"experiment_id": "1", "name": "a", "lifecycle_stage": "active"}],
            "next_page_token": "page2",
        }
    )
    page_2 = mock_response(
        body={"experiments": [{"experiment_id": "2", "name": "b", "lifecycle_stage": "active"}]}
    )
    with mock.patch("requests.request", side_effect=[page_1, page_2]) as request:
        experiments = client.search_experiments(filter_string="name LIKE '%'")
    assert [e.experiment_id for e in experiments] == ["1", "2"]
    assert request.call_count == 2
    assert "page_token" not in request.call_args_list[0].kwargs["json"]
    assert request.call_args_list[1].kwargs["json"]["page_token"] == "page2"
    assert request.call_args_list[1].kwargs["json"]["filter"] == "name LIKE '%'"


def test_search_experiments_view_type(client, tracking_server):
    active = client.create_experiment(random_str())
    deleted = client.create_experiment(random_str())
    deleted.delete()
    assert [e.experiment_id for e in client.search_experiments()] == [active.experiment_id]
    deleted_only = client.search_experiments(view_type=ViewType.DELETED_ONLY)
    assert [e.experiment_id for e in deleted_only] == [deleted.experiment_id]
    assert len(client.search_experiments(view_type=ViewType.ALL)) == 2
