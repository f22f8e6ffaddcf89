from unittest import mock

import pytest

from mlflow_client.entities import LifecycleStage, RunStatus, ViewType
from mlflow_client.exceptions import MlflowException
from mlflow_client.tracking import ActiveRun, MlflowRun

from tests.helper_functions import mock_response, random_str


@pytest.fixture
def experiment(client):
    return client.create_experiment(random_str())


def test_accessors_and_reload(experiment, tracking_server):
    assert experiment.data.experiment_id == experiment.experiment_id
    experiment.set_tag("team", "vision")
    assert experiment.data.tags == {}
    assert experiment.reload().data.tags == {"team": "vision"}


def test_rename(experiment, tracking_server):
    experiment.rename("renamed")
    assert experiment.reload().name == "renamed"
    with pytest.raises(MlflowException, match="Invalid experiment name"):
        experiment.rename("")


def test_delete_and_restore(experiment, tracking_server):
    experiment.delete()
    assert experiment.reload().data.lifecycle_stage == LifecycleStage.DELETED
    experiment.restore()
    assert experiment.reload().data.lifecycle_stage == LifecycleStage.ACTIVE


def test_create_run(experiment, tracking_server):
    run = experiment.create_run("train", start_time=1700000000000, tags={"owner": "me"})
    assert isinstance(run, MlflowRun)
    assert run.run_name == "train"
    assert run.data.info.experiment_id == experiment.experiment_id
    assert run.data.info.status == RunStatus.RUNNING
    assert run.data.info.start_time == 1700000000000
    assert run.data.data.tags == {"owner": "me"}


def test_create_run_rejects_invalid_tags(experiment, tracking_server):
    with pytest.raises(MlflowException, match="Tag values must be strings"):
        experiment.create_run("train", tags={"epochs": 3})
    assert tracking_server.requests_to("runs/create") == []


def test_start_run_defaults_start_time_to_now(experiment, tracking_server):
    with mock.patch(
        "mlflow_client.tracking.experiment.get_current_time_millis", return_value=1234
    ):
        active_run = experiment.start_run("train")
    assert isinstance(active_run, ActiveRun)
    assert active_run.run.data.info.start_time == 1234
    assert tracking_server.requests_to("runs/create")[0]["start_time"] == 1234


def test_get_run(experiment, tracking_server):
    run = experiment.create_run("train")
    assert experiment.get_run(run.run_id).run_name == "train"
    assert experiment.get_run("missing") is None


def test_search_runs(experiment, tracking_server):
    first = experiment.create_run("first")
    second = experiment.create_run("second")
    second.delete()

    assert [r.run_id for r in experiment.search_runs()] == [first.run_id]
    assert [r.run_id for r in experiment.search_runs(run_view_type=ViewType.ALL)] == [
        first.run_id,
        second.run_id,
    ]
    body = tracking_server.requests_to("runs/search")[0]
    assert body["experiment_ids"] == [experiment.experiment_id]
    assert body["max_results"] == 50000


def test_search_runs_paginates(experiment):
    run_json = {"info": {"run_id": "r1", "experiment_id": experiment.experiment_id}}
    page_1 = mock_response(body={"runs": [run_json], "next_page_token": "t1"})
    page_2 = mock_response(
        body={"runs": [{"info": {"run_id": "r2", "experiment_id": experiment.experiment_id}}]}
    )
    with mock.patch("requests.request", side_effect=[page_1, page_2]) as request:
        runs = experiment.search_runs(
            filter_string="params.lr = '0.1'", order_by=["start_time DESC"]
        )
    assert [r.run_id for r in runs] == ["r1", "r2"]
    second_body = request.call_args_list[1].kwargs["json"]
    assert second_body["page_token"] == "t1"
    assert second_body["filter"] == "params.lr = '0.1'"
    assert second_body["order_by"] == ["start_time DESC"]
