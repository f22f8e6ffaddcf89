import threading
from unittest import mock

import pytest

from mlflow_client.entities import RunStatus
from mlflow_client.error_codes import INVALID_STATE
from mlflow_client.exceptions import MlflowException, RunFinishedException

from tests.helper_functions import random_str


@pytest.fixture
def experiment(client):
    return client.create_experiment(random_str())


def _server_run_info(tracking_server, active_run):
    return tracking_server.runs[active_run.run_id]["info"]


def test_logging_through_active_run(experiment, tracking_server):
    active_run = experiment.start_run("train")
    active_run.log_param("seed", 7)
    active_run.log_params("opt", {"name": "sgd", "momentum": 0.9})
    active_run.log_metric("loss", 0.5, step=0)
    active_run.log_metric("loss", 0.25, step=1)
    active_run.log_metrics({"acc": 0.8}, step=1)

    run = active_run.run.reload()
    assert run.data.data.params == {"seed": "7", "opt.name": "sgd", "opt.momentum": "0.9"}
    assert run.data.data.metrics == {"loss": 0.25, "acc": 0.8}
    assert [m.value for m in active_run.run.get_metric_history("loss")] == [0.5, 0.25]


def test_finish_marks_run_finished(experiment, tracking_server):
    active_run = experiment.start_run("train")
    with mock.patch(
        "mlflow_client.tracking.active_run.get_current_time_millis", return_value=1700000009000
    ):
        active_run.finish()
    info = _server_run_info(tracking_server, active_run)
    assert info["status"] == RunStatus.FINISHED
    assert info["end_time"] == 1700000009000
    assert active_run.finished


@pytest.mark.parametrize(
    ("method", "args"),
    [
        ("log_param", ("seed", 7)),
        ("log_params", ("opt", {"lr": 0.1})),
        ("log_metric", ("loss", 0.5)),
        ("log_metrics", ({"loss": 0.5},)),
        ("finish", ()),
    ],
)
def test_calls_after_finish_fail(experiment, tracking_server, method, args):
    active_run = experiment.start_run("train")
    active_run.finish()
    request_count = len(tracking_server.requests)

    with pytest.raises(RunFinishedException, match="has already been finished") as e:
        getattr(active_run, method)(*args)
    assert isinstance(e.value, MlflowException)
    assert e.value.error_code == INVALID_STATE
    assert e.value.run_id == active_run.run_id
    assert len(tracking_server.requests) == request_count


def test_context_manager_finishes_run(experiment, tracking_server):
    with experiment.start_run("train") as active_run:
        active_run.log_metric("loss", 0.1)
    assert _server_run_info(tracking_server, active_run)["status"] == RunStatus.FINISHED
    with pytest.raises(RunFinishedException):
        active_run.log_metric("loss", 0.2)


def test_context_manager_marks_run_failed_on_exception(experiment, tracking_server):
    with pytest.raises(ValueError, match="boom"):
        with experiment.start_run("train") as active_run:
            raise ValueError("boom")
    assert _server_run_info(tracking_server, active_run)["status"] == RunStatus.FAILED
    assert active_run.finished


def test_context_manager_leaves_finished_run_alone(experiment, tracking_server):
    with experiment.start_run("train") as active_run:
        active_run.finish()
    assert len(tracking_server.requests_to("runs/update")) == 1
    assert _server_run_info(tracking_server, active_run)["status"] == RunStatus.FINISHED


def test_failed_finish_keeps_run_active(experiment, tracking_server):
    active_run = experiment.start_run("train")
    with mock.patch.object(
        active_run.run, "update", side_effect=MlflowException("connection refused")
    ):
        with pytest.raises(MlflowException, match="connection refused"):
            active_run.finish()
    assert not active_run.finished
    active_run.log_metric("loss", 0.5)
    active_run.finish()
    assert active_run.finished


def test_concurrent_logging_and_finish(experiment, tracking_server):
    active_run = experiment.start_run("train")
    errors = []

    def log_points(offset):
        for step in range(20):
            try:
                active_run.log_metric("loss", 1.0, step=offset + step)
            except RunFinishedException as e:
                errors.append(e)

    threads = [threading.Thread(target=log_points, args=(i * 100,)) for i in range(4)]
    for thread in threads:
        thread.start()
    active_run.finish()
    for thread in threads:
        thread.join()

    finished_at = next(
        i
        for i, (_, path, _) in enumerate(tracking_server.requests)
        if path.endswith("/runs/update")
    )
    # No metric reaches the server once the run is finished
    assert not any(
        path.endswith("/runs/log-metric") for _, path, _ in tracking_server.requests[finished_at:]
    )
    history = active_run.run.get_metric_history("loss")
    assert len(history) + len(errors) == 80
