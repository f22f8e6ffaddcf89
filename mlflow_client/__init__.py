"""
The ``mlflow_client`` module provides a synchronous Python client for the
`MLflow Tracking REST API <https://mlflow.org/docs/latest/rest-api.html>`_.

.. code-block:: python

    from mlflow_client import MlflowClient

    client = MlflowClient("http://localhost:5000")
    experiment = client.create_experiment_if_not_exists("my-experiment")
    with experiment.start_run("baseline") as run:
        run.log_params("", {"lr": 0.01, "optimizer": {"name": "adam"}})
        run.log_metric("loss", 0.25, step=1)
"""

from mlflow_client.environment_variables import MLFLOW_CONFIGURE_LOGGING
from mlflow_client.utils.logging_utils import _configure_mlflow_loggers
from mlflow_client.version import VERSION

if MLFLOW_CONFIGURE_LOGGING.get() is True:
    _configure_mlflow_loggers(root_module_name=__name__)

from mlflow_client.exceptions import MlflowException, RestException, RunFinishedException
from mlflow_client.tracking import ActiveRun, MlflowClient, MlflowExperiment, MlflowRun

__version__ = VERSION

__all__ = [
    "ActiveRun",
    "MlflowClient",
    "MlflowException",
    "MlflowExperiment",
    "MlflowRun",
    "RestException",
    "RunFinishedException",
]
