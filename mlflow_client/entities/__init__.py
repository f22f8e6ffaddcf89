"""
The ``mlflow_client.entities`` module defines entities returned by the MLflow Tracking
`REST API <https://mlflow.org/docs/latest/rest-api.html>`_.
"""

from mlflow_client.entities.dataset import Dataset
from mlflow_client.entities.dataset_input import DatasetInput
from mlflow_client.entities.experiment import Experiment
from mlflow_client.entities.experiment_tag import ExperimentTag
from mlflow_client.entities.input_tag import InputTag
from mlflow_client.entities.lifecycle_stage import LifecycleStage
from mlflow_client.entities.metric import Metric
from mlflow_client.entities.param import Param
from mlflow_client.entities.run import Run
from mlflow_client.entities.run_data import RunData
from mlflow_client.entities.run_info import RunInfo
from mlflow_client.entities.run_inputs import RunInputs
from mlflow_client.entities.run_status import RunStatus
from mlflow_client.entities.run_tag import RunTag
from mlflow_client.entities.view_type import ViewType

__all__ = [
    "Dataset",
    "DatasetInput",
    "Experiment",
    "ExperimentTag",
    "InputTag",
    "LifecycleStage",
    "Metric",
    "Param",
    "Run",
    "RunData",
    "RunInfo",
    "RunInputs",
    "RunStatus",
    "RunTag",
    "ViewType",
]
