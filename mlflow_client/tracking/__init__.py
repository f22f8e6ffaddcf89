"""
The ``mlflow_client.tracking`` module provides handles for managing experiments and runs on an
MLflow Tracking Server.
"""

from mlflow_client.tracking.active_run import ActiveRun
from mlflow_client.tracking.client import MlflowClient
from mlflow_client.tracking.experiment import MlflowExperiment
from mlflow_client.tracking.run import MlflowRun

__all__ = [
    "ActiveRun",
    "MlflowClient",
    "MlflowExperiment",
    "MlflowRun",
]
