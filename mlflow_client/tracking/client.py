"""
Entry point of the tracking client: a thin, synchronous wrapper around the MLflow Tracking
REST API that creates and looks up experiments, from which runs are created and logged to.
"""

import logging
from typing import Optional

from mlflow_client.entities import ExperimentTag, ViewType
from mlflow_client.exceptions import RestException
from mlflow_client.store.rest_store import RestStore
from mlflow_client.tracking._tracking_utils import (
    _resolve_tracking_uri,
    get_default_host_creds,
    none_if_not_exist,
)
from mlflow_client.tracking.experiment import MlflowExperiment
from mlflow_client.utils.validation import _validate_key_name, _validate_tag

_logger = logging.getLogger(__name__)


def _to_experiment_tags(tags):
    if tags is None:
        return []
    if isinstance(tags, dict):
        tags = tags.items()
    experiment_tags = []
    for key, value in tags:
        _validate_tag(key, value)
        experiment_tags.append(ExperimentTag(key, value))
    return experiment_tags


class MlflowClient:
    """
    Client of an MLflow Tracking Server that creates and manages experiments and runs.
    """

    def __init__(self, tracking_uri: Optional[str] = None):
        """
        Args:
            tracking_uri: Address of the tracking server, e.g. ``http://localhost:5000``.
                If not provided, defaults to the ``MLFLOW_TRACKING_URI`` environment variable,
                or ``http://localhost:5000`` if that is unset.
        """
        self._tracking_uri = _resolve_tracking_uri(tracking_uri)
        self._store = RestStore(lambda: get_default_host_creds(self._tracking_uri))

    @property
    def tracking_uri(self) -> str:
        return self._tracking_uri

    def __repr__(self):
        return f"<MlflowClient: tracking_uri={self._tracking_uri!r}>"

    def create_experiment(self, name, artifact_location=None, tags=None) -> MlflowExperiment:
        """
        Create an experiment.

        Args:
            name: The experiment name. Must be unique.
            artifact_location: The location to store run artifacts. If not provided, the server
                picks an appropriate default.
            tags: A dictionary of string keys and values to set as tags on the experiment.

        Returns:
            :py:class:`MlflowExperiment` of the created experiment.
        """
        _validate_key_name(name, "experiment")
        experiment_id = self._store.create_experiment(
            name, artifact_location=artifact_location, tags=_to_experiment_tags(tags)
        )
        _logger.info(f"Created experiment '{name}' with ID {experiment_id}")
        return MlflowExperiment(self._store, self._store.get_experiment(experiment_id))

    def create_experiment_if_not_exists(
        self, name, artifact_location=None, tags=None
    ) -> MlflowExperiment:
        """
        Return the experiment named ``name``, creating it first if the server doesn't know it.
        ``artifact_location`` and ``tags`` are only used when the experiment is created.
        """
        if experiment := self.get_experiment_by_name(name):
            return experiment
        try:
            return self.create_experiment(name, artifact_location=artifact_location, tags=tags)
        except RestException as e:
            if not e.is_resource_already_exists():
                raise
            # Created concurrently by another client.
            _logger.debug(f"Experiment '{name}' was created concurrently, fetching it")
            return MlflowExperiment(self._store, self._store.get_experiment_by_name(name))

    def get_experiment(self, experiment_id) -> Optional[MlflowExperiment]:
        """
        Retrieve an experiment by experiment_id.

        Returns:
            :py:class:`MlflowExperiment`, or None if the experiment does not exist.
        """
        experiment = none_if_not_exist(self._store.get_experiment, experiment_id)
        return MlflowExperiment(self._store, experiment) if experiment is not None else None

    def get_experiment_by_name(self, name) -> Optional[MlflowExperiment]:
        """
        Retrieve an experiment by experiment name.

        Returns:
            :py:class:`MlflowExperiment`, or None if the experiment does not exist.
        """
        _validate_key_name(name, "experiment")
        experiment = none_if_not_exist(self._store.get_experiment_by_name, name)
        return MlflowExperiment(self._store, experiment) if experiment is not None else None

    def search_experiments(self, filter_string=None, order_by=None, view_type=ViewType.ACTIVE_ONLY):
        """
        Search for experiments that match the specified search query, fetching every page.

        Args:
            filter_string: Filter query string, e.g. ``"name LIKE 'train-%'"``. Defaults to
                searching for all experiments.
            order_by: List of columns to order by, e.g. ``["last_update_time DESC"]``.
            view_type: One of :py:class:`mlflow_client.entities.ViewType` values.

        Returns:
            A list of :py:class:`MlflowExperiment`.
        """
        experiments = []
        page_token = None
        while True:
            page = self._store.search_experiments(
                view_type=view_type,
                filter_string=filter_string,
                order_by=order_by,
                page_token=page_token,
            )
            experiments.extend(MlflowExperiment(self._store, e) for e in page)
            page_token = page.token
            if page_token is None:
                break
        return experiments
