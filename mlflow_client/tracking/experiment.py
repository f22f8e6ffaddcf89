import logging
from typing import Optional

from mlflow_client.entities import Experiment, ExperimentTag, RunTag, ViewType
from mlflow_client.tracking._tracking_utils import none_if_not_exist
from mlflow_client.tracking.active_run import ActiveRun
from mlflow_client.tracking.run import MlflowRun
from mlflow_client.utils.time import get_current_time_millis
from mlflow_client.utils.validation import _validate_key_name, _validate_tag

_logger = logging.getLogger(__name__)


def _to_run_tags(tags):
    if tags is None:
        return []
    if isinstance(tags, dict):
        tags = tags.items()
    run_tags = []
    for key, value in tags:
        _validate_tag(key, value)
        run_tags.append(RunTag(key, value))
    return run_tags


class MlflowExperiment:
    """
    Handle on an experiment of the tracking server, used to create and look up its runs.
    """

    def __init__(self, store, experiment: Experiment):
        self._store = store
        self._experiment = experiment

    @property
    def experiment_id(self) -> str:
        return self._experiment.experiment_id

    @property
    def name(self) -> str:
        return self._experiment.name

    @property
    def data(self) -> Experiment:
        """The :py:class:`mlflow_client.entities.Experiment` this handle was built from."""
        return self._experiment

    def __repr__(self):
        return f"<MlflowExperiment: experiment_id={self.experiment_id!r}, name={self.name!r}>"

    def reload(self) -> "MlflowExperiment":
        return MlflowExperiment(self._store, self._store.get_experiment(self.experiment_id))

    def delete(self):
        self._store.delete_experiment(self.experiment_id)

    def restore(self):
        self._store.restore_experiment(self.experiment_id)

    def rename(self, new_name):
        _validate_key_name(new_name, "experiment")
        self._store.rename_experiment(self.experiment_id, new_name)

    def set_tag(self, key, value):
        _validate_tag(key, value)
        self._store.set_experiment_tag(self.experiment_id, ExperimentTag(key, value))

    def search_runs(self, filter_string=None, order_by=None, run_view_type=ViewType.ACTIVE_ONLY):
        """
        Search for runs of this experiment that satisfy a filter expression, following the
        server's page tokens until every match has been fetched.

        Args:
            filter_string: Filter query string, e.g. ``"params.lr = '0.1'"``. Defaults to
                searching all runs.
            order_by: List of columns to order by, e.g. ``["metrics.loss DESC"]``.
            run_view_type: One of :py:class:`mlflow_client.entities.ViewType` values.

        Returns:
            A list of :py:class:`MlflowRun`.
        """
        runs = []
        page_token = None
        while True:
            page = self._store.search_runs(
                [self.experiment_id],
                filter_string=filter_string,
                run_view_type=run_view_type,
                order_by=order_by,
                page_token=page_token,
            )
            runs.extend(MlflowRun(self._store, run) for run in page)
            page_token = page.token
            if page_token is None:
                break
        return runs

    def get_run(self, run_id) -> Optional[MlflowRun]:
        """Return the run with ID ``run_id``, or None if the server doesn't know it."""
        run = none_if_not_exist(self._store.get_run, run_id)
        return MlflowRun(self._store, run) if run is not None else None

    def create_run(self, run_name, start_time=None, tags=None) -> MlflowRun:
        """
        Create a run in this experiment. The server sets its status to ``RUNNING``.

        Args:
            run_name: Name of the run.
            start_time: Start time in milliseconds since the UNIX epoch, or None to let the
                server decide.
            tags: A dictionary of string keys and values, or an iterable of ``(key, value)``.
        """
        run = self._store.create_run(
            self.experiment_id, run_name, start_time=start_time, tags=_to_run_tags(tags)
        )
        _logger.debug(f"Created run {run.info.run_id} in experiment {self.experiment_id}")
        return MlflowRun(self._store, run)

    def start_run(self, run_name, start_time=None, tags=None) -> ActiveRun:
        """
        Create a run starting now (unless ``start_time`` is given) and return an
        :py:class:`ActiveRun` for logging to it.

        .. code-block:: python

            with experiment.start_run("training") as run:
                run.log_params("model", {"lr": 0.01})
                run.log_metric("loss", 0.4, step=1)
        """
        start_time = start_time if start_time is not None else get_current_time_millis()
        return ActiveRun(self.create_run(run_name, start_time=start_time, tags=tags))
