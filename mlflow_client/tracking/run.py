import logging
from collections.abc import Mapping
from typing import Optional

from mlflow_client.entities import Metric, Param, Run, RunTag
from mlflow_client.utils import chunk_list
from mlflow_client.utils.param_utils import flatten_params, render_param_value
from mlflow_client.utils.time import get_current_time_millis
from mlflow_client.utils.validation import (
    MAX_ENTITIES_PER_BATCH,
    MAX_METRICS_PER_BATCH,
    MAX_PARAMS_TAGS_PER_BATCH,
    _validate_batch_log_data,
    _validate_key_name,
    _validate_metric,
    _validate_tag,
)

_logger = logging.getLogger(__name__)


class MlflowRun:
    """
    Handle on a `Run <https://mlflow.org/docs/latest/tracking.html#runs>`_ of the tracking
    server. Every method issues its requests immediately; the handle keeps the run data fetched
    at creation time and does not refresh it unless :py:meth:`reload` is called.
    """

    def __init__(self, store, run: Run):
        self._store = store
        self._run = run

    @property
    def run_id(self) -> str:
        return self._run.info.run_id

    @property
    def run_name(self) -> Optional[str]:
        return self._run.info.run_name

    @property
    def data(self) -> Run:
        """The :py:class:`mlflow_client.entities.Run` this handle was built from."""
        return self._run

    def __repr__(self):
        return f"<MlflowRun: run_id={self.run_id!r}, run_name={self.run_name!r}>"

    def reload(self) -> "MlflowRun":
        return MlflowRun(self._store, self._store.get_run(self.run_id))

    def update(self, status=None, end_time=None, run_name=None):
        """
        Update the status, end time or name of the run.

        Args:
            status: A string value of :py:class:`mlflow_client.entities.RunStatus`.
            end_time: End time of the run in milliseconds since the UNIX epoch.
            run_name: New name of the run.
        """
        return self._store.update_run_info(
            self.run_id, run_status=status, end_time=end_time, run_name=run_name
        )

    def delete(self):
        self._store.delete_run(self.run_id)

    def restore(self):
        self._store.restore_run(self.run_id)

    def set_tag(self, key, value):
        _validate_tag(key, value)
        self._store.set_tag(self.run_id, RunTag(key, value))

    def delete_tag(self, key):
        _validate_key_name(key, "tag")
        self._store.delete_tag(self.run_id, key)

    def log_param(self, key, value):
        """
        Log a single parameter. ``value`` is converted to a string the same way as in
        :py:meth:`log_params`. A param can only be logged once per key; logging a different
        value for an existing key fails on the server.
        """
        _validate_key_name(key, "param")
        self._store.log_param(self.run_id, Param(key, render_param_value(key, value)))

    def log_params(self, prefix, params):
        """
        Log a structured set of parameters.

        Args:
            prefix: Prefix prepended to every key, joined with ``.``. Use ``""`` for none.
            params: A mapping (possibly nested), a dataclass, a pydantic model or a scalar.
                See :py:func:`mlflow_client.utils.param_utils.flatten_params`.

        .. code-block:: python

            run.log_params("optimizer", {"name": "adam", "lr": 0.001})
            # logs optimizer.name=adam, optimizer.lr=0.001
        """
        self.log_batch(params=flatten_params(prefix, params))

    def log_metric(self, key, value, timestamp=None, step=None):
        """
        Log a metric data point. Logging the same key again appends a point to the series.

        Args:
            key: Metric name.
            value: Metric value (float).
            timestamp: Time in milliseconds since the UNIX epoch. Defaults to now.
            step: Optional integer training step at which the metric was computed.
        """
        timestamp = timestamp if timestamp is not None else get_current_time_millis()
        _validate_metric(key, value, timestamp, step)
        self._store.log_metric(self.run_id, Metric(key, float(value), timestamp, step))

    def log_metrics(self, metrics, step=None):
        """
        Log several metrics with a shared timestamp.

        Args:
            metrics: A mapping of metric name to value, or an iterable of ``(name, value)``.
            step: Optional integer step shared by all points.
        """
        if isinstance(metrics, Mapping):
            metrics = metrics.items()
        timestamp = get_current_time_millis()
        metric_objs = []
        for key, value in metrics:
            _validate_metric(key, value, timestamp, step)
            metric_objs.append(Metric(key, float(value), timestamp, step))
        self.log_batch(metrics=metric_objs)

    def log_batch(self, metrics=(), params=(), tags=()):
        """
        Log metrics, params and tags in as few requests as the server limits allow.
        Nothing is sent when all three are empty.
        """
        metrics, params, tags = list(metrics), list(params), list(tags)
        total = len(metrics) + len(params) + len(tags)
        if total == 0:
            return
        _validate_batch_log_data(metrics, params, tags)
        if (
            total <= MAX_ENTITIES_PER_BATCH
            and len(metrics) <= MAX_METRICS_PER_BATCH
            and len(params) <= MAX_PARAMS_TAGS_PER_BATCH
            and len(tags) <= MAX_PARAMS_TAGS_PER_BATCH
        ):
            self._store.log_batch(self.run_id, metrics, params, tags)
            return

        _logger.debug(
            f"Splitting batch of {len(metrics)} metrics, {len(params)} params and "
            f"{len(tags)} tags for run {self.run_id}"
        )
        for metrics_chunk in chunk_list(metrics, MAX_METRICS_PER_BATCH):
            self._store.log_batch(self.run_id, metrics_chunk, [], [])
        for params_chunk in chunk_list(params, MAX_PARAMS_TAGS_PER_BATCH):
            self._store.log_batch(self.run_id, [], params_chunk, [])
        for tags_chunk in chunk_list(tags, MAX_PARAMS_TAGS_PER_BATCH):
            self._store.log_batch(self.run_id, [], [], tags_chunk)

    def log_inputs(self, datasets):
        """
        Log dataset inputs.

        Args:
            datasets: A list of :py:class:`mlflow_client.entities.DatasetInput`.
        """
        self._store.log_inputs(self.run_id, list(datasets))

    def get_metric_history(self, key):
        """Return every logged point of the metric ``key``, in the order the server reports."""
        results = []
        page_token = None
        while True:
            page = self._store.get_metric_history(self.run_id, key, page_token=page_token)
            results.extend(page)
            page_token = page.token
            if page_token is None:
                break
        return results
