import logging
import threading

from mlflow_client.entities import RunStatus
from mlflow_client.exceptions import RunFinishedException
from mlflow_client.utils.time import get_current_time_millis

_logger = logging.getLogger(__name__)


class ActiveRun:
    """
    Wrapper around :py:class:`mlflow_client.tracking.run.MlflowRun` returned by
    :py:meth:`MlflowExperiment.start_run`. It enables using Python ``with`` syntax, and refuses
    any logging once the run has been finished.
    """

    def __init__(self, run):
        self._run = run
        self._lock = threading.Lock()
        self._finished = False

    @property
    def run(self):
        return self._run

    @property
    def run_id(self):
        return self._run.run_id

    @property
    def finished(self):
        return self._finished

    def __repr__(self):
        return f"<ActiveRun: run_id={self.run_id!r}, finished={self._finished}>"

    def _check_not_finished(self):
        if self._finished:
            raise RunFinishedException(self.run_id)

    def log_param(self, key, value):
        with self._lock:
            self._check_not_finished()
            self._run.log_param(key, value)

    def log_params(self, prefix, params):
        with self._lock:
            self._check_not_finished()
            self._run.log_params(prefix, params)

    def log_metric(self, key, value, step=None):
        """Append a data point to the metric ``key``, timestamped now."""
        with self._lock:
            self._check_not_finished()
            self._run.log_metric(key, value, step=step)

    def log_metrics(self, metrics, step=None):
        with self._lock:
            self._check_not_finished()
            self._run.log_metrics(metrics, step=step)

    def _terminate(self, status):
        with self._lock:
            self._check_not_finished()
            self._run.update(status=status, end_time=get_current_time_millis())
            self._finished = True
        _logger.debug(f"Run {self.run_id} terminated with status {status}")

    def finish(self):
        """
        Mark the run as ``FINISHED``. After this call, every logging method and ``finish``
        itself raise :py:class:`mlflow_client.exceptions.RunFinishedException`.
        """
        self._terminate(RunStatus.FINISHED)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._finished:
            return False
        status = RunStatus.FINISHED if exc_type is None else RunStatus.FAILED
        self._terminate(status)
        return exc_type is None
