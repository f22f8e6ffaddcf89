from mlflow_client.entities._mlflow_object import _MlflowObject
from mlflow_client.entities.metric import Metric
from mlflow_client.entities.param import Param
from mlflow_client.entities.run_tag import RunTag


class RunData(_MlflowObject):
    """
    Run data (metrics, parameters and tags).
    """

    def __init__(self, metrics=None, params=None, tags=None):
        """
        Construct a new :py:class:`mlflow_client.entities.RunData` instance.

        Args:
            metrics: List of :py:class:`mlflow_client.entities.Metric`.
            params: List of :py:class:`mlflow_client.entities.Param`.
            tags: List of :py:class:`mlflow_client.entities.RunTag`.
        """
        # Maintain the original list of metrics so that it can be serialized back
        self._metric_objs = metrics or []
        self._metrics = {metric.key: metric.value for metric in self._metric_objs}
        self._params = {param.key: param.value for param in (params or [])}
        self._tags = {tag.key: tag.value for tag in (tags or [])}

    @property
    def metrics(self):
        """
        Dictionary of string key -> metric value for the current run.
        The server reports the latest value of each metric.
        """
        return self._metrics

    @property
    def params(self):
        """Dictionary of param key (string) -> param value for the current run."""
        return self._params

    @property
    def tags(self):
        """Dictionary of tag key (string) -> tag value for the current run."""
        return self._tags

    def _add_metric(self, metric):
        self._metrics[metric.key] = metric.value
        self._metric_objs.append(metric)

    def _add_param(self, param):
        self._params[param.key] = param.value

    def _add_tag(self, tag):
        self._tags[tag.key] = tag.value

    def to_dictionary(self):
        return {
            "metrics": [m.to_dictionary() for m in self._metric_objs],
            "params": [{"key": key, "value": val} for key, val in self.params.items()],
            "tags": [{"key": key, "value": val} for key, val in self.tags.items()],
        }

    @classmethod
    def from_dictionary(cls, the_dict):
        run_data = cls()
        for metric in the_dict.get("metrics", []):
            run_data._add_metric(Metric.from_dictionary(metric))
        for param in the_dict.get("params", []):
            run_data._add_param(Param.from_dictionary(param))
        for tag in the_dict.get("tags", []):
            run_data._add_tag(RunTag.from_dictionary(tag))
        return run_data
