import math
from typing import Optional

from mlflow_client.entities._mlflow_object import _MlflowObject
from mlflow_client.error_codes import INVALID_PARAMETER_VALUE
from mlflow_client.exceptions import MlflowException


def _metric_value_to_json(value):
    # JSON has no literal for non-finite floats; the server accepts the proto3 JSON spellings
    if not isinstance(value, float) or math.isfinite(value):
        return value
    if math.isnan(value):
        return "NaN"
    return "Infinity" if value > 0 else "-Infinity"


class Metric(_MlflowObject):
    """
    Metric object.
    """

    def __init__(self, key, value, timestamp, step: Optional[int] = None):
        self._key = key
        self._value = value
        self._timestamp = timestamp
        self._step = step

    @property
    def key(self):
        """String key corresponding to the metric name."""
        return self._key

    @property
    def value(self):
        """Float value of the metric."""
        return self._value

    @property
    def timestamp(self):
        """Metric timestamp as an integer (milliseconds since the Unix epoch)."""
        return self._timestamp

    @property
    def step(self):
        """Integer metric step (x-coordinate), or None if the point was logged without one."""
        return self._step

    def __eq__(self, __o):
        if isinstance(__o, self.__class__):
            return self.__dict__ == __o.__dict__

        return False

    def __hash__(self):
        return hash((self._key, self._value, self._timestamp, self._step))

    def to_dictionary(self):
        """
        Convert the Metric object to a dictionary. ``step`` is omitted when it is not set.

        Returns:
            dict: The Metric object represented as a dictionary.
        """
        metric_dict = {
            "key": self.key,
            "value": _metric_value_to_json(self.value),
            "timestamp": self.timestamp,
        }
        if self.step is not None:
            metric_dict["step"] = self.step
        return metric_dict

    @classmethod
    def from_dictionary(cls, metric_dict):
        """
        Create a Metric object from a dictionary.

        Args:
            metric_dict (dict): Dictionary containing metric information.

        Returns:
            Metric: The Metric object created from the dictionary.
        """
        required_keys = ["key", "value", "timestamp"]
        missing_keys = [key for key in required_keys if key not in metric_dict]
        if missing_keys:
            raise MlflowException(
                f"Missing required keys {missing_keys} in metric dictionary",
                INVALID_PARAMETER_VALUE,
            )
        step = metric_dict.get("step")
        return cls(
            metric_dict["key"],
            # Non-finite values are sent as the strings "NaN", "Infinity" and "-Infinity"
            float(metric_dict["value"]),
            int(metric_dict["timestamp"]),
            int(step) if step is not None else None,
        )
