"""
Client-side checks applied before a request is sent. The tracking server remains the authority
on key formats and value lengths; only malformed input that cannot be serialized is rejected
here.
"""

import numbers

from mlflow_client.exceptions import MlflowException

MAX_PARAMS_TAGS_PER_BATCH = 100
MAX_METRICS_PER_BATCH = 1000
MAX_ENTITIES_PER_BATCH = 1000

_MISSING_KEY_NAME_MESSAGE = "A key name must be provided."


def _validate_key_name(key, entity_name="key"):
    if key is None or not isinstance(key, str) or key == "":
        raise MlflowException.invalid_parameter_value(
            f"Invalid {entity_name} name: {key!r}. {_MISSING_KEY_NAME_MESSAGE}"
        )


def _validate_metric(key, value, timestamp, step):
    """
    Check that a metric with the specified key, value, timestamp, and step is valid and raise an
    exception if it isn't.
    """
    _validate_key_name(key, "metric")
    # value must be a real number
    # since bool is an instance of Number check for bool additionally
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        raise MlflowException.invalid_parameter_value(
            f"Got invalid value {value} for metric '{key}' (timestamp={timestamp}). "
            "Please specify value as a valid double (64-bit floating point)",
        )

    if not isinstance(timestamp, numbers.Real) or timestamp < 0:
        raise MlflowException.invalid_parameter_value(
            f"Got invalid timestamp {timestamp} for metric '{key}' (value={value}). "
            "Timestamp must be a nonnegative long (64-bit integer) ",
        )

    if step is not None and (not isinstance(step, numbers.Integral) or isinstance(step, bool)):
        raise MlflowException.invalid_parameter_value(
            f"Got invalid step {step} for metric '{key}' (value={value}). "
            "Step must be a valid long (64-bit integer).",
        )


def _validate_param(key, value):
    _validate_key_name(key, "param")
    if not isinstance(value, str):
        raise MlflowException.invalid_parameter_value(
            f"Got invalid value {value!r} for param '{key}'. Param values must be strings."
        )


def _validate_tag(key, value):
    _validate_key_name(key, "tag")
    if not isinstance(value, str):
        raise MlflowException.invalid_parameter_value(
            f"Got invalid value {value!r} for tag '{key}'. Tag values must be strings."
        )


def _validate_batch_log_data(metrics, params, tags):
    for metric in metrics:
        _validate_metric(metric.key, metric.value, metric.timestamp, metric.step)
    for param in params:
        _validate_param(param.key, param.value)
    for tag in tags:
        _validate_tag(tag.key, tag.value)
