import dataclasses
import math
from collections.abc import Mapping

from mlflow_client.entities import Param
from mlflow_client.exceptions import MlflowException
from mlflow_client.utils.validation import _MISSING_KEY_NAME_MESSAGE


def _to_plain_value(value):
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    # pydantic v2 models
    if callable(getattr(value, "model_dump", None)):
        return value.model_dump()
    return value


def render_param_value(key, value):
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise MlflowException.invalid_parameter_value(
                f"Cannot log non-finite value {value} for param '{key}'."
            )
        return str(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        raise MlflowException.invalid_parameter_value(
            f"Cannot log param '{key}': sequences are not supported as param values."
        )
    raise MlflowException.invalid_parameter_value(
        f"Cannot log param '{key}': values of type {type(value).__name__} are not supported."
    )


def _flatten(key, value, params):
    value = _to_plain_value(value)
    if value is None:
        return
    if isinstance(value, Mapping):
        separator = "." if key else ""
        for sub_key, sub_value in value.items():
            if not isinstance(sub_key, str):
                raise MlflowException.invalid_parameter_value(
                    f"Cannot log params under '{key}': keys must be strings, got {sub_key!r}."
                )
            _flatten(f"{key}{separator}{sub_key}", sub_value, params)
        return
    if key == "":
        raise MlflowException.invalid_parameter_value(
            f"Cannot log param value {value!r} without a key. {_MISSING_KEY_NAME_MESSAGE}"
        )
    params.append(Param(key, render_param_value(key, value)))


def flatten_params(prefix, values):
    """
    Converts a structured set of values into a flat list of params.

    Nested mappings, dataclasses and pydantic models are flattened into dotted keys under
    ``prefix``; ``None`` values are skipped. Booleans are rendered as ``true``/``false``, numbers
    with ``str``. Sequences, non-finite floats and other types are rejected.

    .. code-block:: python

        flatten_params("model", {"lr": 0.1, "layers": {"hidden": 64}})
        # [Param("model.lr", "0.1"), Param("model.layers.hidden", "64")]

    Args:
        prefix: Key prefix. An empty string adds no prefix.
        values: The values to flatten.

    Returns:
        A list of :py:class:`mlflow_client.entities.Param`.
    """
    params = []
    _flatten(prefix or "", values, params)
    return params
