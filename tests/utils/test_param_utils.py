import dataclasses
import math

import pytest

from mlflow_client.entities import Param
from mlflow_client.error_codes import INVALID_PARAMETER_VALUE
from mlflow_client.exceptions import MlflowException
from mlflow_client.utils.param_utils import flatten_params, render_param_value


@dataclasses.dataclass
class OptimizerConfig:
    name: str
    lr: float
    momentum: float = None


@dataclasses.dataclass
class TrainingConfig:
    epochs: int
    optimizer: OptimizerConfig
    shuffle: bool = True


class FakePydanticModel:
    def __init__(self, **fields):
        self._fields = fields

    def model_dump(self):
        return dict(self._fields)


def test_flatten_nested_mapping_with_prefix():
    params = flatten_params("model", {"lr": 0.1, "layers": {"hidden": 64, "act": "relu"}})
    assert params == [
        Param("model.lr", "0.1"),
        Param("model.layers.hidden", "64"),
        Param("model.layers.act", "relu"),
    ]


def test_flatten_without_prefix_has_no_leading_dot():
    assert flatten_params("", {"a": 1, "b": {"c": 2}}) == [Param("a", "1"), Param("b.c", "2")]
    assert flatten_params(None, {"a": 1}) == [Param("a", "1")]


def test_flatten_scalar_uses_prefix_as_key():
    assert flatten_params("seed", 42) == [Param("seed", "42")]


def test_flatten_dataclass():
    config = TrainingConfig(epochs=3, optimizer=OptimizerConfig("adam", 0.001))
    assert flatten_params("train", config) == [
        Param("train.epochs", "3"),
        Param("train.optimizer.name", "adam"),
        Param("train.optimizer.lr", "0.001"),
        Param("train.shuffle", "true"),
    ]


def test_flatten_model_dump():
    model = FakePydanticModel(batch_size=32, dropout=0.5)
    assert flatten_params("", model) == [Param("batch_size", "32"), Param("dropout", "0.5")]


def test_flatten_skips_none_values():
    assert flatten_params("", {"a": None, "b": {"c": None}, "d": "x"}) == [Param("d", "x")]
    assert flatten_params("x", None) == []


@pytest.mark.parametrize(
    ("value", "rendered"),
    [(True, "true"), (False, "false"), (3, "3"), (-1, "-1"), (0.25, "0.25"), ("abc", "abc")],
)
def test_render_param_value(value, rendered):
    assert render_param_value("k", value) == rendered


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_render_rejects_non_finite_floats(value):
    with pytest.raises(MlflowException, match="non-finite") as e:
        render_param_value("k", value)
    assert e.value.error_code == INVALID_PARAMETER_VALUE


@pytest.mark.parametrize("value", [[1, 2], (1, 2), {1, 2}])
def test_render_rejects_sequences(value):
    with pytest.raises(MlflowException, match="sequences are not supported") as e:
        render_param_value("k", value)
    assert e.value.error_code == INVALID_PARAMETER_VALUE


def test_render_rejects_other_types():
    with pytest.raises(MlflowException, match="values of type bytes are not supported"):
        render_param_value("k", b"raw")


def test_flatten_rejects_nested_list():
    with pytest.raises(MlflowException, match="Cannot log param 'opt.betas'"):
        flatten_params("opt", {"betas": [0.9, 0.999]})


def test_flatten_rejects_non_string_keys():
    with pytest.raises(MlflowException, match="keys must be strings"):
        flatten_params("layers", {1: "dense"})


def test_flatten_rejects_scalar_without_key():
    with pytest.raises(MlflowException, match="without a key") as e:
        flatten_params("", 5)
    assert e.value.error_code == INVALID_PARAMETER_VALUE
