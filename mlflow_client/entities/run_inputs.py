from typing import Any, Optional

from mlflow_client.entities._mlflow_object import _MlflowObject
from mlflow_client.entities.dataset_input import DatasetInput


class RunInputs(_MlflowObject):
    """RunInputs object."""

    def __init__(self, dataset_inputs: Optional[list[DatasetInput]] = None) -> None:
        self._dataset_inputs = dataset_inputs or []

    def __eq__(self, other: _MlflowObject) -> bool:
        if type(other) is type(self):
            return self.__dict__ == other.__dict__
        return False

    @property
    def dataset_inputs(self) -> list[DatasetInput]:
        """Array of dataset inputs."""
        return self._dataset_inputs

    def to_dictionary(self) -> dict[str, Any]:
        return {
            "dataset_inputs": [d.to_dictionary() for d in self.dataset_inputs],
        }

    @classmethod
    def from_dictionary(cls, the_dict):
        return cls(
            [DatasetInput.from_dictionary(d) for d in the_dict.get("dataset_inputs", [])]
        )
