from typing import Optional

from mlflow_client.entities._mlflow_object import _MlflowObject
from mlflow_client.entities.dataset import Dataset
from mlflow_client.entities.input_tag import InputTag


class DatasetInput(_MlflowObject):
    """DatasetInput object associated with an experiment."""

    def __init__(self, dataset: Dataset, tags: Optional[list[InputTag]] = None) -> None:
        self._dataset = dataset
        self._tags = tags or []

    def __eq__(self, other: _MlflowObject) -> bool:
        if type(other) is type(self):
            return self.__dict__ == other.__dict__
        return False

    def _add_tag(self, tag: InputTag) -> None:
        self._tags.append(tag)

    @property
    def tags(self) -> list[InputTag]:
        """Array of input tags."""
        return self._tags

    @property
    def dataset(self) -> Dataset:
        """Dataset."""
        return self._dataset

    def to_dictionary(self):
        return {
            "tags": [tag.to_dictionary() for tag in self.tags],
            "dataset": self.dataset.to_dictionary(),
        }

    @classmethod
    def from_dictionary(cls, the_dict):
        dataset_input = cls(Dataset.from_dictionary(the_dict["dataset"]))
        for input_tag in the_dict.get("tags", []):
            dataset_input._add_tag(InputTag.from_dictionary(input_tag))
        return dataset_input
