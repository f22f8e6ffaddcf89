from typing import Optional

from mlflow_client.entities._mlflow_object import _MlflowObject


class Dataset(_MlflowObject):
    """Dataset object associated with an experiment."""

    def __init__(
        self,
        name: str,
        digest: str,
        source_type: str,
        source: str,
        schema: Optional[str] = None,
        profile: Optional[str] = None,
    ) -> None:
        self._name = name
        self._digest = digest
        self._source_type = source_type
        self._source = source
        self._schema = schema
        self._profile = profile

    def __eq__(self, other: _MlflowObject) -> bool:
        if type(other) is type(self):
            return self.__dict__ == other.__dict__
        return False

    @property
    def name(self) -> str:
        """String name of the dataset."""
        return self._name

    @property
    def digest(self) -> str:
        """String digest of the dataset."""
        return self._digest

    @property
    def source_type(self) -> str:
        """String source_type of the dataset."""
        return self._source_type

    @property
    def source(self) -> str:
        """String source of the dataset."""
        return self._source

    @property
    def schema(self) -> Optional[str]:
        """String schema of the dataset."""
        return self._schema

    @property
    def profile(self) -> Optional[str]:
        """String profile of the dataset."""
        return self._profile

    def to_dictionary(self):
        dataset_dict = {
            "name": self.name,
            "digest": self.digest,
            "source_type": self.source_type,
            "source": self.source,
        }
        if self.schema:
            dataset_dict["schema"] = self.schema
        if self.profile:
            dataset_dict["profile"] = self.profile
        return dataset_dict

    @classmethod
    def from_dictionary(cls, the_dict):
        return cls(
            the_dict["name"],
            the_dict["digest"],
            the_dict.get("source_type"),
            the_dict.get("source"),
            the_dict.get("schema"),
            the_dict.get("profile"),
        )
