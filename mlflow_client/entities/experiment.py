from mlflow_client.entities._mlflow_object import _MlflowObject
from mlflow_client.entities.experiment_tag import ExperimentTag


class Experiment(_MlflowObject):
    """
    Experiment object.
    """

    def __init__(
        self,
        experiment_id,
        name,
        artifact_location,
        lifecycle_stage,
        tags=None,
        creation_time=None,
        last_update_time=None,
    ):
        super().__init__()
        self._experiment_id = experiment_id
        self._name = name
        self._artifact_location = artifact_location
        self._lifecycle_stage = lifecycle_stage
        self._tags = {tag.key: tag.value for tag in (tags or [])}
        self._creation_time = creation_time
        self._last_update_time = last_update_time

    @property
    def experiment_id(self):
        """String ID of the experiment."""
        return self._experiment_id

    @property
    def name(self):
        """String name of the experiment."""
        return self._name

    @property
    def artifact_location(self):
        """String corresponding to the root artifact URI for the experiment."""
        return self._artifact_location

    @property
    def lifecycle_stage(self):
        """Lifecycle stage of the experiment. Can either be 'active' or 'deleted'."""
        return self._lifecycle_stage

    @property
    def tags(self):
        """Tags that have been set on the experiment."""
        return self._tags

    @property
    def creation_time(self):
        return self._creation_time

    @property
    def last_update_time(self):
        return self._last_update_time

    def __eq__(self, other):
        if type(other) is type(self):
            return self.__dict__ == other.__dict__
        return False

    @classmethod
    def from_dictionary(cls, the_dict):
        # Experiments created by old servers don't report `creation_time` and
        # `last_update_time`, these stay None.
        creation_time = the_dict.get("creation_time")
        last_update_time = the_dict.get("last_update_time")
        return cls(
            the_dict["experiment_id"],
            the_dict.get("name"),
            the_dict.get("artifact_location"),
            the_dict.get("lifecycle_stage"),
            tags=[ExperimentTag.from_dictionary(tag) for tag in the_dict.get("tags", [])],
            creation_time=int(creation_time) if creation_time else None,
            last_update_time=int(last_update_time) if last_update_time else None,
        )

    def to_dictionary(self):
        experiment_dict = {
            "experiment_id": self.experiment_id,
            "name": self.name,
            "artifact_location": self.artifact_location,
            "lifecycle_stage": self.lifecycle_stage,
            "tags": [{"key": key, "value": val} for key, val in self._tags.items()],
        }
        if self.creation_time:
            experiment_dict["creation_time"] = self.creation_time
        if self.last_update_time:
            experiment_dict["last_update_time"] = self.last_update_time
        return experiment_dict
