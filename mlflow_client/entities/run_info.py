from mlflow_client.entities._mlflow_object import _MlflowObject
from mlflow_client.entities.run_status import RunStatus


class RunInfo(_MlflowObject):
    """
    Metadata about a run.
    """

    def __init__(
        self,
        run_id,
        experiment_id,
        user_id,
        status,
        start_time,
        end_time,
        lifecycle_stage,
        artifact_uri=None,
        run_name=None,
    ):
        if run_id is None:
            raise Exception("run_id cannot be None")
        if experiment_id is None:
            raise Exception("experiment_id cannot be None")
        if status is None:
            raise Exception("status cannot be None")
        self._run_id = run_id
        self._experiment_id = experiment_id
        self._user_id = user_id
        self._status = status
        self._start_time = start_time
        self._end_time = end_time
        self._lifecycle_stage = lifecycle_stage
        self._artifact_uri = artifact_uri
        self._run_name = run_name

    def __eq__(self, other):
        if type(other) is type(self):
            return self.__dict__ == other.__dict__
        return False

    @property
    def run_id(self):
        """String containing run id."""
        return self._run_id

    @property
    def experiment_id(self):
        """String ID of the experiment for the current run."""
        return self._experiment_id

    @property
    def run_name(self):
        """String containing run name."""
        return self._run_name

    @property
    def user_id(self):
        """String ID of the user who initiated this run."""
        return self._user_id

    @property
    def status(self):
        """
        One of the values in :py:class:`mlflow_client.entities.RunStatus`
        describing the status of the run.
        """
        return self._status

    @property
    def start_time(self):
        """Start time of the run, in number of milliseconds since the UNIX epoch."""
        return self._start_time

    @property
    def end_time(self):
        """End time of the run, in number of milliseconds since the UNIX epoch."""
        return self._end_time

    @property
    def artifact_uri(self):
        """String root artifact URI of the run."""
        return self._artifact_uri

    @property
    def lifecycle_stage(self):
        return self._lifecycle_stage

    def to_dictionary(self):
        info_dict = {
            "run_id": self.run_id,
            "run_uuid": self.run_id,
            "experiment_id": self.experiment_id,
            "status": RunStatus.to_string(self.status),
            "lifecycle_stage": self.lifecycle_stage,
        }
        if self.run_name is not None:
            info_dict["run_name"] = self.run_name
        if self.user_id is not None:
            info_dict["user_id"] = self.user_id
        if self.start_time is not None:
            info_dict["start_time"] = self.start_time
        if self.end_time:
            info_dict["end_time"] = self.end_time
        if self.artifact_uri:
            info_dict["artifact_uri"] = self.artifact_uri
        return info_dict

    @classmethod
    def from_dictionary(cls, the_dict):
        start_time = the_dict.get("start_time")
        # A missing or zero end time means the run has not ended yet
        end_time = the_dict.get("end_time") or None
        return cls(
            run_id=the_dict.get("run_id") or the_dict.get("run_uuid"),
            run_name=the_dict.get("run_name"),
            experiment_id=the_dict.get("experiment_id"),
            user_id=the_dict.get("user_id"),
            status=RunStatus.from_string(the_dict.get("status", RunStatus.RUNNING)),
            start_time=int(start_time) if start_time is not None else None,
            end_time=int(end_time) if end_time is not None else None,
            lifecycle_stage=the_dict.get("lifecycle_stage"),
            artifact_uri=the_dict.get("artifact_uri"),
        )
