from typing import Any, Optional

from mlflow_client.entities._mlflow_object import _MlflowObject
from mlflow_client.entities.run_data import RunData
from mlflow_client.entities.run_info import RunInfo
from mlflow_client.entities.run_inputs import RunInputs
from mlflow_client.exceptions import MlflowException


class Run(_MlflowObject):
    """
    Run object.
    """

    def __init__(
        self, run_info: RunInfo, run_data: RunData, run_inputs: Optional[RunInputs] = None
    ) -> None:
        if run_info is None:
            raise MlflowException("run_info cannot be None")
        self._info = run_info
        self._data = run_data
        self._inputs = run_inputs

    @property
    def info(self) -> RunInfo:
        """
        The run metadata, such as the run id, start time, and status.

        :rtype: :py:class:`mlflow_client.entities.RunInfo`
        """
        return self._info

    @property
    def data(self) -> RunData:
        """
        The run data, including metrics, parameters, and tags.

        :rtype: :py:class:`mlflow_client.entities.RunData`
        """
        return self._data

    @property
    def inputs(self) -> RunInputs:
        """
        The run inputs, including dataset inputs

        :rtype: :py:class:`mlflow_client.entities.RunInputs`
        """
        return self._inputs

    @classmethod
    def from_dictionary(cls, the_dict):
        return cls(
            RunInfo.from_dictionary(the_dict["info"]),
            RunData.from_dictionary(the_dict.get("data", {})),
            RunInputs.from_dictionary(the_dict.get("inputs", {})),
        )

    def to_dictionary(self) -> dict[Any, Any]:
        run_dict = {
            "info": self.info.to_dictionary(),
        }
        if self.data:
            run_dict["data"] = self.data.to_dictionary()
        if self.inputs:
            run_dict["inputs"] = self.inputs.to_dictionary()
        return run_dict
