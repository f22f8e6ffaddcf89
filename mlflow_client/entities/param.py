from mlflow_client.entities._mlflow_object import _MlflowObject


class Param(_MlflowObject):
    """
    Parameter object.
    """

    def __init__(self, key, value):
        self._key = key
        self._value = value

    @property
    def key(self):
        """String key corresponding to the parameter name."""
        return self._key

    @property
    def value(self):
        """String value of the parameter."""
        return self._value

    def to_dictionary(self):
        return {"key": self.key, "value": self.value}

    @classmethod
    def from_dictionary(cls, the_dict):
        return cls(the_dict["key"], the_dict.get("value", ""))

    def __eq__(self, __o):
        if isinstance(__o, self.__class__):
            return self.__dict__ == __o.__dict__

        return False

    def __hash__(self):
        return hash((self._key, self._value))
