from mlflow_client.entities._mlflow_object import _MlflowObject


class BaseTag(_MlflowObject):
    """Base Tag object."""

    def __init__(self, key: str, value: str) -> None:
        self._key = key
        self._value = value

    def __eq__(self, other):
        if type(other) is type(self):
            return self.__dict__ == other.__dict__
        return False

    def __hash__(self):
        return hash((type(self), self._key, self._value))

    @property
    def key(self):
        """String name of the tag."""
        return self._key

    @property
    def value(self):
        """String value of the tag."""
        return self._value

    def to_dictionary(self):
        return {"key": self.key, "value": self.value}

    @classmethod
    def from_dictionary(cls, the_dict):
        return cls(the_dict["key"], the_dict.get("value", ""))
