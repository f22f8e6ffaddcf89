from mlflow_client.entities.base_tag import BaseTag


class InputTag(BaseTag):
    """Input tag object associated with a dataset."""

    @property
    def key(self) -> str:
        """String name of the input tag."""
        return self._key

    @property
    def value(self) -> str:
        """String value of the input tag."""
        return self._value
