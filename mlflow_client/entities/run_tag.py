from mlflow_client.entities.base_tag import BaseTag


class RunTag(BaseTag):
    """Tag object associated with a run."""

    @property
    def key(self):
        """
        String name of the tag.
        To be compatible with _MlflowObject._get_properties_helper
        """
        return self._key

    @property
    def value(self):
        """
        String value of the tag.
        To be compatible with _MlflowObject._get_properties_helper
        """
        return self._value
