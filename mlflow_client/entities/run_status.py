class RunStatus:
    """Enum for status of an :py:class:`mlflow_client.entities.Run`."""

    RUNNING = "RUNNING"
    SCHEDULED = "SCHEDULED"
    FINISHED = "FINISHED"
    FAILED = "FAILED"
    KILLED = "KILLED"

    _ALL_STATUSES = (RUNNING, SCHEDULED, FINISHED, FAILED, KILLED)
    _TERMINATED_STATUSES = {FINISHED, FAILED, KILLED}

    @staticmethod
    def from_string(status_str):
        if status_str not in RunStatus._ALL_STATUSES:
            raise Exception(
                "Could not get run status corresponding to string %s. Valid run "
                "status strings: %s" % (status_str, list(RunStatus._ALL_STATUSES))
            )
        return status_str

    @staticmethod
    def to_string(status):
        if status not in RunStatus._ALL_STATUSES:
            raise Exception(
                "Could not get string corresponding to run status %s. Valid run "
                "statuses: %s" % (status, list(RunStatus._ALL_STATUSES))
            )
        return status

    @staticmethod
    def is_terminated(status):
        return status in RunStatus._TERMINATED_STATUSES

    @staticmethod
    def all_status():
        return list(RunStatus._ALL_STATUSES)
