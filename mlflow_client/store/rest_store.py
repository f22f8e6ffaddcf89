from mlflow_client.entities import Experiment, Metric, Run, RunInfo, ViewType
from mlflow_client.utils.rest_utils import call_endpoint, get_tracking_endpoint

# Each API method maps to a tuple (path, HTTP method)
_METHOD_TO_INFO = {
    "create_experiment": (get_tracking_endpoint("experiments/create"), "POST"),
    "search_experiments": (get_tracking_endpoint("experiments/search"), "POST"),
    "get_experiment": (get_tracking_endpoint("experiments/get"), "GET"),
    "get_experiment_by_name": (get_tracking_endpoint("experiments/get-by-name"), "GET"),
    "delete_experiment": (get_tracking_endpoint("experiments/delete"), "POST"),
    "restore_experiment": (get_tracking_endpoint("experiments/restore"), "POST"),
    "update_experiment": (get_tracking_endpoint("experiments/update"), "POST"),
    "set_experiment_tag": (get_tracking_endpoint("experiments/set-experiment-tag"), "POST"),
    "create_run": (get_tracking_endpoint("runs/create"), "POST"),
    "delete_run": (get_tracking_endpoint("runs/delete"), "POST"),
    "restore_run": (get_tracking_endpoint("runs/restore"), "POST"),
    "get_run": (get_tracking_endpoint("runs/get"), "GET"),
    "update_run": (get_tracking_endpoint("runs/update"), "POST"),
    "log_metric": (get_tracking_endpoint("runs/log-metric"), "POST"),
    "log_param": (get_tracking_endpoint("runs/log-parameter"), "POST"),
    "log_batch": (get_tracking_endpoint("runs/log-batch"), "POST"),
    "log_inputs": (get_tracking_endpoint("runs/log-inputs"), "POST"),
    "set_tag": (get_tracking_endpoint("runs/set-tag"), "POST"),
    "delete_tag": (get_tracking_endpoint("runs/delete-tag"), "POST"),
    "search_runs": (get_tracking_endpoint("runs/search"), "POST"),
    "get_metric_history": (get_tracking_endpoint("metrics/get-history"), "GET"),
}


class PagedList(list):
    """
    A list of results from a paginated endpoint, with the token of the next page or None
    if this is the last page.
    """

    def __init__(self, items, token):
        super().__init__(items)
        self.token = token


class RestStore:
    """
    Client for a remote tracking server accessed via REST API calls. Each method performs
    exactly one request.

    Args:
        get_host_creds: Method to be invoked prior to every REST request to get the
            :py:class:`mlflow_client.utils.rest_utils.MlflowHostCreds` for the request. Note
            that this is a function so that we can obtain fresh credentials in the case of
            expiry.
    """

    SEARCH_EXPERIMENTS_MAX_RESULTS = 1000
    SEARCH_RUNS_MAX_RESULTS = 50000
    GET_METRIC_HISTORY_MAX_RESULTS = 1000

    def __init__(self, get_host_creds):
        self.get_host_creds = get_host_creds

    def _call_endpoint(self, api, json_body):
        endpoint, method = _METHOD_TO_INFO[api]
        return call_endpoint(self.get_host_creds(), endpoint, method, json_body)

    def create_experiment(self, name, artifact_location=None, tags=None):
        """
        Create a new experiment.
        If an experiment with the given name already exists, throws exception.

        Args:
            name: Desired name for an experiment.
            artifact_location: Base location for runs to store artifact results.
            tags: A list of :py:class:`mlflow_client.entities.ExperimentTag` instances.

        Returns:
            String ID of the newly created experiment.
        """
        req_body = {
            "name": name,
            "artifact_location": artifact_location,
            "tags": [tag.to_dictionary() for tag in (tags or [])],
        }
        response = self._call_endpoint("create_experiment", req_body)
        return response["experiment_id"]

    def search_experiments(
        self,
        view_type=ViewType.ACTIVE_ONLY,
        max_results=SEARCH_EXPERIMENTS_MAX_RESULTS,
        filter_string=None,
        order_by=None,
        page_token=None,
    ):
        """
        Fetch one page of experiments matching the search criteria.

        Returns:
            A :py:class:`PagedList` of :py:class:`mlflow_client.entities.Experiment`.
        """
        req_body = {
            "view_type": ViewType.to_json_value(view_type),
            "max_results": max_results,
            "filter": filter_string,
            "order_by": order_by,
            "page_token": page_token,
        }
        response = self._call_endpoint("search_experiments", req_body)
        experiments = [Experiment.from_dictionary(e) for e in response.get("experiments", [])]
        return PagedList(experiments, response.get("next_page_token") or None)

    def get_experiment(self, experiment_id):
        """
        Fetch the experiment from the backend store.

        Args:
            experiment_id: String id for the experiment.

        Returns:
            A single :py:class:`mlflow_client.entities.Experiment` object if it exists,
            otherwise raises an Exception.
        """
        response = self._call_endpoint("get_experiment", {"experiment_id": experiment_id})
        return Experiment.from_dictionary(response["experiment"])

    def get_experiment_by_name(self, experiment_name):
        response = self._call_endpoint(
            "get_experiment_by_name", {"experiment_name": experiment_name}
        )
        return Experiment.from_dictionary(response["experiment"])

    def delete_experiment(self, experiment_id):
        self._call_endpoint("delete_experiment", {"experiment_id": experiment_id})

    def restore_experiment(self, experiment_id):
        self._call_endpoint("restore_experiment", {"experiment_id": experiment_id})

    def rename_experiment(self, experiment_id, new_name):
        self._call_endpoint(
            "update_experiment", {"experiment_id": experiment_id, "new_name": new_name}
        )

    def set_experiment_tag(self, experiment_id, tag):
        """
        Set a tag for the specified experiment

        Args:
            experiment_id: String id for the experiment.
            tag: :py:class:`mlflow_client.entities.ExperimentTag` instance to set.
        """
        req_body = {"experiment_id": experiment_id, "key": tag.key, "value": tag.value}
        self._call_endpoint("set_experiment_tag", req_body)

    def create_run(self, experiment_id, run_name, start_time=None, tags=None, user_id=None):
        """
        Create a run under the specified experiment ID. The server sets the run's status to
        "RUNNING".

        Args:
            experiment_id: String id of the experiment for this run.
            run_name: Name of the run.
            start_time: Start time of the run in milliseconds since the UNIX epoch.
            tags: A list of :py:class:`mlflow_client.entities.RunTag` instances.
            user_id: ID of the user launching this run.

        Returns:
            The created Run object.
        """
        req_body = {
            "experiment_id": experiment_id,
            "run_name": run_name,
            "start_time": start_time,
            "user_id": user_id,
            "tags": [tag.to_dictionary() for tag in (tags or [])],
        }
        response = self._call_endpoint("create_run", req_body)
        return Run.from_dictionary(response["run"])

    def delete_run(self, run_id):
        self._call_endpoint("delete_run", {"run_id": run_id})

    def restore_run(self, run_id):
        self._call_endpoint("restore_run", {"run_id": run_id})

    def get_run(self, run_id):
        """
        Fetch the run from backend store

        Args:
            run_id: Unique identifier for the run.

        Returns:
            A single Run object if it exists, otherwise raises an Exception.
        """
        response = self._call_endpoint("get_run", {"run_id": run_id})
        return Run.from_dictionary(response["run"])

    def update_run_info(self, run_id, run_status=None, end_time=None, run_name=None):
        """Updates the metadata of the specified run."""
        req_body = {
            "run_id": run_id,
            "run_uuid": run_id,
            "status": run_status,
            "end_time": end_time,
            "run_name": run_name,
        }
        response = self._call_endpoint("update_run", req_body)
        return RunInfo.from_dictionary(response["run_info"])

    def log_metric(self, run_id, metric):
        """
        Log a metric for the specified run

        Args:
            run_id: String id for the run.
            metric: :py:class:`mlflow_client.entities.Metric` instance to log.
        """
        req_body = {
            "run_id": run_id,
            "run_uuid": run_id,
            **metric.to_dictionary(),
        }
        self._call_endpoint("log_metric", req_body)

    def log_param(self, run_id, param):
        """
        Log a param for the specified run

        Args:
            run_id: String id for the run.
            param: :py:class:`mlflow_client.entities.Param` instance to log.
        """
        req_body = {"run_id": run_id, "run_uuid": run_id, "key": param.key, "value": param.value}
        self._call_endpoint("log_param", req_body)

    def set_tag(self, run_id, tag):
        """
        Set a tag for the specified run

        Args:
            run_id: String id for the run.
            tag: :py:class:`mlflow_client.entities.RunTag` instance to set.
        """
        req_body = {"run_id": run_id, "run_uuid": run_id, "key": tag.key, "value": tag.value}
        self._call_endpoint("set_tag", req_body)

    def delete_tag(self, run_id, key):
        self._call_endpoint("delete_tag", {"run_id": run_id, "key": key})

    def log_batch(self, run_id, metrics, params, tags):
        req_body = {
            "run_id": run_id,
            "metrics": [metric.to_dictionary() for metric in metrics],
            "params": [param.to_dictionary() for param in params],
            "tags": [tag.to_dictionary() for tag in tags],
        }
        self._call_endpoint("log_batch", req_body)

    def log_inputs(self, run_id, datasets):
        req_body = {
            "run_id": run_id,
            "datasets": [dataset_input.to_dictionary() for dataset_input in datasets],
        }
        self._call_endpoint("log_inputs", req_body)

    def get_metric_history(
        self, run_id, metric_key, max_results=GET_METRIC_HISTORY_MAX_RESULTS, page_token=None
    ):
        """
        Return one page of the logged values for a given metric.

        Args:
            run_id: Unique identifier for run.
            metric_key: Metric name within the run.
            max_results: Maximum number of points to return.
            page_token: Token of the page to fetch, None for the first page.

        Returns:
            A :py:class:`PagedList` of :py:class:`mlflow_client.entities.Metric`.
        """
        req_body = {
            "run_id": run_id,
            "run_uuid": run_id,
            "metric_key": metric_key,
            "max_results": max_results,
            "page_token": page_token,
        }
        response = self._call_endpoint("get_metric_history", req_body)
        metrics = [Metric.from_dictionary(metric) for metric in response.get("metrics", [])]
        return PagedList(metrics, response.get("next_page_token") or None)

    def search_runs(
        self,
        experiment_ids,
        filter_string=None,
        run_view_type=ViewType.ACTIVE_ONLY,
        max_results=SEARCH_RUNS_MAX_RESULTS,
        order_by=None,
        page_token=None,
    ):
        """
        Return one page of runs that match the given filter within the experiments.

        Args:
            experiment_ids: List of experiment ids to scope the search.
            filter_string: Filter query string, e.g. ``"metrics.loss < 0.1"``.
            run_view_type: ACTIVE_ONLY, DELETED_ONLY, or ALL runs.
            max_results: Maximum number of runs desired.
            order_by: List of order_by clauses.
            page_token: Token of the page to fetch, None for the first page.

        Returns:
            A :py:class:`PagedList` of :py:class:`mlflow_client.entities.Run`.
        """
        req_body = {
            "experiment_ids": list(experiment_ids),
            "filter": filter_string,
            "run_view_type": ViewType.to_json_value(run_view_type),
            "max_results": max_results,
            "order_by": order_by,
            "page_token": page_token,
        }
        response = self._call_endpoint("search_runs", req_body)
        runs = [Run.from_dictionary(run) for run in response.get("runs", [])]
        return PagedList(runs, response.get("next_page_token") or None)
