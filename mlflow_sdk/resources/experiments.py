"""Experiment endpoints."""

from mlflow_sdk.models.experiment import (
    CreateExperimentRequest,
    CreateExperimentResponse,
    Experiment,
    ExperimentResponse,
)
from mlflow_sdk.resources.base import API_PREFIX, BaseResource

GET_PATH = f"{API_PREFIX}/experiments/get"
GET_BY_NAME_PATH = f"{API_PREFIX}/experiments/get-by-name"
CREATE_PATH = f"{API_PREFIX}/experiments/create"


class ExperimentsResource(BaseResource):
    """Read and create experiments."""

    def get(self, experiment_id: str) -> Experiment | None:
        """Fetch an experiment by id.

        Returns:
            The experiment, or None when the server did not answer 200.
        """
        body = self._dispatcher.get(GET_PATH, {"experiment_id": experiment_id})
        response = self._parse(body, ExperimentResponse)
        return response.experiment if response else None

    def get_by_name(self, name: str) -> Experiment | None:
        """Fetch an experiment by name.

        Returns:
            The experiment, or None when the server did not answer 200.
        """
        body = self._dispatcher.get(GET_BY_NAME_PATH, {"experiment_name": name})
        response = self._parse(body, ExperimentResponse)
        return response.experiment if response else None

    def create(self, name: str) -> str | None:
        """Create an experiment.

        Returns:
            The new experiment id, or None when the server did not answer 200.
        """
        body = self._dispatcher.post(
            CREATE_PATH, self._build(CreateExperimentRequest, name=name)
        )
        response = self._parse(body, CreateExperimentResponse)
        return response.experiment_id if response else None
