"""Run endpoints."""

import time
from collections.abc import Iterable, Mapping

from mlflow_sdk.models.run import (
    CreateRunRequest,
    DeleteRunRequest,
    Run,
    RunInfo,
    RunResponse,
    RunStatus,
    RunTag,
    UpdateRunRequest,
    UpdateRunResponse,
)
from mlflow_sdk.resources.base import API_PREFIX, BaseResource

CREATE_PATH = f"{API_PREFIX}/runs/create"
UPDATE_PATH = f"{API_PREFIX}/runs/update"
DELETE_PATH = f"{API_PREFIX}/runs/delete"
GET_PATH = f"{API_PREFIX}/runs/get"

TagsInput = Iterable[RunTag | Mapping[str, str]]


def _now() -> int:
    """Current wall-clock time in epoch seconds."""
    return int(time.time())


class RunsResource(BaseResource):
    """Create, update, delete and read runs."""

    def create(
        self,
        experiment_id: str,
        tags: TagsInput | None = None,
        *,
        start_time: int | None = None,
    ) -> Run | None:
        """Create a run in an experiment.

        Args:
            experiment_id: Id of the owning experiment.
            tags: Tags as RunTag models or ``{"key": ..., "value": ...}`` mappings.
            start_time: Epoch seconds. Defaults to now.

        Returns:
            The created run, or None when the server did not answer 200.
        """
        payload = self._build(
            CreateRunRequest,
            experiment_id=experiment_id,
            start_time=_now() if start_time is None else start_time,
            tags=list(tags or []),
        )
        response = self._parse(self._dispatcher.post(CREATE_PATH, payload), RunResponse)
        return response.run if response else None

    def update(
        self,
        run_id: str,
        status: RunStatus,
        *,
        end_time: int | None = None,
    ) -> RunInfo | None:
        """Update the status of a run.

        Args:
            run_id: Id of the run.
            status: New run status.
            end_time: Epoch seconds. Defaults to now.

        Returns:
            The updated run info, or None when the server did not answer 200.
        """
        payload = self._build(
            UpdateRunRequest,
            run_id=run_id,
            status=status,
            end_time=_now() if end_time is None else end_time,
        )
        response = self._parse(
            self._dispatcher.post(UPDATE_PATH, payload), UpdateRunResponse
        )
        return response.run_info if response else None

    def delete(self, run_id: str) -> None:
        """Delete a run. The response body is ignored."""
        self._dispatcher.post(DELETE_PATH, self._build(DeleteRunRequest, run_id=run_id))

    def get(self, run_id: str) -> Run | None:
        """Fetch a run by id.

        Returns:
            The run, or None when the server did not answer 200.
        """
        body = self._dispatcher.get(GET_PATH, {"run_id": run_id})
        response = self._parse(body, RunResponse)
        return response.run if response else None
