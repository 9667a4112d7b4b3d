"""Pydantic models for tracking server runs.

These mirror the JSON shapes of the ``/api/2.0/mlflow/runs`` endpoints.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

from mlflow_sdk.models.experiment import LifecycleStage

RunStatus = Literal[
    "SCHEDULED",
    "RUNNING",
    "FINISHED",
    "FAILED",
    "KILLED",
    "UNINITIALIZED",
]

# =============================================================================
# Response Models
# =============================================================================


class RunInfo(BaseModel):
    """Metadata of a run.

    ``run_uuid`` is the legacy identifier some servers still send next to
    ``run_id``. Timestamps are epoch seconds as sent by this client.
    """

    run_id: str = ""
    run_uuid: str | None = None
    experiment_id: str
    user_id: str | None = None
    status: RunStatus = "UNINITIALIZED"
    start_time: int | None = None
    end_time: int | None = None
    artifact_uri: str | None = None
    lifecycle_stage: LifecycleStage = "active"

    model_config = {"frozen": True}

    @property
    def identifier(self) -> str:
        """The run id, falling back to the legacy run uuid."""
        return self.run_id or self.run_uuid or ""


class RunData(BaseModel):
    """Metrics, params and tags of a run, kept as the server sent them."""

    model_config = {"frozen": True, "extra": "allow"}

    def to_dict(self) -> dict[str, Any]:
        """Return the run data as a plain dict."""
        return dict(self.model_extra or {})


class Run(BaseModel):
    """Run record returned from the API."""

    info: RunInfo
    data: RunData = Field(default_factory=RunData)

    model_config = {"frozen": True}

    @property
    def run_id(self) -> str:
        """Id of the run."""
        return self.info.identifier

    @property
    def experiment_id(self) -> str:
        """Id of the owning experiment."""
        return self.info.experiment_id

    @property
    def status(self) -> RunStatus:
        """Current status of the run."""
        return self.info.status


# =============================================================================
# Request Models
# =============================================================================


class RunTag(BaseModel):
    """A single ``key``/``value`` tag attached to a run at creation."""

    key: str
    value: str


class CreateRunRequest(BaseModel):
    """Payload for creating a run."""

    experiment_id: str
    start_time: int
    tags: list[RunTag] = Field(default_factory=list)


class UpdateRunRequest(BaseModel):
    """Payload for updating the status of a run."""

    run_id: str
    status: RunStatus
    end_time: int


class DeleteRunRequest(BaseModel):
    """Payload for deleting a run."""

    run_id: str


# =============================================================================
# Response Envelopes
# =============================================================================


class RunResponse(BaseModel):
    """Envelope of the create and get endpoints."""

    run: Run


class UpdateRunResponse(BaseModel):
    """Envelope of the update endpoint."""

    run_info: RunInfo
