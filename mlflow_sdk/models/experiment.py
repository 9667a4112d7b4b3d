"""Pydantic models for tracking server experiments."""

from typing import Literal

from pydantic import BaseModel, Field

LifecycleStage = Literal["active", "deleted"]


class Experiment(BaseModel):
    """Experiment record returned from the API.

    A read-only snapshot of server state at fetch time.
    """

    experiment_id: str
    name: str = ""
    artifact_location: str | None = None
    lifecycle_stage: LifecycleStage = "active"

    model_config = {"frozen": True}


class CreateExperimentRequest(BaseModel):
    """Payload for creating a new experiment."""

    name: str = Field(min_length=1)


class ExperimentResponse(BaseModel):
    """Envelope of the get and get-by-name endpoints."""

    experiment: Experiment


class CreateExperimentResponse(BaseModel):
    """Envelope of the create endpoint."""

    experiment_id: str
