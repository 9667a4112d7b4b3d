"""Public models for the MLflow SDK."""

from mlflow_sdk.models.experiment import (
    CreateExperimentRequest,
    CreateExperimentResponse,
    Experiment,
    ExperimentResponse,
    LifecycleStage,
)
from mlflow_sdk.models.run import (
    CreateRunRequest,
    DeleteRunRequest,
    Run,
    RunData,
    RunInfo,
    RunResponse,
    RunStatus,
    RunTag,
    UpdateRunRequest,
    UpdateRunResponse,
)

__all__ = [
    "Experiment",
    "LifecycleStage",
    "Run",
    "RunData",
    "RunInfo",
    "RunStatus",
    "RunTag",
    "CreateExperimentRequest",
    "CreateExperimentResponse",
    "ExperimentResponse",
    "CreateRunRequest",
    "UpdateRunRequest",
    "DeleteRunRequest",
    "RunResponse",
    "UpdateRunResponse",
]
