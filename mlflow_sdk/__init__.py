"""MLflow SDK for Python.

A thin synchronous client for the MLflow tracking server REST API.

Public API:
    MlflowClient - User-facing client
    models - Experiment and run records
    exceptions - Error hierarchy

Internal:
    _internal.dispatch - Request dispatcher and query flattening
"""

from mlflow_sdk._version import __version__
from mlflow_sdk.client import MlflowClient
from mlflow_sdk.exceptions import (
    MlflowAPIError,
    MlflowConfigError,
    MlflowNetworkError,
    MlflowSDKError,
    MlflowValidationError,
)
from mlflow_sdk.models import Experiment, Run, RunData, RunInfo, RunStatus, RunTag

__all__ = [
    "__version__",
    "MlflowClient",
    "Experiment",
    "Run",
    "RunData",
    "RunInfo",
    "RunStatus",
    "RunTag",
    "MlflowSDKError",
    "MlflowAPIError",
    "MlflowNetworkError",
    "MlflowConfigError",
    "MlflowValidationError",
]
