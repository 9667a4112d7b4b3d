"""User-facing client for the MLflow tracking server REST API.

Example usage:
    from mlflow_sdk import MlflowClient

    with MlflowClient("http://localhost:5000") as client:
        experiment_id = client.experiments.create("my-experiment")
        run = client.runs.create(experiment_id, tags=[{"key": "team", "value": "ml"}])
        client.runs.update(run.run_id, "FINISHED")
"""

import os
from collections.abc import Iterable, Mapping
from types import TracebackType

import httpx

from mlflow_sdk._internal.dispatch import DEFAULT_TIMEOUT_MS, RequestDispatcher
from mlflow_sdk.exceptions import MlflowConfigError
from mlflow_sdk.models import Experiment, Run, RunInfo, RunStatus, RunTag
from mlflow_sdk.resources import ExperimentsResource, RunsResource


class MlflowClient:
    """Synchronous client for experiments and runs.

    Every call is a single blocking request. Any non-200 response is reported
    as None rather than an exception unless ``strict`` is set. Transport
    failures raise `MlflowNetworkError` and malformed payloads raise
    `MlflowValidationError`.
    """

    def __init__(
        self,
        base_url: str,
        *,
        http_client: httpx.Client | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        transport: httpx.BaseTransport | None = None,
        strict: bool = False,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Base URL of the tracking server.
            http_client: Optional pre-configured httpx client. Not closed by `close()`.
            timeout_ms: Request timeout in milliseconds.
            transport: Optional httpx transport for the client created here.
            strict: Raise MlflowAPIError on non-200 responses instead of
                returning None.
            debug: Enable debug logging to stderr.
        """
        self._dispatcher = RequestDispatcher(
            base_url,
            http_client=http_client,
            timeout_ms=timeout_ms,
            transport=transport,
            strict=strict,
            debug=debug,
        )
        self._experiments = ExperimentsResource(self._dispatcher)
        self._runs = RunsResource(self._dispatcher)

    @classmethod
    def from_env(cls) -> "MlflowClient":
        """Create a client from environment variables.

        Required environment variables:
            MLFLOW_TRACKING_URI: Base URL of the tracking server.

        Optional environment variables:
            MLFLOW_SDK_TIMEOUT_MS: Request timeout in milliseconds.
            MLFLOW_SDK_STRICT: Set to "1" to raise on non-200 responses.
            MLFLOW_SDK_DEBUG: Set to "1" to enable debug logging.

        Raises:
            MlflowConfigError: If MLFLOW_TRACKING_URI is not set.
            ValueError: If MLFLOW_SDK_TIMEOUT_MS is not an integer.
        """
        base_url = os.environ.get("MLFLOW_TRACKING_URI")
        if not base_url:
            raise MlflowConfigError("MLFLOW_TRACKING_URI is not set")

        strict = os.environ.get("MLFLOW_SDK_STRICT", "") == "1"
        debug = os.environ.get("MLFLOW_SDK_DEBUG", "") == "1"
        timeout_ms = int(os.environ.get("MLFLOW_SDK_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))

        return cls(base_url, timeout_ms=timeout_ms, strict=strict, debug=debug)

    @property
    def base_url(self) -> str:
        return self._dispatcher.base_url

    @property
    def experiments(self) -> ExperimentsResource:
        """Experiment endpoints."""
        return self._experiments

    @property
    def runs(self) -> RunsResource:
        """Run endpoints."""
        return self._runs

    # =========================================================================
    # Convenience Methods
    # =========================================================================

    def get_experiment(self, experiment_id: str) -> Experiment | None:
        return self._experiments.get(experiment_id)

    def get_experiment_by_name(self, name: str) -> Experiment | None:
        return self._experiments.get_by_name(name)

    def create_experiment(self, name: str) -> str | None:
        return self._experiments.create(name)

    def create_run(
        self,
        experiment_id: str,
        tags: Iterable[RunTag | Mapping[str, str]] | None = None,
        *,
        start_time: int | None = None,
    ) -> Run | None:
        return self._runs.create(experiment_id, tags, start_time=start_time)

    def update_run(
        self,
        run_id: str,
        status: RunStatus,
        *,
        end_time: int | None = None,
    ) -> RunInfo | None:
        return self._runs.update(run_id, status, end_time=end_time)

    def delete_run(self, run_id: str) -> None:
        self._runs.delete(run_id)

    def get_run(self, run_id: str) -> Run | None:
        return self._runs.get(run_id)

    def close(self) -> None:
        """Release the HTTP client if this client created it."""
        self._dispatcher.close()

    def __enter__(self) -> "MlflowClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
