"""Public exceptions for the MLflow SDK."""


class MlflowSDKError(Exception):
    """Base exception for all MLflow SDK errors."""


class MlflowAPIError(MlflowSDKError):
    """Error from the tracking server API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MlflowNetworkError(MlflowSDKError):
    """Transport-level failure talking to the tracking server."""


class MlflowConfigError(MlflowSDKError):
    """Configuration error (missing env vars, invalid config)."""


class MlflowValidationError(MlflowSDKError):
    """Request or response data could not be (de)serialized."""
