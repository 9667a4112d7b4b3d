"""Shared plumbing for endpoint resources."""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from mlflow_sdk._internal.dispatch import RequestDispatcher
from mlflow_sdk.exceptions import MlflowValidationError

API_PREFIX = "/api/2.0/mlflow"

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseResource:
    """Base class for a group of endpoints sharing one dispatcher."""

    def __init__(self, dispatcher: RequestDispatcher) -> None:
        self._dispatcher = dispatcher

    @staticmethod
    def _build(request: type[ModelT], **fields: Any) -> ModelT:
        """Build a request payload, raising MlflowValidationError on bad input."""
        try:
            return request(**fields)
        except ValidationError as e:
            raise MlflowValidationError(f"Invalid {request.__name__}: {e}") from e

    @staticmethod
    def _parse(body: bytes | None, envelope: type[ModelT]) -> ModelT | None:
        """Validate a response body into its envelope.

        A missing body (non-200 response) yields None.

        Raises:
            MlflowValidationError: If the body is not valid JSON for the envelope.
        """
        if body is None:
            return None
        try:
            return envelope.model_validate_json(body)
        except ValidationError as e:
            raise MlflowValidationError(
                f"Invalid {envelope.__name__} payload: {e}"
            ) from e
