"""Request dispatcher for the tracking server REST API."""

import json
import sys
from collections.abc import Mapping
from types import TracebackType
from typing import Any

import httpx
from pydantic import BaseModel

from mlflow_sdk._internal.dispatch.query import flatten_query
from mlflow_sdk._internal.http import create_http_client
from mlflow_sdk.exceptions import (
    MlflowAPIError,
    MlflowConfigError,
    MlflowNetworkError,
    MlflowValidationError,
)

DEFAULT_TIMEOUT_MS = 30_000
JSON_CONTENT_TYPE = "application/json"


class RequestDispatcher:
    """Uniform GET/POST dispatch against the tracking server.

    Only an HTTP 200 yields data: every other status returns ``None`` without
    raising, so callers cannot tell "not found" apart from a server error.
    Pass ``strict=True`` to get an `MlflowAPIError` carrying the status instead.
    Transport failures raise `MlflowNetworkError`.

    The dispatcher either borrows an ``httpx.Client`` passed by the caller or
    owns one created from its own settings. Only an owned client is closed by
    `close()`.
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
        """Initialize the dispatcher.

        Args:
            base_url: Base URL of the tracking server, e.g. ``http://localhost:5000``.
            http_client: Optional pre-configured client. When given, ``timeout_ms``
                and ``transport`` are ignored and the client is never closed here.
            timeout_ms: Request timeout in milliseconds for an owned client.
            transport: Optional transport for an owned client.
            strict: Raise MlflowAPIError on non-200 responses instead of
                returning None.
            debug: Enable debug logging to stderr.

        Raises:
            MlflowConfigError: If base_url is empty.
        """
        if not base_url:
            raise MlflowConfigError("base_url must be a non-empty tracking server URL")
        self._base_url = base_url.rstrip("/")
        self._timeout_ms = timeout_ms
        self._strict = strict
        self._debug = debug
        self._owns_client = http_client is None
        if http_client is None:
            http_client = create_http_client(
                timeout=timeout_ms / 1000,
                transport=transport,
            )
        self._client = http_client

    @property
    def base_url(self) -> str:
        """Base URL that endpoint paths are appended to."""
        return self._base_url

    @property
    def http_client(self) -> httpx.Client:
        """The underlying HTTP client handle."""
        return self._client

    def url_for(self, path: str) -> str:
        """Build the absolute URL for an endpoint path."""
        return f"{self._base_url}{path}"

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[mlflow-sdk] {message}", file=sys.stderr)

    def get(self, path: str, params: Mapping[str, Any] | None = None) -> bytes | None:
        """Send a GET request with flattened query parameters.

        Args:
            path: Endpoint path, appended to the base URL.
            params: Structured parameters, see `flatten_query`.

        Returns:
            The raw response body on HTTP 200, otherwise None.

        Raises:
            MlflowNetworkError: If the request could not be completed.
        """
        query = flatten_query(params)
        self._log_debug(f"GET {path} {query}")
        return self._send("GET", path, params=query)

    def post(self, path: str, payload: BaseModel | Mapping[str, Any]) -> bytes | None:
        """Send a POST request with a JSON body.

        Args:
            path: Endpoint path, appended to the base URL.
            payload: A pydantic model or a JSON-serializable mapping.

        Returns:
            The raw response body on HTTP 200, otherwise None.

        Raises:
            MlflowValidationError: If the payload cannot be serialized to JSON.
            MlflowNetworkError: If the request could not be completed.
        """
        body = self._encode(payload)
        self._log_debug(f"POST {path} {body}")
        return self._send(
            "POST",
            path,
            content=body,
            headers={"Content-Type": JSON_CONTENT_TYPE},
        )

    def _encode(self, payload: BaseModel | Mapping[str, Any]) -> str:
        """Serialize a request payload to a JSON string."""
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(mode="json", exclude_none=True)
        try:
            return json.dumps(payload, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise MlflowValidationError(f"Request payload is not JSON serializable: {e}") from e

    def _send(self, method: str, path: str, **kwargs: Any) -> bytes | None:
        """Execute the request and apply the 200-only result policy."""
        try:
            response = self._client.request(method, self.url_for(path), **kwargs)
        except httpx.RequestError as e:
            self._log_debug(f"{method} {path} failed: {e}")
            raise MlflowNetworkError(f"{method} {path} failed: {e}") from e

        if response.status_code == httpx.codes.OK:
            self._log_debug(f"{method} {path} succeeded")
            return response.content
        self._log_debug(f"{method} {path} returned status {response.status_code}")
        if self._strict:
            raise MlflowAPIError(
                f"{method} {path} returned status {response.status_code}",
                status_code=response.status_code,
            )
        return None

    def close(self) -> None:
        """Close the HTTP client if this dispatcher created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "RequestDispatcher":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
