"""Request dispatch for the tracking server REST API."""

from mlflow_sdk._internal.dispatch.client import DEFAULT_TIMEOUT_MS, RequestDispatcher
from mlflow_sdk._internal.dispatch.query import QueryParams, QueryValue, flatten_query

__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "RequestDispatcher",
    "QueryParams",
    "QueryValue",
    "flatten_query",
]
