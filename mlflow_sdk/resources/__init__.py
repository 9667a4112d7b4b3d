"""Endpoint resources of the tracking server API."""

from mlflow_sdk.resources.experiments import ExperimentsResource
from mlflow_sdk.resources.runs import RunsResource

__all__ = ["ExperimentsResource", "RunsResource"]
