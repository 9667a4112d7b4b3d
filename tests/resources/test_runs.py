"""Tests for RunsResource."""

import json
import time

import httpx
import pytest
import respx

from mlflow_sdk._internal.dispatch import RequestDispatcher
from mlflow_sdk.exceptions import MlflowValidationError
from mlflow_sdk.models import RunTag
from mlflow_sdk.resources import RunsResource

BASE_URL = "http://test"
API = f"{BASE_URL}/api/2.0/mlflow"

RUN_INFO_JSON = {
    "run_id": "run-1",
    "run_uuid": "run-1",
    "experiment_id": "42",
    "user_id": "alice",
    "status": "RUNNING",
    "start_time": 1700000000,
    "artifact_uri": "mlflow-artifacts:/42/run-1/artifacts",
    "lifecycle_stage": "active",
}
RUN_JSON = {"info": RUN_INFO_JSON, "data": {"tags": [{"key": "team", "value": "ml"}]}}


@pytest.fixture
def runs():
    with RequestDispatcher(BASE_URL) as dispatcher:
        yield RunsResource(dispatcher)


class TestCreateRun:
    """Tests for creating runs."""

    @respx.mock
    def test_create_with_explicit_start_time(self, runs):
        route = respx.post(f"{API}/runs/create").mock(
            return_value=httpx.Response(200, json={"run": RUN_JSON})
        )

        run = runs.create(
            "42",
            tags=[RunTag(key="team", value="ml"), {"key": "env", "value": "dev"}],
            start_time=1700000000,
        )

        assert run.run_id == "run-1"
        assert run.experiment_id == "42"
        assert run.status == "RUNNING"
        assert json.loads(route.calls.last.request.content) == {
            "experiment_id": "42",
            "start_time": 1700000000,
            "tags": [{"key": "team", "value": "ml"}, {"key": "env", "value": "dev"}],
        }

    @respx.mock
    def test_create_defaults_start_time_to_now(self, runs):
        """Start time should default to the current epoch seconds."""
        route = respx.post(f"{API}/runs/create").mock(
            return_value=httpx.Response(200, json={"run": RUN_JSON})
        )

        before = int(time.time())
        runs.create("42")
        after = int(time.time())

        body = json.loads(route.calls.last.request.content)
        assert before <= body["start_time"] <= after
        assert body["tags"] == []

    @respx.mock
    def test_create_non_200_returns_none(self, runs):
        respx.post(f"{API}/runs/create").mock(return_value=httpx.Response(404))
        assert runs.create("missing") is None

    def test_create_bad_tag_raises(self, runs):
        with pytest.raises(MlflowValidationError):
            runs.create("42", tags=[{"key": "team"}])

    @pytest.mark.parametrize("tags", [["team"], [("team", "ml")], [42]])
    def test_create_non_mapping_tag_raises(self, runs, tags):
        """Tags that are neither RunTag nor mappings should fail validation."""
        with pytest.raises(MlflowValidationError):
            runs.create("42", tags=tags)


class TestUpdateRun:
    """Tests for updating runs."""

    @respx.mock
    def test_update_returns_run_info(self, runs):
        route = respx.post(f"{API}/runs/update").mock(
            return_value=httpx.Response(
                200,
                json={"run_info": {**RUN_INFO_JSON, "status": "FINISHED", "end_time": 1700000100}},
            )
        )

        info = runs.update("run-1", "FINISHED", end_time=1700000100)

        assert info.status == "FINISHED"
        assert info.end_time == 1700000100
        assert json.loads(route.calls.last.request.content) == {
            "run_id": "run-1",
            "status": "FINISHED",
            "end_time": 1700000100,
        }

    @respx.mock
    def test_update_defaults_end_time_to_now(self, runs):
        route = respx.post(f"{API}/runs/update").mock(
            return_value=httpx.Response(200, json={"run_info": RUN_INFO_JSON})
        )

        before = int(time.time())
        runs.update("run-1", "KILLED")
        after = int(time.time())

        body = json.loads(route.calls.last.request.content)
        assert before <= body["end_time"] <= after

    @respx.mock
    def test_update_non_200_returns_none(self, runs):
        respx.post(f"{API}/runs/update").mock(return_value=httpx.Response(500))
        assert runs.update("run-1", "FAILED") is None

    def test_update_invalid_status_raises(self, runs):
        with pytest.raises(MlflowValidationError):
            runs.update("run-1", "DONE")


class TestDeleteRun:
    """Tests for deleting runs."""

    @respx.mock
    def test_delete_sends_run_id(self, runs):
        route = respx.post(f"{API}/runs/delete").mock(return_value=httpx.Response(200, json={}))

        assert runs.delete("run-1") is None
        assert json.loads(route.calls.last.request.content) == {"run_id": "run-1"}

    @respx.mock
    def test_delete_non_200_does_not_raise(self, runs):
        respx.post(f"{API}/runs/delete").mock(return_value=httpx.Response(404))
        assert runs.delete("missing") is None


class TestGetRun:
    """Tests for fetching runs."""

    @respx.mock
    def test_get_run(self, runs):
        route = respx.get(f"{API}/runs/get").mock(
            return_value=httpx.Response(200, json={"run": RUN_JSON})
        )

        run = runs.get("run-1")

        assert run.run_id == "run-1"
        assert run.info.artifact_uri == "mlflow-artifacts:/42/run-1/artifacts"
        assert run.data.to_dict() == {"tags": [{"key": "team", "value": "ml"}]}
        assert route.calls.last.request.url.params["run_id"] == "run-1"

    @respx.mock
    def test_get_run_not_found_returns_none(self, runs):
        respx.get(f"{API}/runs/get").mock(return_value=httpx.Response(404))
        assert runs.get("missing") is None
