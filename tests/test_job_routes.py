# ============================================================================
# JOB ROUTES TESTS
# ============================================================================
# STATUS: Tests - HTTP surface tests
# PURPOSE: Verify /jobs endpoints relay to the scheduler and map errors
# CREATED: 19 OCT 2026
# ============================================================================
"""
Job Routes Tests

Exercises the full app (routes, error handlers, middleware) with FastAPI
TestClient. The scheduler is a mocked httpx.Client behind a real
DkronClient, so the assertions cover what would go on the wire.

Run with:
    pytest tests/test_job_routes.py -v
"""

import json
import pytest
from unittest.mock import patch, MagicMock

import httpx
from fastapi.testclient import TestClient

from api.routes import get_client
from main import create_app
from services.dkron_client import DkronClient


BASE_URL = "http://dkron:8080"


# ============================================================================
# FIXTURES
# ============================================================================

def _mock_response(status_code=200, json_data=None):
    """Create a mock httpx.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = json_data
    resp.text = json.dumps(json_data)
    return resp


@pytest.fixture
def upstream():
    """Mocked httpx.Client used by DkronClient; yields the inner client."""
    with patch("services.dkron_client.httpx.Client") as mock_client_cls:
        mock_client = MagicMock()
        mock_client.__enter__ = MagicMock(return_value=mock_client)
        mock_client.__exit__ = MagicMock(return_value=False)
        mock_client.request.return_value = _mock_response(200, {})
        mock_client_cls.return_value = mock_client
        yield mock_client


@pytest.fixture
def client():
    app = create_app()
    app.dependency_overrides[get_client] = lambda: DkronClient(base_url=BASE_URL)
    return TestClient(app)


# ============================================================================
# LIST
# ============================================================================

class TestListJobs:
    """Tests for GET /jobs."""

    def test_relays_array_unmodified(self, client, upstream):
        jobs = [
            {"name": "backup", "schedule": "@every 1h", "disable": False,
             "tags": {"server": "s1"}, "executor": "shell",
             "executor_config": {"command": "backup.sh"}},
            {"name": "report", "schedule": "0 0 * * *"},
        ]
        upstream.request.return_value = _mock_response(200, jobs)

        resp = client.get("/jobs")

        assert resp.status_code == 200
        assert resp.json() == jobs
        upstream.request.assert_called_once_with("GET", f"{BASE_URL}/v1/jobs", json=None)

    def test_empty_list(self, client, upstream):
        upstream.request.return_value = _mock_response(200, [])

        resp = client.get("/jobs")

        assert resp.status_code == 200
        assert resp.json() == []

    def test_non_array_is_500(self, client, upstream):
        upstream.request.return_value = _mock_response(200, {"name": "backup"})

        resp = client.get("/jobs")

        assert resp.status_code == 500
        assert resp.json()["error"]

    def test_malformed_body_is_500(self, client, upstream):
        bad = _mock_response(200)
        bad.json.side_effect = json.JSONDecodeError("Expecting value", "oops", 0)
        upstream.request.return_value = bad

        resp = client.get("/jobs")

        assert resp.status_code == 500
        assert "Expecting value" in resp.json()["error"]

    def test_upstream_unreachable_is_500(self, client, upstream):
        upstream.request.side_effect = httpx.ConnectError("Connection refused")

        resp = client.get("/jobs")

        assert resp.status_code == 500
        assert "Connection refused" in resp.json()["error"]

    def test_null_sub_record_relayed_as_absent(self, client, upstream):
        upstream.request.return_value = _mock_response(
            200, [{"name": "backup", "metadata": None, "tags": None, "timezone": None}]
        )

        resp = client.get("/jobs")

        assert resp.status_code == 200
        assert resp.json() == [{"name": "backup"}]

    def test_string_bool_is_500(self, client, upstream):
        upstream.request.return_value = _mock_response(200, [{"name": "backup", "disable": "true"}])

        resp = client.get("/jobs")

        assert resp.status_code == 500
        assert resp.json()["error"]


# ============================================================================
# CREATE
# ============================================================================

class TestCreateJob:
    """Tests for POST /jobs."""

    def test_forwards_identical_json(self, client, upstream):
        upstream.request.return_value = _mock_response(201, {"name": "backup"})
        body = {"name": "backup", "schedule": "@every 1h"}

        resp = client.post("/jobs", json=body)

        assert resp.status_code == 201
        assert resp.json() == {"message": "Job created"}
        upstream.request.assert_called_once_with("POST", f"{BASE_URL}/v1/jobs", json=body)

    def test_relays_upstream_error_status(self, client, upstream):
        upstream.request.return_value = _mock_response(422, {"error": "invalid schedule"})

        resp = client.post("/jobs", json={"name": "backup", "schedule": "nope"})

        assert resp.status_code == 422
        assert resp.json() == {"message": "Job created"}

    def test_invalid_json_is_400_without_upstream_call(self, client, upstream):
        resp = client.post(
            "/jobs",
            content=b'{"name": "backup",',
            headers={"Content-Type": "application/json"},
        )

        assert resp.status_code == 400
        assert resp.json()["error"]
        upstream.request.assert_not_called()

    def test_wrong_field_type_is_400(self, client, upstream):
        resp = client.post("/jobs", json={"name": "backup", "disable": {"nested": 1}})

        assert resp.status_code == 400
        assert "disable" in resp.json()["error"]
        upstream.request.assert_not_called()

    def test_missing_body_is_400(self, client, upstream):
        resp = client.post("/jobs")

        assert resp.status_code == 400
        upstream.request.assert_not_called()

    @pytest.mark.parametrize("content", [b"[]", b'"backup"', b"null", b"5"])
    def test_non_object_body_is_400(self, client, upstream, content):
        resp = client.post(
            "/jobs",
            content=content,
            headers={"Content-Type": "application/json"},
        )

        assert resp.status_code == 400
        assert resp.json()["error"]
        upstream.request.assert_not_called()

    def test_string_bool_is_400(self, client, upstream):
        resp = client.post("/jobs", json={"name": "backup", "disable": "true"})

        assert resp.status_code == 400
        upstream.request.assert_not_called()

    def test_null_field_forwarded_as_absent(self, client, upstream):
        upstream.request.return_value = _mock_response(201, {"name": "backup"})

        resp = client.post("/jobs", json={"name": "backup", "timezone": None, "tags": None})

        assert resp.status_code == 201
        assert resp.json() == {"message": "Job created"}
        upstream.request.assert_called_once_with("POST", f"{BASE_URL}/v1/jobs", json={"name": "backup"})

    def test_upstream_unreachable_is_500(self, client, upstream):
        upstream.request.side_effect = httpx.ConnectError("Connection refused")

        resp = client.post("/jobs", json={"name": "backup"})

        assert resp.status_code == 500
        assert "Connection refused" in resp.json()["error"]

    def test_bodiless_upstream_status(self, client, upstream):
        upstream.request.return_value = _mock_response(204)

        resp = client.post("/jobs", json={"name": "backup"})

        assert resp.status_code == 204
        assert resp.content == b""


# ============================================================================
# UPDATE
# ============================================================================

class TestUpdateJob:
    """Tests for PUT /jobs/{name}."""

    def test_forwards_to_named_endpoint(self, client, upstream):
        upstream.request.return_value = _mock_response(200, {})
        body = {
            "name": "backup",
            "schedule": "@every 2h",
            "Excecutor_config": {"command": "backup.sh"},
        }

        resp = client.put("/jobs/backup", json=body)

        assert resp.status_code == 200
        assert resp.json() == {"message": "Job updated"}
        upstream.request.assert_called_once_with(
            "PUT",
            f"{BASE_URL}/v1/jobs/backup",
            json={
                "name": "backup",
                "schedule": "@every 2h",
                "executor_config": {"command": "backup.sh"},
            },
        )

    def test_relays_not_found(self, client, upstream):
        upstream.request.return_value = _mock_response(404, {"error": "job not found"})

        resp = client.put("/jobs/missing", json={"name": "missing"})

        assert resp.status_code == 404
        assert resp.json() == {"message": "Job updated"}

    def test_invalid_json_is_400(self, client, upstream):
        resp = client.put(
            "/jobs/backup",
            content=b"not json",
            headers={"Content-Type": "application/json"},
        )

        assert resp.status_code == 400
        upstream.request.assert_not_called()

    @pytest.mark.parametrize("content", [b'[{"name": "backup"}]', b'"backup"', b"null"])
    def test_non_object_body_is_400(self, client, upstream, content):
        resp = client.put(
            "/jobs/backup",
            content=content,
            headers={"Content-Type": "application/json"},
        )

        assert resp.status_code == 400
        assert resp.json()["error"]
        upstream.request.assert_not_called()

    def test_null_executor_config_forwarded_as_absent(self, client, upstream):
        resp = client.put("/jobs/backup", json={"name": "backup", "executor_config": None})

        assert resp.status_code == 200
        upstream.request.assert_called_once_with(
            "PUT", f"{BASE_URL}/v1/jobs/backup", json={"name": "backup"}
        )

    def test_timeout_is_500(self, client, upstream):
        upstream.request.side_effect = httpx.ReadTimeout("Read timed out")

        resp = client.put("/jobs/backup", json={"name": "backup"})

        assert resp.status_code == 500
        assert "timeout" in resp.json()["error"].lower()


# ============================================================================
# DELETE
# ============================================================================

class TestDeleteJob:
    """Tests for DELETE /jobs/{name}."""

    def test_deletes_named_job_without_body(self, client, upstream):
        upstream.request.return_value = _mock_response(200, {"name": "x"})

        resp = client.delete("/jobs/x")

        assert resp.status_code == 200
        assert resp.json() == {"message": "Job deleted"}
        upstream.request.assert_called_once_with("DELETE", f"{BASE_URL}/v1/jobs/x", json=None)

    def test_relays_not_found(self, client, upstream):
        upstream.request.return_value = _mock_response(404, {"error": "job not found"})

        resp = client.delete("/jobs/missing")

        assert resp.status_code == 404
        assert resp.json() == {"message": "Job deleted"}

    def test_upstream_unreachable_is_500(self, client, upstream):
        upstream.request.side_effect = httpx.ConnectError("Connection refused")

        resp = client.delete("/jobs/x")

        assert resp.status_code == 500
        assert resp.json()["error"]


# ============================================================================
# ERROR ENVELOPE
# ============================================================================

class TestErrorEnvelope:
    def test_unknown_route_uses_error_envelope(self, client):
        resp = client.get("/nope")

        assert resp.status_code == 404
        assert resp.json() == {"error": "Not Found"}

    def test_unhandled_exception_is_500(self):
        app = create_app()
        broken = MagicMock()
        broken.list_jobs.side_effect = RuntimeError("boom")
        app.dependency_overrides[get_client] = lambda: broken

        resp = TestClient(app, raise_server_exceptions=False).get("/jobs")

        assert resp.status_code == 500
        assert resp.json() == {"error": "Internal server error"}
