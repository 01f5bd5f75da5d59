"""
Integration tests for the ``GET /api/health`` endpoint.

A real ProfileStore covers the healthy path; a MagicMock store whose
``ping()`` fails covers the 503 path without touching the filesystem.
"""

from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from portfolio_api import __version__
from portfolio_api.api.app import app
from portfolio_api.api.dependencies import get_profile_store
from portfolio_api.core.exceptions import DatabaseError


def _make_client(store) -> TestClient:
    app.dependency_overrides[get_profile_store] = lambda: store
    return TestClient(app, raise_server_exceptions=False)


class TestHealthEndpoint:
    """GET /api/health: liveness and store reachability."""

    def teardown_method(self):
        app.dependency_overrides.clear()

    def test_healthy_with_active_profile(self, seeded_store):
        resp = _make_client(seeded_store).get("/api/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["message"] == "Service is healthy"
        assert body["data"]["status"] == "ok"
        assert body["data"]["database"] == {"status": "connected", "active_profile": True}
        assert body["data"]["version"] == __version__
        assert body["data"]["uptime_seconds"] >= 0

    def test_healthy_without_profile(self, store):
        body = _make_client(store).get("/api/health").json()
        assert body["success"] is True
        assert body["data"]["database"]["active_profile"] is False

    def test_timestamp_is_utc_iso(self, store):
        timestamp = _make_client(store).get("/api/health").json()["data"]["timestamp"]
        assert timestamp.endswith("+00:00")

    def test_unreachable_store(self):
        store = MagicMock()
        store.ping.return_value = False
        resp = _make_client(store).get("/api/health")
        assert resp.status_code == 503
        body = resp.json()
        assert body["success"] is False
        assert body["message"] == "Service unavailable - database not connected"
        assert body["data"]["status"] == "unavailable"
        assert body["data"]["database"]["status"] == "disconnected"
        store.get_active_record.assert_not_called()

    def test_active_lookup_failure(self):
        store = MagicMock()
        store.ping.return_value = True
        store.get_active_record.side_effect = DatabaseError("Failed to load active profile")
        resp = _make_client(store).get("/api/health")
        assert resp.status_code == 503
        assert resp.json()["data"]["database"]["active_profile"] is False
