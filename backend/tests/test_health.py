from datetime import datetime

import pytest

from app.api import dependencies
from app.core.config import get_settings
from app.main import app
from tests.http_client import SyncASGIClient


def test_health_200():
    client = SyncASGIClient(app)
    resp = client.get("/api/health")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "OK"
    assert body["service"] == "GitHub File Upload"
    parsed = datetime.fromisoformat(body["timestamp"].replace("Z", "+00:00"))
    assert parsed.tzinfo is not None


def test_health_stays_up_when_hosting_is_unconfigured(monkeypatch):
    monkeypatch.setenv("RELAY_HOSTING_BACKEND", "github")
    monkeypatch.setenv("GITHUB_TOKEN", "")
    get_settings.cache_clear()
    dependencies.get_hosting.cache_clear()

    try:
        with pytest.raises(RuntimeError, match="GITHUB_TOKEN"):
            dependencies.get_hosting()

        resp = SyncASGIClient(app).get("/api/health")

        assert resp.status_code == 200
        assert resp.json()["status"] == "OK"
    finally:
        get_settings.cache_clear()
        dependencies.get_hosting.cache_clear()
