from pathlib import Path

from app.core.config import get_settings
from app.main import create_app
from tests.http_client import SyncASGIClient


def _build_app(monkeypatch, **env: str):
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    get_settings.cache_clear()
    try:
        return create_app(get_settings())
    finally:
        get_settings.cache_clear()


def test_static_dir_is_served_without_shadowing_api(monkeypatch, tmp_path: Path):
    (tmp_path / "index.html").write_text("<h1>upload</h1>", encoding="utf-8")
    client = SyncASGIClient(_build_app(monkeypatch, RELAY_STATIC_DIR=str(tmp_path)))

    page = client.get("/")
    health = client.get("/api/health")

    assert page.status_code == 200
    assert page.text == "<h1>upload</h1>"
    assert health.status_code == 200
    assert health.json()["status"] == "OK"


def test_missing_static_dir_is_not_mounted(monkeypatch, tmp_path: Path):
    client = SyncASGIClient(_build_app(monkeypatch, RELAY_STATIC_DIR=str(tmp_path / "absent")))

    assert client.get("/").status_code == 404


def test_cors_allows_any_origin_by_default(monkeypatch):
    monkeypatch.delenv("RELAY_CORS_ORIGINS", raising=False)
    client = SyncASGIClient(_build_app(monkeypatch))

    resp = client.get("/api/health", headers={"Origin": "https://uploader.example"})

    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"


def test_cors_restricted_to_configured_origins(monkeypatch):
    client = SyncASGIClient(_build_app(monkeypatch, RELAY_CORS_ORIGINS="https://a.example, https://b.example"))

    allowed = client.get("/api/health", headers={"Origin": "https://b.example"})
    denied = client.get("/api/health", headers={"Origin": "https://evil.example"})

    assert allowed.headers["access-control-allow-origin"] == "https://b.example"
    assert "access-control-allow-origin" not in denied.headers
