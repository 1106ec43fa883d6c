"""
Tests for the update check HTTP endpoint in PluginUpdater Server

Uses FastAPI's TestClient against a temporary database.
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import database
from catalog import StaticCatalog
from managers.database_manager import DatabaseManager, DEFAULT_RELEASE
from routes.update import GetCatalog
from server import app

VALID_REQUEST = {
    "action": "version",
    "license_key": "ABC-123",
    "domain": "site.example.org",
    "version": "1.0.0"
}


@pytest.fixture
def client(tmp_path, monkeypatch):
    """Client backed by a fresh database (startup hooks not run)"""
    manager = DatabaseManager(str(tmp_path / "routes.db"))
    manager.InitializeDatabase()
    monkeypatch.setattr(database, "db_manager", manager)
    yield TestClient(app)
    manager.engine.dispose()


def test_version_request(client):
    response = client.post("/check-update", json=VALID_REQUEST)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {
        "new_version": DEFAULT_RELEASE["new_version"],
        "tested": DEFAULT_RELEASE["tested"],
        "package": DEFAULT_RELEASE["package"]
    }


def test_info_request(client):
    response = client.post("/check-update", json=dict(VALID_REQUEST, action="info"))

    assert response.status_code == 200
    body = response.json()
    assert body["slug"] == DEFAULT_RELEASE["slug"]
    assert body["sections"] == DEFAULT_RELEASE["sections"]
    assert set(body) == {"name", "slug", "author", "version", "last_updated", "new_version",
                         "url", "package", "tested", "requires", "sections", "banners"}


def test_invalid_json_body(client):
    response = client.post("/check-update", content=b"{broken",
                           headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid data", "code": 400}


def test_missing_key(client):
    request = dict(VALID_REQUEST)
    del request["domain"]

    response = client.post("/check-update", json=request)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required key: domain", "code": 400}


def test_invalid_action(client):
    response = client.post("/check-update", json=dict(VALID_REQUEST, action="delete"))

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid action", "code": 400}


def test_catalog_dependency_override(client):
    """Test a different catalog can be injected"""
    app.dependency_overrides[GetCatalog] = lambda: StaticCatalog({
        "name": "Other", "slug": "other", "version": "9.0", "new_version": "9.0",
        "package": "https://example.com/other.zip"
    })
    try:
        response = client.post("/check-update", json=VALID_REQUEST)
    finally:
        app.dependency_overrides.clear()

    assert response.json() == {"new_version": "9.0", "tested": "", "package": "https://example.com/other.zip"}


def test_cors_header(client):
    response = client.post("/check-update", json=VALID_REQUEST, headers={"Origin": "https://site.example.org"})
    assert response.headers["access-control-allow-origin"] == "*"


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
