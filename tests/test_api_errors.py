"""Tests for the app shell: health, authentication and error body shapes."""
from fastapi import APIRouter

from ihost.core.config import settings
from ihost.main import app
from tests.conftest import auth

boom_router = APIRouter()


@boom_router.get("/_test/boom")
def boom():
    raise RuntimeError("kaboom")


app.include_router(boom_router)


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "UP"}


def test_root(client):
    resp = client.get("/")
    assert resp.json()["service"] == "iHost API"


def test_missing_token(client):
    resp = client.get("/api/events")
    assert resp.status_code == 401
    assert resp.json() == {"error": "UNAUTHORIZED", "message": "Missing or malformed Authorization header"}


def test_non_bearer_token(client):
    resp = client.get("/api/events", headers={"Authorization": "Basic abc"})
    assert resp.status_code == 401


def test_rejected_token(client):
    resp = client.get("/api/events", headers=auth("bad-token"))
    assert resp.status_code == 401
    assert "Invalid Firebase token" in resp.json()["message"]


def test_malformed_json_is_validation_error(client):
    resp = client.post("/api/events", content=b"{not json", headers={**auth("alice"), "Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "VALIDATION_ERROR"


def test_unexpected_error_hides_details(client):
    resp = client.get("/_test/boom")
    assert resp.status_code == 500
    body = resp.json()
    assert body["error"] == "INTERNAL_ERROR"
    assert body["message"] == "An unexpected error occurred"
    assert len(body["errorId"]) == 8
    assert "traceback" not in body


def test_unexpected_error_details_in_debug(client, monkeypatch):
    monkeypatch.setattr(settings, "DEBUG", True)
    monkeypatch.setattr(settings, "ENVIRONMENT", "development")
    body = client.get("/_test/boom").json()
    assert body["message"] == "kaboom"
    assert body["type"] == "RuntimeError"
    assert "traceback" in body


def test_production_never_exposes_details(client, monkeypatch):
    monkeypatch.setattr(settings, "DEBUG", True)
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    assert settings.is_production
    assert not settings.show_debug_info
    body = client.get("/_test/boom").json()
    assert body["message"] == "An unexpected error occurred"
    assert "traceback" not in body
