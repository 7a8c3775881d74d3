"""Pytest fixtures: in-memory Firestore and a stub token verifier for fast, isolated tests."""
import os

# Settings are read at import time
os.environ["FIREBASE_INIT_ON_STARTUP"] = "false"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DEBUG"] = "false"

import pytest
from fastapi.testclient import TestClient

from ihost.core.dependencies import get_firebase
from ihost.database import get_db
from ihost.main import app
from tests.fakes import FakeFirebase, FakeFirestore

USERS = ("alice", "bob", "carol", "dave")


@pytest.fixture
def db():
    return FakeFirestore()


@pytest.fixture
def firebase():
    return FakeFirebase(known_uids=USERS)


@pytest.fixture
def client(db, firebase):
    """FastAPI TestClient with Firestore and Firebase Auth replaced by fakes."""
    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_firebase] = lambda: firebase
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()


def auth(uid: str) -> dict:
    """Authorization header for a user; the fake verifier maps the token to the uid."""
    return {"Authorization": f"Bearer {uid}"}


# ---------------------------------------------------------------------------
# Helpers: create resources via the API, returning the JSON response
# ---------------------------------------------------------------------------
def register_user(client: TestClient, uid: str, username: str = None, first_name: str = "Test") -> dict:
    resp = client.post("/api/users/register", json={
        "uid": uid,
        "email": f"{uid}@example.com",
        "username": username or f"{uid}_user"[:12],
        "firstName": first_name,
    })
    assert resp.status_code == 201, resp.text
    return resp.json()


def create_event(client: TestClient, uid: str, title: str = "Summer party", **fields) -> dict:
    payload = {"title": title, "eventDate": "2025-06-21", **fields}
    resp = client.post("/api/events", json=payload, headers=auth(uid))
    assert resp.status_code == 201, resp.text
    return resp.json()
