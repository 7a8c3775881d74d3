"""Tests for registration, profile lookup/update and availability checks."""
import pytest

from tests.conftest import auth, register_user


class TestRegister:

    def test_register(self, client, db):
        resp = client.post("/api/users/register", json={
            "uid": "alice",
            "email": "alice@example.com",
            "username": "alice",
            "firstName": "Alice",
            "lastName": "Liddell",
        })
        assert resp.status_code == 201
        assert resp.json() == {
            "uid": "alice",
            "email": "alice@example.com",
            "username": "alice",
            "message": "Brukerprofil opprettet. Du kan nå logge inn.",
        }
        stored = db.documents("users")["alice"]
        assert "uid" not in stored
        assert stored["firstName"] == "Alice"
        assert stored["createdAt"] == stored["updatedAt"]

    def test_register_unknown_firebase_user(self, client, db):
        resp = client.post("/api/users/register", json={
            "uid": "mallory", "email": "m@example.com", "username": "mallory", "firstName": "M",
        })
        assert resp.status_code == 404
        assert resp.json()["error"] == "USER_NOT_FOUND"
        assert db.documents("users") == {}

    def test_register_twice(self, client):
        register_user(client, "alice", username="alice")
        resp = client.post("/api/users/register", json={
            "uid": "alice", "email": "alice@example.com", "username": "alice2", "firstName": "A",
        })
        assert resp.status_code == 409
        assert resp.json()["error"] == "PROFILE_EXISTS"

    def test_register_taken_username(self, client):
        register_user(client, "alice", username="party")
        resp = client.post("/api/users/register", json={
            "uid": "bob", "email": "bob@example.com", "username": "party", "firstName": "Bob",
        })
        assert resp.status_code == 409
        assert resp.json()["error"] == "USERNAME_TAKEN"

    @pytest.mark.parametrize("username", ["abc", "thirteenchars"])
    def test_register_username_length(self, client, username):
        resp = client.post("/api/users/register", json={
            "uid": "alice", "email": "alice@example.com", "username": username, "firstName": "A",
        })
        assert resp.status_code == 400
        assert resp.json()["error"] == "VALIDATION_ERROR"

    def test_register_invalid_email(self, client):
        resp = client.post("/api/users/register", json={
            "uid": "alice", "email": "not-an-email", "username": "alice", "firstName": "A",
        })
        assert resp.status_code == 400


class TestProfiles:

    def test_get_user_is_public(self, client):
        register_user(client, "alice", username="alice", first_name="Alice")
        resp = client.get("/api/users/alice")
        assert resp.status_code == 200
        assert resp.json()["uid"] == "alice"
        assert resp.json()["firstName"] == "Alice"

    def test_get_missing_user(self, client):
        assert client.get("/api/users/nobody").status_code == 404

    def test_list_users_requires_token(self, client):
        register_user(client, "alice")
        register_user(client, "bob")
        assert client.get("/api/users").status_code == 401
        resp = client.get("/api/users", headers=auth("alice"))
        assert {u["uid"] for u in resp.json()} == {"alice", "bob"}

    def test_update_own_profile(self, client, db):
        register_user(client, "alice", first_name="Alice")
        resp = client.put("/api/users/alice", json={"lastName": "Smith"}, headers=auth("alice"))
        assert resp.status_code == 200
        assert resp.json()["lastName"] == "Smith"
        assert resp.json()["firstName"] == "Alice"
        assert db.documents("users")["alice"]["lastName"] == "Smith"

    def test_update_other_profile_forbidden(self, client, db):
        register_user(client, "alice", first_name="Alice")
        resp = client.put("/api/users/alice", json={"firstName": "Eve"}, headers=auth("bob"))
        assert resp.status_code == 403
        assert db.documents("users")["alice"]["firstName"] == "Alice"

    def test_update_first_name_cannot_be_null(self, client):
        register_user(client, "alice")
        resp = client.put("/api/users/alice", json={"firstName": None}, headers=auth("alice"))
        assert resp.status_code == 400

    def test_update_missing_profile(self, client):
        resp = client.put("/api/users/alice", json={"lastName": "x"}, headers=auth("alice"))
        assert resp.status_code == 404

    def test_verify_returns_own_profile(self, client):
        register_user(client, "alice", username="alice")
        resp = client.get("/api/auth/verify", headers=auth("alice"))
        assert resp.status_code == 200
        assert resp.json()["username"] == "alice"


class TestAvailability:

    @pytest.mark.parametrize("username,available", [
        ("abc", False),
        ("abcd", True),
        ("abcdefghijkl", True),
        ("abcdefghijklm", False),
        ("taken", False),
    ])
    def test_username_available(self, client, username, available):
        register_user(client, "alice", username="taken")
        resp = client.get(f"/api/users/username-available/{username}")
        assert resp.status_code == 200
        assert resp.json() == {"available": available}

    def test_email_available(self, client):
        register_user(client, "alice")
        assert client.get("/api/users/email-available/alice@example.com").json() == {"available": False}
        assert client.get("/api/users/email-available/new@example.com").json() == {"available": True}
