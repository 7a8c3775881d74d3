"""Tests for the event endpoints.

Covers:
- Create: share code, companion CREATOR row
- Get / list with the caller's status and role
- Partial update and creator-only writes
- Delete cascade and its count
- Share code lookup as a join request
"""
import re

from tests.conftest import auth, create_event

SHARE_CODE = re.compile(r"^IH-[A-Z0-9]{5}$")


class TestEventCreate:

    def test_create_event(self, client, db):
        data = create_event(client, "alice", title="Dinner", location="Oslo", price=150.0, free=False)
        assert data["event"]["title"] == "Dinner"
        assert data["event"]["creatorUid"] == "alice"
        assert data["event"]["price"] == 150.0
        assert data["event"]["free"] is False
        assert SHARE_CODE.match(data["event"]["shareCode"])
        assert data["userStatus"] == "CREATOR"
        assert data["userRole"] == "CREATOR"
        assert data["event"]["createdAt"] == data["event"]["updatedAt"]

    def test_create_writes_one_creator_row(self, client, db):
        data = create_event(client, "alice")
        rows = [r for r in db.documents("event_users").values() if r["eventId"] == data["id"]]
        assert len(rows) == 1
        assert rows[0]["userId"] == "alice"
        assert rows[0]["status"] == "CREATOR"
        assert rows[0]["role"] == "CREATOR"
        assert rows[0]["respondedAt"] is not None

    def test_event_document_has_no_id_field(self, client, db):
        data = create_event(client, "alice")
        stored = db.documents("events")[data["id"]]
        assert "id" not in stored
        assert stored["eventDate"] == "2025-06-21"

    def test_create_requires_title(self, client):
        resp = client.post("/api/events", json={"eventDate": "2025-06-21"}, headers=auth("alice"))
        assert resp.status_code == 400
        assert resp.json()["error"] == "VALIDATION_ERROR"
        assert "title" in resp.json()["message"]

    def test_create_rejects_bad_date(self, client):
        resp = client.post("/api/events", json={"title": "x", "eventDate": "21.06.2025"}, headers=auth("alice"))
        assert resp.status_code == 400

    def test_create_requires_token(self, client):
        resp = client.post("/api/events", json={"title": "x", "eventDate": "2025-06-21"})
        assert resp.status_code == 401
        assert resp.json()["error"] == "UNAUTHORIZED"


class TestEventRead:

    def test_get_event_without_row_has_null_metadata(self, client, db):
        event = create_event(client, "alice")
        resp = client.get(f"/api/events/{event['id']}", headers=auth("bob"))
        assert resp.status_code == 200
        assert resp.json()["userStatus"] is None
        assert resp.json()["userRole"] is None
        # Plain fetch never creates a row
        assert len(db.documents("event_users")) == 1

    def test_get_missing_event(self, client):
        resp = client.get("/api/events/nope", headers=auth("alice"))
        assert resp.status_code == 404
        assert resp.json()["error"] == "NOT_FOUND"

    def test_list_my_events(self, client):
        create_event(client, "alice", title="One")
        create_event(client, "alice", title="Two")
        create_event(client, "bob", title="Other")
        resp = client.get("/api/events", headers=auth("alice"))
        assert resp.status_code == 200
        assert sorted(e["event"]["title"] for e in resp.json()) == ["One", "Two"]


class TestEventUpdate:

    def test_title_only_update(self, client, db):
        event = create_event(client, "alice", description="desc", location="Oslo", eventTime="18:00")
        before = dict(db.documents("events")[event["id"]])

        resp = client.put(f"/api/events/{event['id']}", json={"title": "Renamed"}, headers=auth("alice"))
        assert resp.status_code == 200
        assert resp.json()["event"]["title"] == "Renamed"

        after = db.documents("events")[event["id"]]
        changed = {k for k in after if after[k] != before.get(k)}
        assert changed <= {"title", "updatedAt"}
        assert after["title"] == "Renamed"
        assert after["description"] == "desc"
        assert after["location"] == "Oslo"

    def test_explicit_null_clears_optional_field(self, client, db):
        event = create_event(client, "alice", location="Oslo")
        resp = client.put(f"/api/events/{event['id']}", json={"location": None}, headers=auth("alice"))
        assert resp.status_code == 200
        assert db.documents("events")[event["id"]]["location"] is None

    def test_explicit_null_title_rejected(self, client):
        event = create_event(client, "alice")
        resp = client.put(f"/api/events/{event['id']}", json={"title": None}, headers=auth("alice"))
        assert resp.status_code == 400
        assert resp.json()["error"] == "VALIDATION_ERROR"

    def test_non_creator_cannot_update(self, client, db):
        event = create_event(client, "alice")
        resp = client.put(f"/api/events/{event['id']}", json={"title": "Hijacked"}, headers=auth("bob"))
        assert resp.status_code == 403
        assert resp.json()["error"] == "FORBIDDEN"
        assert db.documents("events")[event["id"]]["title"] == "Summer party"

    def test_update_missing_event(self, client):
        resp = client.put("/api/events/nope", json={"title": "x"}, headers=auth("alice"))
        assert resp.status_code == 404


class TestEventDelete:

    def test_delete_without_attendees_counts_creator_row(self, client, db):
        event = create_event(client, "alice")
        resp = client.delete(f"/api/events/{event['id']}", headers=auth("alice"))
        assert resp.status_code == 200
        assert resp.json() == {"message": "Event deleted successfully", "deletedEventUsers": 1}
        assert event["id"] not in db.documents("events")
        assert db.documents("event_users") == {}

    def test_delete_cascades_to_invitations(self, client, db):
        event = create_event(client, "alice")
        client.post("/api/event-users/invite", json={"eventId": event["id"], "userIds": ["bob", "carol"]},
                    headers=auth("alice"))
        resp = client.delete(f"/api/events/{event['id']}", headers=auth("alice"))
        assert resp.json()["deletedEventUsers"] == 3
        assert db.documents("event_users") == {}

    def test_non_creator_cannot_delete(self, client, db):
        event = create_event(client, "alice")
        resp = client.delete(f"/api/events/{event['id']}", headers=auth("bob"))
        assert resp.status_code == 403
        assert event["id"] in db.documents("events")
        assert len(db.documents("event_users")) == 1


class TestShareCode:

    def test_share_code_creates_pending_row(self, client, db):
        event = create_event(client, "alice")
        code = event["event"]["shareCode"]

        resp = client.get(f"/api/events/by-code/{code}", headers=auth("bob"))
        assert resp.status_code == 200
        assert resp.json()["id"] == event["id"]
        assert resp.json()["userStatus"] == "PENDING"
        assert resp.json()["userRole"] == "ATTENDEE"

        bob_rows = [r for r in db.documents("event_users").values() if r["userId"] == "bob"]
        assert len(bob_rows) == 1
        assert bob_rows[0]["respondedAt"] is None

    def test_share_code_twice_reuses_row(self, client, db):
        event = create_event(client, "alice")
        code = event["event"]["shareCode"]
        client.get(f"/api/events/by-code/{code}", headers=auth("bob"))
        client.get(f"/api/events/by-code/{code}", headers=auth("bob"))
        assert len(db.documents("event_users")) == 2

    def test_creator_sees_own_row(self, client):
        event = create_event(client, "alice")
        resp = client.get(f"/api/events/by-code/{event['event']['shareCode']}", headers=auth("alice"))
        assert resp.json()["userStatus"] == "CREATOR"

    def test_creator_without_row_gets_nulls(self, client, db):
        event = create_event(client, "alice")
        db.documents("event_users").clear()
        resp = client.get(f"/api/events/by-code/{event['event']['shareCode']}", headers=auth("alice"))
        assert resp.status_code == 200
        assert resp.json()["userStatus"] is None
        assert db.documents("event_users") == {}

    def test_unknown_share_code(self, client):
        resp = client.get("/api/events/by-code/IH-ZZZZZ", headers=auth("bob"))
        assert resp.status_code == 404
