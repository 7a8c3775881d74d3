"""Tests for friend requests and the friendship state machine over HTTP."""
import pytest

from tests.conftest import auth


def _request(client, from_uid, to_uid):
    return client.post("/api/friendships/request", json={"toUserId": to_uid}, headers=auth(from_uid))


class TestFriendRequest:

    def test_send_request(self, client):
        resp = _request(client, "alice", "bob")
        assert resp.status_code == 201
        data = resp.json()
        assert data["user1Id"] == "alice"
        assert data["user2Id"] == "bob"
        assert data["requestedBy"] == "alice"
        assert data["status"] == "PENDING"
        assert data["respondedAt"] is None
        assert data["id"]

    def test_request_to_self(self, client, db):
        resp = _request(client, "alice", "alice")
        assert resp.status_code == 400
        assert resp.json()["error"] == "INVALID_REQUEST"
        assert db.documents("friendships") == {}

    @pytest.mark.parametrize("answer", [None, "accept", "decline"])
    def test_duplicate_request_in_either_direction(self, client, answer):
        friendship = _request(client, "alice", "bob").json()
        if answer:
            client.post(f"/api/friendships/{friendship['id']}/{answer}", headers=auth("bob"))

        for from_uid, to_uid in (("alice", "bob"), ("bob", "alice")):
            resp = _request(client, from_uid, to_uid)
            assert resp.status_code == 409
            assert resp.json()["error"] == "FRIENDSHIP_EXISTS"


class TestRespond:

    def test_accept(self, client):
        friendship = _request(client, "alice", "bob").json()
        resp = client.post(f"/api/friendships/{friendship['id']}/accept", headers=auth("bob"))
        assert resp.status_code == 200
        assert resp.json()["status"] == "ACCEPTED"
        assert resp.json()["respondedAt"] is not None

    def test_requester_cannot_accept(self, client):
        friendship = _request(client, "alice", "bob").json()
        resp = client.post(f"/api/friendships/{friendship['id']}/accept", headers=auth("alice"))
        assert resp.status_code == 403

    def test_cannot_answer_twice(self, client):
        friendship = _request(client, "alice", "bob").json()
        client.post(f"/api/friendships/{friendship['id']}/decline", headers=auth("bob"))
        resp = client.post(f"/api/friendships/{friendship['id']}/accept", headers=auth("bob"))
        assert resp.status_code == 400
        assert resp.json()["error"] == "INVALID_STATUS"

    def test_missing_friendship(self, client):
        resp = client.post("/api/friendships/nope/accept", headers=auth("bob"))
        assert resp.status_code == 404


class TestRemoveAndList:

    def test_either_side_can_remove(self, client, db):
        first = _request(client, "alice", "bob").json()
        second = _request(client, "carol", "alice").json()
        client.post(f"/api/friendships/{second['id']}/accept", headers=auth("alice"))

        assert client.delete(f"/api/friendships/{first['id']}", headers=auth("alice")).status_code == 200
        assert client.delete(f"/api/friendships/{second['id']}", headers=auth("alice")).status_code == 200
        assert db.documents("friendships") == {}

    def test_outsider_cannot_remove(self, client, db):
        friendship = _request(client, "alice", "bob").json()
        resp = client.delete(f"/api/friendships/{friendship['id']}", headers=auth("carol"))
        assert resp.status_code == 403
        assert friendship["id"] in db.documents("friendships")

    def test_lists(self, client):
        to_bob = _request(client, "alice", "bob").json()
        _request(client, "alice", "carol")
        from_dave = _request(client, "dave", "alice").json()
        client.post(f"/api/friendships/{to_bob['id']}/accept", headers=auth("bob"))

        pending = client.get("/api/friendships/pending", headers=auth("alice")).json()
        sent = client.get("/api/friendships/sent", headers=auth("alice")).json()
        friends = client.get("/api/friendships/friends", headers=auth("alice")).json()
        bob_friends = client.get("/api/friendships/friends", headers=auth("bob")).json()

        assert [f["id"] for f in pending] == [from_dave["id"]]
        assert [f["user2Id"] for f in sent] == ["carol"]
        assert [f["id"] for f in friends] == [to_bob["id"]]
        assert [f["id"] for f in bob_friends] == [to_bob["id"]]
