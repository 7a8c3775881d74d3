"""Repository tests against the in-memory Firestore fake."""
import pytest
from google.api_core.exceptions import NotFound

from ihost.models.enums import EventUserStatus, FriendshipStatus
from ihost.models.event_user import EventUser
from ihost.models.friendship import Friendship
from ihost.models.user import User
from ihost.repositories import EventUserRepository, FriendshipRepository, UserRepository
from tests.fakes import FakeFirestore


def _row(event_id, user_id, status=EventUserStatus.PENDING):
    return EventUser(event_id=event_id, user_id=user_id, status=status, invited_at="2025-01-01T00:00:00+00:00")


def test_user_document_keyed_by_uid():
    db = FakeFirestore()
    users = UserRepository(db)
    users.save(User(uid="alice", email="a@example.com", username="alice", first_name="Alice"))

    assert list(db.documents("users")) == ["alice"]
    assert db.documents("users")["alice"]["firstName"] == "Alice"
    assert users.find_by_id("alice").uid == "alice"
    assert users.find_by_username("alice").email == "a@example.com"
    assert users.find_by_email("nobody@example.com") is None
    assert users.exists("alice")
    assert not users.exists("bob")


def test_enums_stored_as_strings():
    db = FakeFirestore()
    row_id = EventUserRepository(db).save(_row("e1", "bob", EventUserStatus.ACCEPTED))
    stored = db.documents("event_users")[row_id]
    assert stored["status"] == "ACCEPTED"
    assert stored["role"] == "ATTENDEE"
    assert "id" not in stored


def test_event_user_queries():
    db = FakeFirestore()
    repository = EventUserRepository(db)
    repository.save(_row("e1", "bob"))
    repository.save(_row("e1", "carol", EventUserStatus.ACCEPTED))
    repository.save(_row("e2", "bob", EventUserStatus.ACCEPTED))

    assert len(repository.find_by_event_id("e1")) == 2
    assert [r.user_id for r in repository.find_by_event_id_and_status("e1", EventUserStatus.ACCEPTED)] == ["carol"]
    assert {r.event_id for r in repository.find_by_user_id("bob")} == {"e1", "e2"}
    assert repository.find_by_event_id_and_user_id("e2", "bob").status == EventUserStatus.ACCEPTED
    assert repository.find_by_event_id_and_user_id("e2", "carol") is None


def test_delete_by_event_id_batches_writes():
    db = FakeFirestore()
    repository = EventUserRepository(db)
    for i in range(501):
        repository.save(_row("big", f"user{i}"))
    repository.save(_row("other", "bob"))

    assert repository.delete_by_event_id("big") == 501
    assert db.commits == [500, 1]
    assert len(db.documents("event_users")) == 1


def test_delete_by_event_id_without_rows():
    db = FakeFirestore()
    assert EventUserRepository(db).delete_by_event_id("empty") == 0
    assert db.commits == []


def test_friendship_lookup_both_directions():
    db = FakeFirestore()
    repository = FriendshipRepository(db)
    friendship_id = repository.save(Friendship(user1_id="alice", user2_id="bob", requested_by="alice"))

    assert repository.find_between("alice", "bob").id == friendship_id
    assert repository.find_between("bob", "alice").id == friendship_id
    assert repository.find_between("alice", "carol") is None


def test_friends_on_either_side():
    db = FakeFirestore()
    repository = FriendshipRepository(db)
    accepted = FriendshipStatus.ACCEPTED
    repository.save(Friendship(user1_id="alice", user2_id="bob", status=accepted, requested_by="alice"))
    repository.save(Friendship(user1_id="carol", user2_id="alice", status=accepted, requested_by="carol"))
    repository.save(Friendship(user1_id="dave", user2_id="alice", requested_by="dave"))

    friends = repository.find_by_user_and_status("alice", accepted)
    assert {(f.user1_id, f.user2_id) for f in friends} == {("alice", "bob"), ("carol", "alice")}


def test_update_fields_changes_only_given_fields():
    db = FakeFirestore()
    repository = FriendshipRepository(db)
    friendship_id = repository.save(Friendship(user1_id="alice", user2_id="bob", requested_by="alice"))

    repository.update_fields(friendship_id, {"status": "ACCEPTED"})

    friendship = repository.find_by_id(friendship_id)
    assert friendship.status == FriendshipStatus.ACCEPTED
    assert friendship.user1_id == "alice"


def test_update_missing_document_raises_not_found():
    users = UserRepository(FakeFirestore())
    with pytest.raises(NotFound):
        users.update_fields("ghost", {"firstName": "Casper"})
