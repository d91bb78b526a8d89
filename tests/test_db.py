"""Tests for the in-memory user database."""

from user_verification_api.app.core.db import Database
from user_verification_api.app.schemas.user import User


def test_empty_database():
    db = Database()
    assert len(db) == 0
    assert db.get("nobody") is None
    assert db.list_users() == []


def test_add_and_get(db):
    assert db.add(User(name="user1", password="p1"))
    user = db.get("user1")
    assert user == User(name="user1", password="p1", verified=False)
    assert "user1" in db


def test_add_existing_name_fails_and_keeps_record(db):
    db.add(User(name="user1", password="p1"))
    assert not db.add(User(name="user1", password="other"))
    assert db.get("user1").password == "p1"
    assert len(db) == 1


def test_get_returns_a_copy(db):
    db.add(User(name="user1", password="p1"))
    user = db.get("user1")
    user.verified = True
    user.password = "hacked"
    assert db.get("user1") == User(name="user1", password="p1", verified=False)


def test_added_user_is_copied(db):
    user = User(name="user1", password="p1")
    db.add(user)
    user.password = "changed"
    assert db.get("user1").password == "p1"


def test_verify(db):
    db.add(User(name="user1", password="p1"))
    assert db.verify("user1")
    assert db.get("user1").verified


def test_verify_absent_or_twice_fails(db):
    assert not db.verify("ghost")
    db.add(User(name="user1", password="p1"))
    assert db.verify("user1")
    assert not db.verify("user1")


def test_change_password(seeded_db):
    assert seeded_db.change_password("alice", "wonderland", "looking-glass")
    assert seeded_db.get("alice").password == "looking-glass"


def test_change_password_rejections(seeded_db):
    assert not seeded_db.change_password("ghost", "x", "y")
    assert not seeded_db.change_password("bob", "builder", "new")
    assert not seeded_db.change_password("alice", "wrong", "new")
    assert seeded_db.get("alice").password == "wonderland"
    assert seeded_db.get("bob").password == "builder"


def test_remove(seeded_db):
    assert seeded_db.remove("alice")
    assert seeded_db.get("alice") is None
    assert not seeded_db.remove("alice")


def test_remove_rejections(seeded_db):
    assert not seeded_db.remove("ghost")
    assert not seeded_db.remove("bob")
    assert len(seeded_db) == 2


def test_list_users_in_insertion_order(seeded_db):
    assert [user.name for user in seeded_db.list_users()] == ["alice", "bob"]
