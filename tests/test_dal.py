import pytest

from cashdesk.db.dal import Database
from cashdesk.db.schema import init_db


@pytest.fixture
def store(db_path):
    init_db(db_path)
    return db_path


def test_create_and_find_user(store):
    with Database(store) as db:
        created = db.create_user("alice", "hash", "admin")
        assert created["id"] > 0
        assert created["created_at"]
    with Database(store) as db:
        found = db.find_user("alice")
        assert found["role"] == "admin"
        assert found["password_hash"] == "hash"
        assert db.find_user("bob") is None
        assert [u["username"] for u in db.list_users()] == ["alice"]


def test_duplicate_username_rejected(store):
    with Database(store) as db:
        db.create_user("alice", "hash", "user")
        with pytest.raises(ValueError, match="already exists"):
            db.create_user("alice", "other", "user")


def test_unknown_role_rejected(store):
    with Database(store) as db:
        with pytest.raises(ValueError, match="Unsupported role"):
            db.create_user("alice", "hash", "superuser")


def test_session_closed_after_exit(store):
    db = Database(store)
    with db:
        assert db.is_open
    assert not db.is_open
    with pytest.raises(RuntimeError):
        db.find_user("alice")


def test_exception_rolls_back_and_closes(store):
    db = Database(store)
    with pytest.raises(KeyError):
        with db:
            db.create_user("alice", "hash", "user")
            raise KeyError("abort")
    assert not db.is_open
    with Database(store) as fresh:
        assert fresh.find_user("alice") is None


def test_nested_enter_rejected(store):
    db = Database(store)
    with db:
        with pytest.raises(RuntimeError):
            db.__enter__()


def test_init_db_is_idempotent(db_path):
    init_db(db_path)
    init_db(db_path)
    with Database(db_path) as db:
        assert db.list_users() == []
