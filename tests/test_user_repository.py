# File: tests/test_user_repository.py

import pytest
from sqlalchemy.exc import IntegrityError

from expense_tracker.models.user import User


def make_user(username="alice", email="alice@example.com") -> User:
    return User(username=username, email=email, password_hash="x")


def test_save_assigns_id_and_timestamps(repository):
    user = repository.save(make_user())

    assert user.id is not None
    assert user.created_at is not None
    assert user.updated_at is not None


def test_find_by_id_and_username(repository):
    user = repository.save(make_user())

    assert repository.find_by_id(user.id).username == "alice"
    assert repository.find_by_username("alice").id == user.id
    assert repository.find_by_id(user.id + 1) is None
    assert repository.find_by_username("bob") is None


def test_exists_checks_are_independent(repository):
    repository.save(make_user())

    assert repository.exists_by_username("alice")
    assert not repository.exists_by_username("alice@example.com")
    assert repository.exists_by_email("alice@example.com")
    assert not repository.exists_by_email("alice")


def test_find_all_orders_by_id(repository):
    ids = [repository.save(make_user(f"user{i}", f"user{i}@example.com")).id for i in range(3)]

    assert [u.id for u in repository.find_all()] == ids


def test_ids_are_not_reused(repository, db):
    first = repository.save(make_user())
    db.delete(first)
    db.commit()

    second = repository.save(make_user("bob", "bob@example.com"))
    assert second.id != first.id


def test_unique_username_enforced_by_database(repository):
    repository.save(make_user())

    with pytest.raises(IntegrityError):
        repository.save(make_user(email="other@example.com"))

    # Rolled back, the session keeps working
    assert len(repository.find_all()) == 1


def test_unique_email_enforced_by_database(repository):
    repository.save(make_user())

    with pytest.raises(IntegrityError):
        repository.save(make_user(username="bob"))
