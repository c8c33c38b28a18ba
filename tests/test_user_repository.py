"""Tests for user persistence."""

import pytest

from biblioteca.models.user import User
from biblioteca.services.users import EmailAlreadyRegistered, UserNotFound, UserRepository


@pytest.fixture
def repository(db):
    return UserRepository(db)


def make_user(email="joao@example.com", name="Joao"):
    return User.register(name, email, "not-a-real-hash")


def test_insert_assigns_id(repository):
    user = repository.insert(make_user())

    assert user.id is not None
    assert user.created_at > 0
    assert repository.email_exists("joao@example.com")


def test_email_exists_is_exact_match(repository):
    repository.insert(make_user("joao@example.com"))

    assert not repository.email_exists("other@example.com")
    assert not repository.email_exists("JOAO@example.com")


def test_insert_duplicate_email_raises(repository):
    repository.insert(make_user("dup@example.com", "First"))

    with pytest.raises(EmailAlreadyRegistered):
        repository.insert(make_user("dup@example.com", "Second"))

    assert len(repository.find_all()) == 1


def test_find_all_includes_soft_deleted(repository):
    first = repository.insert(make_user("a@example.com"))
    repository.insert(make_user("b@example.com"))
    repository.soft_delete(first.id, 1_700_000_000)

    users = repository.find_all()

    assert [u.email for u in users] == ["a@example.com", "b@example.com"]
    assert users[0].is_deleted


def test_find_all_empty(repository):
    assert repository.find_all() == []


def test_find_by_id_missing_raises(repository):
    with pytest.raises(UserNotFound) as exc_info:
        repository.find_by_id(12345)

    assert exc_info.value.user_id == 12345


def test_update_changes_fields_and_timestamp(repository):
    user = repository.insert(make_user())
    user_id, created_at = user.id, user.created_at

    rows = repository.update(user_id, "Joao Novo", "novo@example.com", "new-hash", 1_800_000_000)

    assert rows == 1
    updated = repository.find_by_id(user_id)
    assert updated.name == "Joao Novo"
    assert updated.email == "novo@example.com"
    assert updated.password_hash == "new-hash"
    assert updated.updated_at == 1_800_000_000
    assert updated.created_at == created_at


def test_update_missing_user_affects_nothing(repository):
    assert repository.update(999, "Nobody", "nobody@example.com", "hash", 1) == 0
    assert repository.find_all() == []


def test_update_to_taken_email_raises(repository):
    repository.insert(make_user("taken@example.com", "Owner"))
    other = repository.insert(make_user("free@example.com", "Other"))

    with pytest.raises(EmailAlreadyRegistered):
        repository.update(other.id, "Other", "taken@example.com", "hash", 1)


def test_soft_delete_sets_deleted_at_once(repository):
    user = repository.insert(make_user())
    user_id = user.id

    assert repository.soft_delete(user_id, 100) == 1
    assert repository.soft_delete(user_id, 200) == 0

    deleted = repository.find_by_id(user_id)
    assert deleted.deleted_at == 100
    assert deleted.is_deleted


def test_hard_delete_is_idempotent(repository):
    user = repository.insert(make_user())
    user_id = user.id

    assert repository.hard_delete(user_id) == 1
    assert repository.hard_delete(user_id) == 0

    with pytest.raises(UserNotFound):
        repository.find_by_id(user_id)


def test_update_without_password_keeps_hash(repository):
    user = repository.insert(make_user())
    user_id = user.id

    rows = repository.update(user_id, "Joao Novo", "joao@example.com", None, 1_800_000_000)

    assert rows == 1
    updated = repository.find_by_id(user_id)
    assert updated.name == "Joao Novo"
    assert updated.password_hash == "not-a-real-hash"
