"""User Repository - persistence and uniqueness-to-Failure mapping.

Tests:
    - create() returns Success(User) with id and created_at populated
    - duplicate email -> Failure(invalid, {"email": [localized message]}), one row kept
    - non-uniqueness integrity faults propagate
    - is_unique_violation recognizes SQLSTATE and driver messages
"""

from types import SimpleNamespace

import pytest
from sqlalchemy.exc import IntegrityError

from signup.core.domain_types import FailureTag, Locale
from signup.core.messages import MessageKey, translate
from signup.infrastructure.user_repository import (
    SqlAlchemyUserRepository, is_unique_violation,
)


def user_fields(**overrides):
    fields = {
        "first_name": "A",
        "last_name": "B",
        "email": "a@b.com",
        "password_hash": "pbkdf2_sha256$1000$c2FsdA==$aGFzaA==",
    }
    fields.update(overrides)
    return fields


@pytest.mark.asyncio
async def test_create_returns_persisted_user(test_db, count_users):
    repository = SqlAlchemyUserRepository(test_db)

    result = await repository.create(user_fields())

    assert result.is_success()
    user = result.unwrap_success()
    assert user.id is not None
    assert user.created_at is not None
    assert await count_users() == 1


@pytest.mark.asyncio
async def test_duplicate_email_returns_localized_failure(test_db, count_users):
    repository = SqlAlchemyUserRepository(test_db, Locale.PT_BR)
    await repository.create(user_fields())

    result = await repository.create(user_fields(first_name="Other"))

    assert result.is_failure()
    assert result.failure_tag() == FailureTag.INVALID
    assert result.failure_detail() == {
        "email": [translate(MessageKey.NOT_UNIQUE, Locale.PT_BR)],
    }
    assert await count_users() == 1


@pytest.mark.asyncio
async def test_session_usable_after_duplicate(test_db, count_users):
    repository = SqlAlchemyUserRepository(test_db)
    await repository.create(user_fields())
    await repository.create(user_fields())

    result = await repository.create(user_fields(email="c@d.com"))

    assert result.is_success()
    assert await count_users() == 2


@pytest.mark.asyncio
async def test_not_null_violation_propagates(test_db):
    repository = SqlAlchemyUserRepository(test_db)

    with pytest.raises(IntegrityError):
        await repository.create(user_fields(password_hash=None))


def _integrity_error(orig):
    return IntegrityError("INSERT INTO users ...", {}, orig)


def test_unique_violation_detected_by_sqlstate():
    assert is_unique_violation(_integrity_error(SimpleNamespace(sqlstate="23505")))
    assert not is_unique_violation(_integrity_error(SimpleNamespace(sqlstate="23502")))


def test_unique_violation_detected_by_message():
    assert is_unique_violation(
        _integrity_error(Exception("UNIQUE constraint failed: users.email")),
    )
    assert is_unique_violation(
        _integrity_error(Exception('duplicate key value violates unique constraint "uq_users_email"')),
    )
    assert not is_unique_violation(
        _integrity_error(Exception("NOT NULL constraint failed: users.password_hash")),
    )
