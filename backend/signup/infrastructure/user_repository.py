"""User Repository - SQLAlchemy persistence for User with uniqueness-to-Failure mapping.

Invariants:
    - create() returns Success(User) with server state refreshed after commit
    - A uniqueness violation rolls back and returns
      Failure(FailureTag.INVALID, {"email": [localized not-unique message]})
    - Any other integrity or driver fault propagates to the caller

Design Decisions:
    - Detect uniqueness by SQLSTATE 23505 when the driver exposes it, else by
      the driver message (SQLite: "UNIQUE constraint failed")
    - Locale injected per request so the message matches the caller's language
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from signup.core.domain_types import FailureTag, FieldErrors, Locale
from signup.core.messages import MessageKey, translate
from signup.core.outcome import Failure, Outcome, Success
from signup.models.user import User

logger = logging.getLogger(__name__)

_UNIQUE_VIOLATION_SQLSTATE = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """True when the integrity error was raised by a unique constraint."""
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate:
        return sqlstate == _UNIQUE_VIOLATION_SQLSTATE
    text = str(orig).lower()
    return "unique constraint" in text or "duplicate key" in text


class SqlAlchemyUserRepository:
    """UserRepository implementation over an AsyncSession."""

    def __init__(self, db: AsyncSession, locale: Locale = Locale.EN):
        self._db = db
        self._locale = locale

    async def create(self, fields: dict) -> Outcome[User, FieldErrors]:
        user = User(**fields)
        self._db.add(user)
        try:
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            if not is_unique_violation(e):
                raise
            logger.info(
                "Sign-up rejected: email already registered",
                extra={"failure_tag": FailureTag.INVALID.value},
            )
            return Failure(
                FailureTag.INVALID,
                {"email": [translate(MessageKey.NOT_UNIQUE, self._locale)]},
            )
        await self._db.refresh(user)
        logger.info("User created", extra={"user_id": user.id})
        return Success(user)
