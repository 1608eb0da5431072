"""User ORM - persists registered users.

Invariants:
    - id is UUID primary key (client-side default)
    - email is unique at the database level (uq_users_email); the repository
      relies on this constraint, not on a pre-insert lookup
    - password_hash stores the encoded PBKDF2 hash; plaintext is never persisted

Design Decisions:
    - Uniqueness via constraint instead of SELECT-then-INSERT: no race between
      concurrent sign-ups with the same email
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from signup.db.base import Base


class User(Base):
    """Registered user account."""
    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("email", name="uq_users_email"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
