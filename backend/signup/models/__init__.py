"""ORM Models - SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the only aggregate; email uniqueness enforced by the database

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
      or alembic autogenerate runs
"""

from signup.models.user import User  # noqa: F401
