"""Database Layer - SQLAlchemy declarative base shared by all ORM models.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - Engine/session lifecycle lives in infrastructure/database.py; this package
      only owns table metadata
"""
