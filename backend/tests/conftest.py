"""Root conftest - shared test configuration."""

import os

# Tests never touch a real database or spend seconds hashing
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")
os.environ.setdefault("LOG_FORMAT", "text")
