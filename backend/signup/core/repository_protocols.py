"""Boundary Protocols - contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Each collaborator exposes exactly one capability used by the pipeline
    - Implementations provided by shell via constructor injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no base class
    - Only the repository is async: it is the one collaborator doing IO.
      Hashing is CPU-bound and offloaded to a thread by the caller
"""

from typing import Any, Protocol

from signup.core.domain_types import FieldErrors
from signup.core.outcome import Outcome


class ParamsValidator(Protocol):
    """Contract for request validation - Success(validated params) or Failure(invalid, FieldErrors)."""
    def validate(self, raw_params: Any) -> Outcome[Any, FieldErrors]: ...


class SecretHasher(Protocol):
    """Contract for one-way secret hashing - always succeeds."""
    def hash(self, plaintext: str) -> str: ...


class UserRepository(Protocol):
    """Contract for user persistence - implemented by shell.

    create() must convert a uniqueness violation into
    Failure(FailureTag.INVALID, {"email": [message]}) instead of raising.
    """
    async def create(self, fields: dict) -> Outcome[Any, FieldErrors]: ...
