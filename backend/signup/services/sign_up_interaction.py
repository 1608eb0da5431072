"""Sign-up Interaction - validate, hash the password, persist the user.

Invariants:
    - Steps run in fixed order: validate -> hash_password -> persist
    - A validation Failure stops the pipeline: nothing is hashed or written
    - The persisted record never contains the plaintext password or its confirmation
    - Collaborators arrive through the constructor; no global lookup

Design Decisions:
    - Steps are bound methods so tests can substitute any collaborator with a
      plain object satisfying the protocol
    - Hashing offloaded with asyncio.to_thread: PBKDF2 is CPU-bound and would
      otherwise block the event loop for the whole request
"""

import asyncio
import logging
from typing import Any

from signup.core.domain_types import FieldErrors
from signup.core.outcome import Outcome, Success
from signup.core.pipeline import Pipeline
from signup.core.repository_protocols import (
    ParamsValidator, SecretHasher, UserRepository,
)
from signup.schemas.sign_up import SignUpParams

logger = logging.getLogger(__name__)


class SignUpInteraction:
    """Registers a new user from raw request parameters."""

    def __init__(
        self,
        validator: ParamsValidator,
        hasher: SecretHasher,
        repository: UserRepository,
    ):
        self._validator = validator
        self._hasher = hasher
        self._repository = repository
        self.pipeline = Pipeline.of(self.validate, self.hash_password, self.persist)

    async def run(self, raw_params: Any) -> Outcome[Any, FieldErrors]:
        return await self.pipeline.run(raw_params)

    def validate(self, raw_params: Any) -> Outcome[SignUpParams, FieldErrors]:
        return self._validator.validate(raw_params)

    async def hash_password(self, params: SignUpParams) -> Outcome[dict, FieldErrors]:
        password_hash = await asyncio.to_thread(self._hasher.hash, params.password)
        return Success({
            "first_name": params.first_name,
            "last_name": params.last_name,
            "email": params.email,
            "password_hash": password_hash,
        })

    async def persist(self, fields: dict) -> Outcome[Any, FieldErrors]:
        return await self._repository.create(fields)
