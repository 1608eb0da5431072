"""Dependency Wiring - builds interactions from explicit collaborators per request.

Invariants:
    - Every collaborator is constructed here from Settings and the request's
      DB session; nothing is looked up from a process-wide container
    - Locale resolved once per request and shared by validator and repository

Design Decisions:
    - FastAPI Depends as the injection mechanism: tests swap any layer with
      app.dependency_overrides
"""

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from signup.config import Settings, get_settings
from signup.core.domain_types import Locale
from signup.core.messages import resolve_locale
from signup.infrastructure.database import get_db
from signup.infrastructure.password_hasher import PasswordHasher
from signup.infrastructure.user_repository import SqlAlchemyUserRepository
from signup.services.sign_up_interaction import SignUpInteraction
from signup.services.validate_sign_up import SignUpValidator


def get_locale(
    accept_language: str | None = Header(None),
    settings: Settings = Depends(get_settings),
) -> Locale:
    return resolve_locale(accept_language, settings.default_locale)


def get_password_hasher(settings: Settings = Depends(get_settings)) -> PasswordHasher:
    return PasswordHasher(iterations=settings.password_hash_iterations)


def get_sign_up_interaction(
    db: AsyncSession = Depends(get_db),
    locale: Locale = Depends(get_locale),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> SignUpInteraction:
    return SignUpInteraction(
        validator=SignUpValidator(locale),
        hasher=hasher,
        repository=SqlAlchemyUserRepository(db, locale),
    )
