"""Users - registration endpoint.

Invariants:
    - POST body is passed to the interaction unvalidated; field rules live in
      the pipeline so violations render as 422 field errors, not FastAPI's 400
    - 201 on success with the user under "data"; password_hash never serialized
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status

from signup.api.dependencies import get_sign_up_interaction
from signup.api.responder import respond_with
from signup.schemas.user import UserResponse
from signup.services.sign_up_interaction import SignUpInteraction

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/users", tags=["users"])


def serialize_user(user: Any) -> dict:
    return UserResponse.model_validate(user).model_dump(mode="json")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    params: dict[str, Any] = Body(...),
    interaction: SignUpInteraction = Depends(get_sign_up_interaction),
):
    """Sign up a new user."""
    outcome = await interaction.run(params)
    return respond_with(
        outcome, status_code=status.HTTP_201_CREATED, serializer=serialize_user,
    )
