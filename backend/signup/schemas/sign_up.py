"""Sign-up Scheme - field rules for registration parameters.

Invariants:
    - All five fields are required, must be strings (no coercion) and non-empty
    - first_name, last_name and email fit their String(MAX_FIELD_LENGTH) columns
    - email matches EMAIL_PATTERN: one "@", a dotted domain, no empty labels
    - password_confirmation equals password; only checked when password is valid
    - Unknown keys are ignored, never stored

Design Decisions:
    - strict=True: 1234 is "not a string", not "1234"
    - Custom error types (email_format, confirmation) so the validator can map
      each rule to a localized message without parsing pydantic's English text
"""

import re

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

EMAIL_PATTERN = re.compile(r"\A[^@]+@([^@.]+\.)+[^@.]+\Z")

# Width of the users.first_name, last_name and email columns
MAX_FIELD_LENGTH = 255


class SignUpParams(BaseModel):
    """Validated sign-up request."""
    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    first_name: str = Field(min_length=1, max_length=MAX_FIELD_LENGTH)
    last_name: str = Field(min_length=1, max_length=MAX_FIELD_LENGTH)
    email: str = Field(min_length=1, max_length=MAX_FIELD_LENGTH)
    password: str = Field(min_length=1)
    password_confirmation: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def check_email_format(cls, v: str) -> str:
        if not EMAIL_PATTERN.match(v):
            raise PydanticCustomError("email_format", "is in invalid format")
        return v

    @field_validator("password_confirmation")
    @classmethod
    def check_matches_password(cls, v: str, info: ValidationInfo) -> str:
        password = info.data.get("password")
        if password is not None and v != password:
            raise PydanticCustomError(
                "confirmation", "must be equal to {other}", {"other": "password"},
            )
        return v
