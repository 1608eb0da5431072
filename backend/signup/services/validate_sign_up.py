"""Sign-up Validation Step - runs SignUpParams and converts violations into a Failure.

Invariants:
    - Returns Success(SignUpParams) or Failure(FailureTag.INVALID, FieldErrors)
    - FieldErrors lists every failing field, each with at least one localized message
    - Never raises for bad input; pydantic.ValidationError is fully consumed here

Design Decisions:
    - Error mapping keyed on pydantic error type, not message text: messages come
      from core/messages.py so they can be localized
    - None for a required string reads as "must be filled", not "must be a string"
    - Length limits are checked here so overlong input never reaches the database
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from signup.core.domain_types import FailureTag, FieldErrors, Locale
from signup.core.messages import MessageKey, translate
from signup.core.outcome import Failure, Outcome, Success
from signup.schemas.sign_up import SignUpParams

logger = logging.getLogger(__name__)

# Key used when the payload itself (not a field) is unusable
BASE_FIELD = "params"


class SignUpValidator:
    """ParamsValidator for the sign-up scheme."""

    def __init__(self, locale: Locale = Locale.EN):
        self._locale = locale

    def validate(self, raw_params: Any) -> Outcome[SignUpParams, FieldErrors]:
        if not isinstance(raw_params, Mapping):
            return Failure(
                FailureTag.INVALID,
                {BASE_FIELD: [translate(MessageKey.INVALID, self._locale)]},
            )
        try:
            params = SignUpParams.model_validate(dict(raw_params))
        except ValidationError as e:
            errors = self._field_errors(e)
            logger.debug(
                f"Sign-up validation failed for {sorted(errors)}",
                extra={"failure_tag": FailureTag.INVALID.value},
            )
            return Failure(FailureTag.INVALID, errors)
        return Success(params)

    def _field_errors(self, exc: ValidationError) -> FieldErrors:
        errors: FieldErrors = {}
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else BASE_FIELD
            message = self._message_for(error)
            messages = errors.setdefault(field, [])
            if message not in messages:
                messages.append(message)
        return errors

    def _message_for(self, error: Mapping[str, Any]) -> str:
        kind = error["type"]
        if kind == "missing":
            return translate(MessageKey.MISSING, self._locale)
        if kind == "string_type":
            key = MessageKey.NOT_FILLED if error.get("input") is None else MessageKey.NOT_STRING
            return translate(key, self._locale)
        if kind == "string_too_short":
            return translate(MessageKey.NOT_FILLED, self._locale)
        if kind == "string_too_long":
            limit = (error.get("ctx") or {}).get("max_length")
            return translate(MessageKey.TOO_LONG, self._locale, max=limit)
        if kind == "email_format":
            return translate(MessageKey.INVALID_EMAIL, self._locale)
        if kind == "confirmation":
            other = (error.get("ctx") or {}).get("other", "password")
            return translate(MessageKey.CONFIRMATION_MISMATCH, self._locale, other=other)
        return translate(MessageKey.INVALID, self._locale)
