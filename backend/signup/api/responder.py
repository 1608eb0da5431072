"""Responder - renders pipeline outcomes as HTTP responses through the outcome matcher.

Invariants:
    - Success -> `status_code` with the serialized value under the "data" root key
    - Failure(invalid) -> 422 with UnprocessableEntityError's structured body
    - Any other failure tag -> UnhandledOutcomeError, rendered as 500 by the
      global error handler

Design Decisions:
    - Serializer injected by the route: the responder knows the envelope,
      routes know the resource shape
    - fastapi.encoders.jsonable_encoder as fallback so UUID/datetime values
      serialize without a schema
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from signup.core.domain_types import FailureTag, FieldErrors
from signup.core.errors import UnprocessableEntityError
from signup.core.matcher import OutcomeHandlers, dispatch
from signup.core.outcome import Outcome

logger = logging.getLogger(__name__)

DATA_ROOT = "data"


def default_serializer(value: Any) -> Any:
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json")
    return jsonable_encoder(value)


def respond_with(
    outcome: Outcome,
    status_code: int = status.HTTP_200_OK,
    serializer: Callable[[Any], Any] | None = None,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    """Render outcome: success under the "data" key, invalid as 422."""
    serialize = serializer or default_serializer

    def render_success(value: Any) -> JSONResponse:
        return JSONResponse(
            status_code=status_code,
            content={DATA_ROOT: serialize(value)},
            headers=dict(headers) if headers else None,
        )

    def render_invalid(details: FieldErrors) -> JSONResponse:
        error = UnprocessableEntityError(details)
        logger.info(
            f"Unprocessable entity: {sorted(details)}",
            extra={"error_code": error.code, "failure_tag": FailureTag.INVALID.value},
        )
        return JSONResponse(
            status_code=error.http_status,
            content=error.to_response(),
        )

    handlers = OutcomeHandlers(success=render_success).with_failure(
        FailureTag.INVALID, handler=render_invalid,
    )
    return dispatch(outcome, handlers)
