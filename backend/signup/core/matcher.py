"""Outcome Matcher - routes an Outcome to the handler registered for its variant.

Invariants:
    - Success outcomes always go to the single success handler with the unwrapped value
    - Failure outcomes go to the FIRST failure case (registration order) whose tag
      filter is empty or contains the failure tag; the handler receives the detail
    - A Failure with no matching case raises UnhandledOutcomeError (wiring bug)
    - The matcher performs no side effects; handlers own them

Design Decisions:
    - Empty tag filter is a wildcard: on_failure(handler=...) catches every tag,
      so a catch-all can follow more specific cases
    - Tags stored as a tuple and compared with ==, so str-Enum tags and their plain
      string values match each other
    - OutcomeHandlers is a frozen configuration object built once per call site;
      with_failure() returns a copy instead of mutating
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from signup.core.errors import UnhandledOutcomeError
from signup.core.outcome import Failure, Outcome, Success

R = TypeVar("R")


@dataclass(frozen=True)
class FailureCase(Generic[R]):
    """Failure handler with an optional tag filter (empty = any tag)."""

    tags: tuple[Any, ...]
    handler: Callable[[Any], R]

    def matches(self, tag: Any) -> bool:
        if not self.tags:
            return True
        return any(tag == candidate for candidate in self.tags)


def on_failure(*tags: Any, handler: Callable[[Any], R]) -> FailureCase[R]:
    """Build a failure case; call with no tags for a wildcard."""
    return FailureCase(tags=tuple(tags), handler=handler)


@dataclass(frozen=True)
class OutcomeHandlers(Generic[R]):
    """Handler configuration: one success callback, ordered failure cases."""

    success: Callable[[Any], R]
    failure: tuple[FailureCase[R], ...] = ()

    def with_failure(self, *tags: Any, handler: Callable[[Any], R]) -> "OutcomeHandlers[R]":
        return OutcomeHandlers(
            success=self.success,
            failure=self.failure + (on_failure(*tags, handler=handler),),
        )


def dispatch(outcome: Outcome, handlers: OutcomeHandlers[R]) -> R:
    """Invoke the handler matching outcome and return its result.

    Raises:
        UnhandledOutcomeError: outcome is a Failure and no case matches its tag.
        TypeError: outcome is neither Success nor Failure.
    """
    if isinstance(outcome, Success):
        return handlers.success(outcome.unwrap_success())

    if isinstance(outcome, Failure):
        tag = outcome.failure_tag()
        for case in handlers.failure:
            if case.matches(tag):
                return case.handler(outcome.failure_detail())
        raise UnhandledOutcomeError(tag)

    raise TypeError(
        f"dispatch() expects Success or Failure, got {type(outcome).__name__}",
    )
