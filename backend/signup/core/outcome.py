"""Outcome - two-variant result type threaded through the sign-up pipeline.

Invariants:
    - An Outcome is exactly one of Success(value) or Failure(tag, detail)
    - Both variants are frozen: an Outcome is never mutated after construction
    - Variant-specific accessors on the wrong variant raise InvalidStateError

Design Decisions:
    - Frozen dataclasses over a single class with flags: isinstance() narrows
      the union for type checkers and structural `match` statements
    - Failure carries (tag, detail) so the matcher can route on the tag
      without inspecting the detail payload
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from signup.core.errors import InvalidStateError

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """A successful step result carrying the next payload."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap_success(self) -> T:
        return self.value

    def failure_tag(self) -> Any:
        raise InvalidStateError("failure_tag() called on a Success outcome")

    def failure_detail(self) -> Any:
        raise InvalidStateError("failure_detail() called on a Success outcome")


@dataclass(frozen=True, slots=True)
class Failure(Generic[E]):
    """A tagged failure: `tag` names the category, `detail` carries its data."""

    tag: Any
    detail: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def unwrap_success(self) -> Any:
        raise InvalidStateError(
            f"unwrap_success() called on a Failure outcome (tag={self.tag!r})",
        )

    def failure_tag(self) -> Any:
        return self.tag

    def failure_detail(self) -> E:
        return self.detail


Outcome = Success[T] | Failure[E]


def is_outcome(value: object) -> bool:
    """True when value is a Success or Failure instance."""
    return isinstance(value, (Success, Failure))
