"""Outcome Matcher - verifies dispatch routing for success and tagged failures.

Tests:
    - Success goes only to the success handler with the unwrapped value
    - Failure goes only to the first case whose tag filter matches
    - Empty tag filter is a wildcard
    - No matching case raises UnhandledOutcomeError naming the tag
"""

import pytest

from signup.core.domain_types import FailureTag
from signup.core.errors import UnhandledOutcomeError
from signup.core.matcher import OutcomeHandlers, dispatch, on_failure
from signup.core.outcome import Failure, Success


@pytest.fixture
def calls():
    return []


def recorder(calls, name):
    def handler(value):
        calls.append((name, value))
        return name
    return handler


def test_success_invokes_only_success_handler(calls):
    handlers = OutcomeHandlers(
        success=recorder(calls, "success"),
        failure=(on_failure("invalid", handler=recorder(calls, "invalid")),),
    )

    assert dispatch(Success({"id": 7}), handlers) == "success"
    assert calls == [("success", {"id": 7})]


def test_tagged_failure_invokes_only_matching_handler(calls):
    detail = {"email": ["is missing"]}
    handlers = OutcomeHandlers(
        success=recorder(calls, "success"),
        failure=(
            on_failure("conflict", handler=recorder(calls, "conflict")),
            on_failure(FailureTag.INVALID, handler=recorder(calls, "invalid")),
        ),
    )

    assert dispatch(Failure(FailureTag.INVALID, detail), handlers) == "invalid"
    assert calls == [("invalid", detail)]


def test_enum_tag_matches_plain_string_filter(calls):
    handlers = OutcomeHandlers(success=recorder(calls, "success")).with_failure(
        "invalid", handler=recorder(calls, "invalid"),
    )
    dispatch(Failure(FailureTag.INVALID, "d"), handlers)
    assert calls == [("invalid", "d")]


def test_case_with_several_tags_matches_any_of_them(calls):
    handlers = OutcomeHandlers(
        success=recorder(calls, "success"),
        failure=(on_failure("invalid", "conflict", handler=recorder(calls, "either")),),
    )
    dispatch(Failure("conflict", 1), handlers)
    assert calls == [("either", 1)]


def test_empty_tag_filter_matches_any_tag(calls):
    handlers = OutcomeHandlers(
        success=recorder(calls, "success"),
        failure=(on_failure(handler=recorder(calls, "any")),),
    )
    dispatch(Failure("whatever", "d"), handlers)
    assert calls == [("any", "d")]


def test_first_matching_case_wins(calls):
    handlers = (
        OutcomeHandlers(success=recorder(calls, "success"))
        .with_failure(handler=recorder(calls, "wildcard"))
        .with_failure("invalid", handler=recorder(calls, "invalid"))
    )
    dispatch(Failure("invalid", "d"), handlers)
    assert calls == [("wildcard", "d")]


def test_specific_case_before_wildcard(calls):
    handlers = (
        OutcomeHandlers(success=recorder(calls, "success"))
        .with_failure("invalid", handler=recorder(calls, "invalid"))
        .with_failure(handler=recorder(calls, "wildcard"))
    )
    dispatch(Failure("invalid", 1), handlers)
    dispatch(Failure("timeout", 2), handlers)
    assert calls == [("invalid", 1), ("wildcard", 2)]


def test_unmatched_failure_raises_unhandled_outcome(calls):
    handlers = OutcomeHandlers(
        success=recorder(calls, "success"),
        failure=(on_failure("invalid", handler=recorder(calls, "invalid")),),
    )

    with pytest.raises(UnhandledOutcomeError) as exc:
        dispatch(Failure("conflict", {}), handlers)

    assert "conflict" in str(exc.value)
    assert exc.value.tag == "conflict"
    assert exc.value.context.failure_tag == "conflict"
    assert calls == []


def test_failure_without_any_cases_raises(calls):
    with pytest.raises(UnhandledOutcomeError):
        dispatch(Failure(FailureTag.INVALID, {}), OutcomeHandlers(success=recorder(calls, "s")))


def test_with_failure_does_not_mutate_original():
    base = OutcomeHandlers(success=lambda v: v)
    extended = base.with_failure("invalid", handler=lambda d: d)
    assert base.failure == ()
    assert len(extended.failure) == 1


def test_dispatch_rejects_non_outcome():
    with pytest.raises(TypeError):
        dispatch({"value": 1}, OutcomeHandlers(success=lambda v: v))
