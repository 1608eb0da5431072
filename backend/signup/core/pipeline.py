"""Pipeline Executor - runs steps left to right, short-circuiting on Failure.

Invariants:
    - Steps run strictly in order; each receives the previous step's Success value
    - The first Failure is returned as-is and no later step is invoked
    - An empty pipeline returns Success(payload) unchanged
    - Exceptions raised by a step propagate untouched (never converted, never retried)
    - A step returning anything but Success/Failure raises StepContractError

Design Decisions:
    - Steps may be plain functions or coroutine functions: awaitable results are
      awaited before inspection, so IO-bound collaborators (repository) and pure
      ones (validation) share one signature
    - Pipeline is a frozen dataclass holding a tuple: the step sequence is fixed
      at construction and cannot change during a run
"""

import inspect
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Any, Union

from signup.core.errors import StepContractError
from signup.core.outcome import Failure, Outcome, Success, is_outcome

logger = logging.getLogger(__name__)

Step = Callable[[Any], Union[Outcome, Awaitable[Outcome]]]


def step_name(step: Step) -> str:
    """Human-readable step name for logs and errors."""
    return getattr(step, "__name__", None) or type(step).__name__


async def run_pipeline(steps: Sequence[Step], payload: Any) -> Outcome:
    """Thread payload through steps, returning the first Failure or the final Success."""
    current = payload
    for step in steps:
        name = step_name(step)
        logger.debug(f"Running step {name}", extra={"step": name})

        result = step(current)
        if inspect.isawaitable(result):
            result = await result

        if not is_outcome(result):
            raise StepContractError(name, result)

        if isinstance(result, Failure):
            logger.info(
                f"Pipeline stopped at step {name}",
                extra={"step": name, "failure_tag": str(result.tag)},
            )
            return result

        current = result.value

    return Success(current)


@dataclass(frozen=True)
class Pipeline:
    """Ordered, immutable sequence of steps."""

    steps: tuple[Step, ...] = ()

    @classmethod
    def of(cls, *steps: Step) -> "Pipeline":
        return cls(steps=tuple(steps))

    async def run(self, payload: Any) -> Outcome:
        return await run_pipeline(self.steps, payload)
