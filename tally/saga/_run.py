"""
Saga execution with automatic rollback.
"""

from __future__ import annotations

import logging

from tally._types import Result, Ok, Error
from tally.saga._types import (
    SagaStep,
    SagaResult,
    SagaError,
    Sequence,
    CompensatorWithValue,
)
from tally.saga.policy import (
    AllOnFailurePolicy,
    RetryPolicy,
    SkipPolicy,
    CompensationPolicy,
)

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Recorded Compensator
# ═══════════════════════════════════════════════════════════════════════════════

type RecordedCompensator[T] = tuple[T, CompensatorWithValue[T]]

# ═══════════════════════════════════════════════════════════════════════════════
# run_step() — Execute single step
# ═══════════════════════════════════════════════════════════════════════════════


def run_step[T, E](
    step: SagaStep[T, E],
    compensators: list[RecordedCompensator[T]],
) -> Result[T, E]:
    """Execute single step, recording compensator on success."""
    result = step.action()
    match result:
        case Ok(value):
            if step.compensate is not None:
                compensators.append((value, step.compensate))
            return Ok(value)
        case Error(e):
            return Error(e)


# ═══════════════════════════════════════════════════════════════════════════════
# run_compensators() — Rollback
# ═══════════════════════════════════════════════════════════════════════════════


def run_compensators[T](
    compensators: list[RecordedCompensator[T]],
    policy: CompensationPolicy = AllOnFailurePolicy(),
) -> tuple[int, int]:
    """Run compensators in reverse. Returns (run, failed)."""
    if isinstance(policy, SkipPolicy):
        return 0, 0

    attempts = policy.times if isinstance(policy, RetryPolicy) else 1
    comp_run = 0
    comp_failed = 0

    for value, comp in reversed(compensators):
        for attempt in range(1, attempts + 1):
            try:
                comp(value)
            except Exception:
                logger.exception(
                    "Compensator %s failed (attempt %d/%d)",
                    getattr(comp, "__qualname__", repr(comp)), attempt, attempts,
                )
                continue
            comp_run += 1
            break
        else:
            comp_failed += 1

    return comp_run, comp_failed


def _saga_error[E](
    error: E,
    step_failed: int,
    comp_run: int,
    comp_failed: int,
) -> Error[SagaError[E]]:
    return Error(SagaError(
        error=error,
        step_failed=step_failed,
        compensators_run=comp_run,
        compensators_failed=comp_failed,
        rollback_complete=comp_failed == 0,
    ))


# ═══════════════════════════════════════════════════════════════════════════════
# run_sequence() — Execute Sequence
# ═══════════════════════════════════════════════════════════════════════════════


def run_sequence[T, E](
    seq: Sequence[T, E],
    policy: CompensationPolicy = AllOnFailurePolicy(),
) -> Result[SagaResult[tuple[T, ...]], SagaError[E]]:
    """
    Execute steps in order, stopping at the first failure.

    All must succeed. On failure, every completed step is compensated,
    newest first.

    Example:
        from tally import saga as S

        match S.run_sequence(S.sequence(S.step(charge, refund))):
            case Ok(r):
                print(f"Success: {r.value}")
            case Error(e):
                print(f"Failed at step {e.step_failed}")
    """
    compensators: list[RecordedCompensator[T]] = []
    values: list[T] = []

    for index, s in enumerate(seq.steps, start=1):
        match run_step(s, compensators):
            case Ok(value):
                values.append(value)
            case Error(e):
                comp_run, comp_failed = run_compensators(compensators, policy)
                return _saga_error(e, index, comp_run, comp_failed)

    return Ok(SagaResult(
        value=tuple(values),
        steps_executed=len(seq.steps),
        compensators_recorded=len(compensators),
    ))


__all__ = ("run_sequence", "run_step", "run_compensators")
