"""
Saga types — core data structures.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from tally._types import Result

# ═══════════════════════════════════════════════════════════════════════════════
# Action / Compensator
# ═══════════════════════════════════════════════════════════════════════════════

type Action[T, E] = Callable[[], Result[T, E]]
"""Deferred operation. Nothing happens until the runner calls it."""

type CompensatorWithValue[T] = Callable[[T], None]
"""Compensation function that receives the action result and undoes it."""

# ═══════════════════════════════════════════════════════════════════════════════
# SagaStep — Single Step with Compensation
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class SagaStep[T, E]:
    """
    A single saga step: action + compensator.

    When action succeeds, compensator is recorded.
    If later step fails, compensators run in reverse.
    """

    action: Action[T, E]
    compensate: CompensatorWithValue[T] | None


# ═══════════════════════════════════════════════════════════════════════════════
# Sequence — All Must Succeed
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Sequence[T, E]:
    """Independent steps run in order — all must succeed."""

    steps: tuple[SagaStep[T, E], ...]


# ═══════════════════════════════════════════════════════════════════════════════
# Result Types
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class SagaResult[T]:
    """Successful saga result with metadata."""

    value: T
    steps_executed: int
    compensators_recorded: int


@dataclass(frozen=True, slots=True)
class SagaError[E]:
    """Saga error with rollback status."""

    error: E
    step_failed: int
    compensators_run: int
    compensators_failed: int
    rollback_complete: bool


__all__ = (
    "Action",
    "CompensatorWithValue",
    "SagaStep",
    "Sequence",
    "SagaResult",
    "SagaError",
)
