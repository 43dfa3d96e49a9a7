"""
Saga — all-or-nothing multi-step changes with compensation.

    from tally import saga as S

    seq = S.sequence(S.step(action, compensate), S.step(action2, compensate2))
    result = S.run_sequence(seq)
"""

from __future__ import annotations

from tally.saga._types import (
    Action,
    CompensatorWithValue,
    SagaStep,
    SagaResult,
    SagaError,
    Sequence,
)
from tally.saga._step import step, sequence
from tally.saga._run import run_sequence
from tally.saga import policy

__all__ = (
    "Action",
    "CompensatorWithValue",
    "SagaStep",
    "SagaResult",
    "SagaError",
    "Sequence",
    "step",
    "sequence",
    "run_sequence",
    "policy",
)
