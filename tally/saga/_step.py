"""
Saga step creation.
"""

from __future__ import annotations

from tally.saga._types import Action, SagaStep, Sequence, CompensatorWithValue

# ═══════════════════════════════════════════════════════════════════════════════
# step() — Primary Constructor
# ═══════════════════════════════════════════════════════════════════════════════


def step[T, E](
    action: Action[T, E],
    compensate: CompensatorWithValue[T] | None = None,
) -> SagaStep[T, E]:
    """
    Create a compensated saga step.

    Args:
        action: Zero-argument callable returning Result[T, E]
        compensate: Undo for the value the action produced

    Example:
        from tally import saga as S

        charge = S.step(
            action=lambda: Ok(total) if customer.pay(total) else Error(declined),
            compensate=customer.refund,
        )
    """
    return SagaStep(action=action, compensate=compensate)


# ═══════════════════════════════════════════════════════════════════════════════
# sequence() — All Must Succeed
# ═══════════════════════════════════════════════════════════════════════════════


def sequence[T, E](*steps: SagaStep[T, E]) -> Sequence[T, E]:
    """
    Run independent steps one after another; all must succeed.

    If any fails, the ones already done are compensated in reverse.

    Example:
        result = S.run_sequence(
            S.sequence(
                S.step(charge, refund),
                S.step(deduct_cheese, restock_cheese),
            )
        )
    """
    return Sequence(steps=steps)


__all__ = ("step", "sequence")
