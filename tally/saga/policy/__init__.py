"""
Saga execution policies.

Namespace: S.policy.*

Examples:
    S.run_sequence(saga, policy=S.policy.compensate.all_on_failure())
    S.run_sequence(saga, policy=S.policy.compensate.retry(times=2))
"""

from __future__ import annotations

from tally.saga.policy._compensate import (
    AllOnFailurePolicy,
    RetryPolicy,
    SkipPolicy,
    CompensationPolicy,
    all_on_failure,
    retry,
    skip,
)


# Namespace object
class compensate:
    """Compensation policies."""

    all_on_failure = staticmethod(all_on_failure)
    retry = staticmethod(retry)
    skip = staticmethod(skip)


__all__ = (
    "compensate",
    "AllOnFailurePolicy",
    "RetryPolicy",
    "SkipPolicy",
    "CompensationPolicy",
)
