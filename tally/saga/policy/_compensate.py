"""
Compensation policies.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AllOnFailurePolicy:
    """Compensate every completed step once, newest first."""
    pass

def all_on_failure() -> AllOnFailurePolicy:
    """Compensate all steps on failure."""
    return AllOnFailurePolicy()


@dataclass(frozen=True, slots=True)
class RetryPolicy:
    """Re-invoke a failing compensator up to ``times`` attempts in total."""
    times: int

    def __post_init__(self) -> None:
        if self.times < 1:
            raise ValueError("RetryPolicy.times must be >= 1")

def retry(times: int = 3) -> RetryPolicy:
    """Retry compensators on failure."""
    return RetryPolicy(times)


@dataclass(frozen=True, slots=True)
class SkipPolicy:
    """Skip compensation entirely."""
    pass

def skip() -> SkipPolicy:
    """No compensation."""
    return SkipPolicy()


type CompensationPolicy = AllOnFailurePolicy | RetryPolicy | SkipPolicy


__all__ = (
    "AllOnFailurePolicy",
    "all_on_failure",
    "RetryPolicy",
    "retry",
    "SkipPolicy",
    "skip",
    "CompensationPolicy",
)
