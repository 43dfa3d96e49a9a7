"""
Core types for tally.

Re-exports from kungfu + custom type aliases.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, UTC

# Re-export from kungfu
from kungfu import Result, Ok, Error, Option, Some, Nothing

# ═══════════════════════════════════════════════════════════════════════════════
# Units
# ═══════════════════════════════════════════════════════════════════════════════

type Money = float
"""Amount in the store's single currency."""

type Kilograms = float
"""Shipping weight."""

# ═══════════════════════════════════════════════════════════════════════════════
# Clock
# ═══════════════════════════════════════════════════════════════════════════════

type Clock = Callable[[], datetime]
"""Returns the current instant. Injected so expiry checks are testable."""


def utcnow() -> datetime:
    """Default clock: timezone-aware UTC now."""
    return datetime.now(UTC)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "Option",
    "Some",
    "Nothing",
    # Aliases
    "Money",
    "Kilograms",
    "Clock",
    "utcnow",
)
