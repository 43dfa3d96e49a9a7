"""
Customer account.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from tally._types import Money

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Customer:
    name: str
    balance: Money

    def __post_init__(self) -> None:
        if self.balance < 0:
            raise ValueError(f"{self.name}: balance must be non-negative")

    def can_afford(self, amount: Money) -> bool:
        return self.balance >= amount

    def pay(self, amount: Money) -> bool:
        """Deduct ``amount`` iff the balance covers it. All or nothing."""
        if amount < 0:
            raise ValueError(f"Payment amount must be non-negative, got {amount}")
        if not self.can_afford(amount):
            return False
        self.balance -= amount
        return True

    def refund(self, amount: Money) -> None:
        """Credit ``amount`` back; only used to roll back a settlement."""
        if amount < 0:
            raise ValueError(f"Refund amount must be non-negative, got {amount}")
        self.balance += amount
        logger.info("Refunded %.0f to %s", amount, self.name, extra={"customer": self.name})


__all__ = ("Customer",)
