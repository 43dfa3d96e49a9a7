"""
Checkout types.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from tally._types import Money
from tally.errors import CheckoutError
from tally.shipping import ShipmentNotice


class CheckoutStage(Enum):
    """
    Checkout lifecycle.

        VALIDATING → PRICING → AUTHORIZING → SHIPPING → SETTLING → DONE
             ↓                      ↓                        ↓
          REJECTED              REJECTED                 REJECTED (rolled back)

    ``Rejection.stage`` keeps the stage the flow stopped at; the run itself
    always ends in DONE or REJECTED.
    """

    VALIDATING = auto()
    PRICING = auto()
    AUTHORIZING = auto()
    SHIPPING = auto()
    SETTLING = auto()
    DONE = auto()
    REJECTED = auto()


@dataclass(frozen=True, slots=True)
class Rejection:
    """Why a checkout stopped, and where. Nothing was changed."""

    stage: CheckoutStage
    error: CheckoutError

    @property
    def code(self) -> str:
        return self.error.code

    def __str__(self) -> str:
        return f"Error: {self.error}"


@dataclass(frozen=True, slots=True)
class ReceiptLine:
    name: str
    quantity: int
    unit_price: Money
    line_total: Money


@dataclass(frozen=True, slots=True)
class Receipt:
    customer: str
    lines: tuple[ReceiptLine, ...]
    subtotal: Money
    shipping_fee: Money
    total: Money
    balance_after: Money
    notice: ShipmentNotice | None = None


__all__ = ("CheckoutStage", "Rejection", "ReceiptLine", "Receipt")
