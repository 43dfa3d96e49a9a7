"""
Errors — typed failure values.

Carried inside ``Error(...)`` by every fallible operation. They derive
from ``Exception`` so a caller that prefers raising can ``raise`` them
as-is, but nothing in tally raises them for a business outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

# ═══════════════════════════════════════════════════════════════════════════════
# Base
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class CheckoutError(Exception):
    """Base for every cart / checkout failure."""

    code: ClassVar[str] = "CHECKOUT_ERROR"

    @property
    def message(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return self.code


# ═══════════════════════════════════════════════════════════════════════════════
# Cart / Validation
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class EmptyCartError(CheckoutError):
    code: ClassVar[str] = "EMPTY_CART"

    def __str__(self) -> str:
        return "Cart is empty"


@dataclass(frozen=True, slots=True)
class ExpiredItemError(CheckoutError):
    item_name: str

    code: ClassVar[str] = "EXPIRED_ITEM"

    def __str__(self) -> str:
        return f"{self.item_name} is expired"


@dataclass(frozen=True, slots=True)
class InsufficientStockError(CheckoutError):
    item_name: str
    available: int
    requested: int

    code: ClassVar[str] = "INSUFFICIENT_STOCK"

    def __str__(self) -> str:
        return (
            f"Not enough stock for {self.item_name}. "
            f"Available: {self.available}, Requested: {self.requested}"
        )


@dataclass(frozen=True, slots=True)
class InvalidQuantityError(CheckoutError):
    item_name: str
    requested: int

    code: ClassVar[str] = "INVALID_QUANTITY"

    def __str__(self) -> str:
        return f"Quantity for {self.item_name} must be a positive integer, got {self.requested!r}"


# ═══════════════════════════════════════════════════════════════════════════════
# Payment
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class InsufficientFundsError(CheckoutError):
    required: float
    available: float

    code: ClassVar[str] = "INSUFFICIENT_FUNDS"

    def __str__(self) -> str:
        return (
            f"Customer's balance is insufficient. "
            f"Required: {self.required:.0f}, Available: {self.available:.0f}"
        )


@dataclass(frozen=True, slots=True)
class PaymentInvariantError(CheckoutError):
    """Payment refused after authorization passed. Should never happen."""

    amount: float
    balance: float

    code: ClassVar[str] = "PAYMENT_INVARIANT"

    def __str__(self) -> str:
        return f"Payment of {self.amount:.0f} refused with balance {self.balance:.0f}"


# ═══════════════════════════════════════════════════════════════════════════════
# Expiry
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class InvalidExpirySpecError(CheckoutError):
    """Unparseable relative expiry. Logged and degraded to "no expiry"."""

    spec: str
    reason: str

    code: ClassVar[str] = "INVALID_EXPIRY"

    def __str__(self) -> str:
        return f"Invalid expiry format: {self.spec!r} ({self.reason})"


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "CheckoutError",
    "EmptyCartError",
    "ExpiredItemError",
    "InsufficientStockError",
    "InvalidQuantityError",
    "InsufficientFundsError",
    "PaymentInvariantError",
    "InvalidExpirySpecError",
)
