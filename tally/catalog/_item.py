"""
Catalog items — shippable and digital.

Items are mutable (stock changes at checkout) and compare by identity,
so a cart can key on them safely.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, Self

from tally._types import Money, Kilograms, Some
from tally.catalog._expiry import resolve, is_expired

# ═══════════════════════════════════════════════════════════════════════════════
# Shared Fields
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(eq=False)
class _ItemBase:
    name: str
    unit_price: Money
    available_quantity: int
    expires_at: datetime | None = field(default=None, kw_only=True)

    SHIPS: ClassVar[bool] = False

    def __post_init__(self) -> None:
        if self.unit_price < 0:
            raise ValueError(f"{self.name}: unit_price must be non-negative")
        if self.available_quantity < 0:
            raise ValueError(f"{self.name}: available_quantity must be non-negative")
        if self.expires_at is not None and self.expires_at.utcoffset() is None:
            raise ValueError(f"{self.name}: expires_at must be timezone-aware")

    def requires_shipping(self) -> bool:
        return self.SHIPS

    def is_expired(self, now: datetime | None = None) -> bool:
        return is_expired(self.expires_at, now)

    def reduce_quantity(self, qty: int) -> None:
        """Deduct sold units. No bounds check; the caller validates first."""
        self.available_quantity -= qty

    def restock(self, qty: int) -> None:
        """Return units, e.g. when a settlement is rolled back."""
        self.available_quantity += qty


def _expiry_instant(expiry: str | None, now: datetime | None) -> datetime | None:
    match resolve(expiry, now):
        case Some(instant):
            return instant
        case _:
            return None


# ═══════════════════════════════════════════════════════════════════════════════
# Variants
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(eq=False)
class ShippableItem(_ItemBase):
    """Physical item; contributes weight to the shipment."""

    weight: Kilograms

    SHIPS: ClassVar[bool] = True

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.weight < 0:
            raise ValueError(f"{self.name}: weight must be non-negative")

    @classmethod
    def create(
        cls,
        name: str,
        price: Money,
        quantity: int,
        weight: Kilograms,
        expiry: str | None = None,
        *,
        now: datetime | None = None,
    ) -> Self:
        """
        Build from a relative expiry spec.

        Example:
            cheese = ShippableItem.create("Cheese", 100, 10, 0.2, "15d")
        """
        return cls(name, price, quantity, weight, expires_at=_expiry_instant(expiry, now))


@dataclass(eq=False)
class DigitalItem(_ItemBase):
    """Delivered electronically; never shipped."""

    @classmethod
    def create(
        cls,
        name: str,
        price: Money,
        quantity: int,
        expiry: str | None = None,
        *,
        now: datetime | None = None,
    ) -> Self:
        return cls(name, price, quantity, expires_at=_expiry_instant(expiry, now))


type Item = ShippableItem | DigitalItem


__all__ = ("Item", "ShippableItem", "DigitalItem")
