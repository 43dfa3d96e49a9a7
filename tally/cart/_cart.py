"""
Cart — identity-keyed item → quantity mapping.

Adding is a soft reservation: stock is checked but never decremented.
Stock only moves at checkout settlement.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime

from tally._types import Result, Ok, Error, Money
from tally.catalog import Item
from tally.errors import ExpiredItemError, InsufficientStockError, InvalidQuantityError

logger = logging.getLogger(__name__)

type AddError = InvalidQuantityError | ExpiredItemError | InsufficientStockError


@dataclass(frozen=True, slots=True)
class CartLine:
    item: Item
    quantity: int

    @property
    def line_total(self) -> Money:
        return self.item.unit_price * self.quantity


class Cart:
    """
    Shopping cart.

    Example:
        cart = Cart()
        match cart.add(cheese, 2):
            case Ok(qty):
                ...
            case Error(e):
                print(e)
    """

    def __init__(self) -> None:
        self._items: dict[Item, int] = {}

    def add(self, item: Item, quantity: int, now: datetime | None = None) -> Result[int, AddError]:
        """
        Add ``quantity`` units of ``item``.

        Checked in order: positive quantity, not expired, enough stock.
        Stock is compared per call against the item's current quantity,
        not against what is already in the cart.

        Returns the line's new quantity. A failed add changes nothing.
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            return Error(InvalidQuantityError(item.name, quantity))

        if item.is_expired(now):
            return Error(ExpiredItemError(item.name))

        if quantity > item.available_quantity:
            return Error(InsufficientStockError(item.name, item.available_quantity, quantity))

        new_qty = self._items.get(item, 0) + quantity
        self._items[item] = new_qty
        logger.info(
            "Added %dx %s to cart", quantity, item.name,
            extra={"item": item.name, "quantity": quantity},
        )
        return Ok(new_qty)

    def subtotal(self) -> Money:
        return sum((line.line_total for line in self.lines()), 0.0)

    def lines(self) -> list[CartLine]:
        """Lines in first-added order."""
        return [CartLine(item, qty) for item, qty in self._items.items()]

    def quantity_of(self, item: Item) -> int:
        return self._items.get(item, 0)

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[CartLine]:
        return iter(self.lines())

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        inner = ", ".join(f"{qty}x {item.name}" for item, qty in self._items.items())
        return f"Cart({inner})"


__all__ = ("Cart", "CartLine", "AddError")
