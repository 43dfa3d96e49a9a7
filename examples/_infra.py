"""Shared helpers for examples."""

from __future__ import annotations

from datetime import datetime

from tally._types import Ok, Error
from tally.cart import Cart
from tally.catalog import Item


def banner(title: str) -> None:
    print(f"\n=== {title} ===")


def add_or_report(cart: Cart, item: Item, quantity: int, now: datetime | None = None) -> bool:
    """Add to cart, printing the outcome. Returns False on failure."""
    match cart.add(item, quantity, now):
        case Ok(_):
            print(f"Added {quantity}x {item.name} to cart")
            return True
        case Error(e):
            print(f"Error: {e}")
            return False
