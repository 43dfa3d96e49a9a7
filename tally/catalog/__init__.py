"""
Catalog — sellable items and expiry resolution.

    from tally import catalog as K

    cheese = K.ShippableItem.create("Cheese", 100, 10, 0.2, "15d")
    card = K.DigitalItem("Scratch Card", 50, 100)
    cheese.is_expired()
"""

from __future__ import annotations

from tally.catalog._expiry import ExpirySpec, parse, resolve, is_expired
from tally.catalog._item import Item, ShippableItem, DigitalItem

__all__ = (
    "ExpirySpec",
    "parse",
    "resolve",
    "is_expired",
    "Item",
    "ShippableItem",
    "DigitalItem",
)
