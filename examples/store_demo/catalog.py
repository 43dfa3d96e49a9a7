"""
Catalog — the sample products.

Built fresh per call so every scenario run starts from full stock.
"""

from dataclasses import dataclass
from datetime import datetime

from tally.catalog import ShippableItem, DigitalItem


@dataclass
class DemoCatalog:
    cheese: ShippableItem
    biscuits: ShippableItem
    tv: ShippableItem
    mobile: ShippableItem
    scratch_card: DigitalItem
    expired_cheese: ShippableItem

    def all(self) -> list[ShippableItem | DigitalItem]:
        return [
            self.cheese,
            self.biscuits,
            self.tv,
            self.mobile,
            self.scratch_card,
            self.expired_cheese,
        ]


def seed(now: datetime | None = None) -> DemoCatalog:
    return DemoCatalog(
        cheese=ShippableItem.create("Cheese", 100, 10, 0.2, "15d", now=now),
        biscuits=ShippableItem.create("Biscuits", 150, 8, 0.7, "30d", now=now),
        tv=ShippableItem.create("TV", 5000, 5, 15.0),
        mobile=ShippableItem.create("Mobile", 3000, 3, 0.5),
        scratch_card=DigitalItem.create("Mobile Scratch Card", 50, 100),
        expired_cheese=ShippableItem.create("Expired Cheese", 100, 5, 0.2, "-2d", now=now),
    )


__all__ = ("DemoCatalog", "seed")
