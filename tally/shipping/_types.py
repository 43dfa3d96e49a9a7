"""
Shipping types.
"""

from __future__ import annotations

from dataclasses import dataclass

from tally._types import Kilograms


@dataclass(frozen=True, slots=True)
class ShippableUnit:
    """One physical unit headed for the parcel."""

    name: str
    weight: Kilograms


@dataclass(frozen=True, slots=True)
class ShipmentGroup:
    """All units sharing a name."""

    name: str
    count: int
    unit_weight: Kilograms

    @property
    def total_weight_kg(self) -> Kilograms:
        return self.unit_weight * self.count

    @property
    def total_weight_grams(self) -> float:
        return self.total_weight_kg * 1000


@dataclass(frozen=True, slots=True)
class ShipmentNotice:
    groups: tuple[ShipmentGroup, ...]

    @property
    def total_weight_kg(self) -> Kilograms:
        return sum((g.total_weight_kg for g in self.groups), 0.0)

    @property
    def unit_count(self) -> int:
        return sum(g.count for g in self.groups)


__all__ = ("ShippableUnit", "ShipmentGroup", "ShipmentNotice")
