"""
Flat-rate shipping.

The fee is charged once per checkout when at least one shippable unit is
present; weight only feeds the human-readable notice.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from tally._types import Money
from tally.cart import CartLine
from tally.config import DEFAULT_SHIPPING_FEE
from tally.shipping._types import ShippableUnit, ShipmentGroup, ShipmentNotice


def expand_units(lines: Iterable[CartLine]) -> list[ShippableUnit]:
    """One unit per quantity of every line whose item ships."""
    units: list[ShippableUnit] = []
    for line in lines:
        item = line.item
        if item.requires_shipping():
            units.extend(ShippableUnit(item.name, item.weight) for _ in range(line.quantity))  # type: ignore[union-attr]
    return units


class ShippingCalculator:
    """
    Computes the shipping fee and the shipment notice.

    Example:
        calc = ShippingCalculator(fee=30.0)
        calc.compute_fee(units)    # 30.0, or 0.0 if nothing ships
        calc.build_notice(units)   # grouped by name
    """

    def __init__(self, fee: Money = DEFAULT_SHIPPING_FEE) -> None:
        if fee < 0:
            raise ValueError(f"Shipping fee must be non-negative, got {fee}")
        self.fee = fee

    def compute_fee(self, units: Sequence[ShippableUnit]) -> Money:
        return self.fee if units else 0.0

    def build_notice(self, units: Iterable[ShippableUnit]) -> ShipmentNotice:
        """Group by name in first-seen order; unit weight from the first unit."""
        counts: dict[str, int] = {}
        weights: dict[str, float] = {}
        for unit in units:
            counts[unit.name] = counts.get(unit.name, 0) + 1
            weights.setdefault(unit.name, unit.weight)

        return ShipmentNotice(
            groups=tuple(
                ShipmentGroup(name=name, count=count, unit_weight=weights[name])
                for name, count in counts.items()
            )
        )


__all__ = ("ShippingCalculator", "expand_units")
