"""
Shipping — flat fee plus a weight summary.

    from tally import shipping as Sh

    units = Sh.expand_units(cart.lines())
    calc = Sh.ShippingCalculator(fee=30.0)
    fee = calc.compute_fee(units)
    print("\\n".join(Sh.render_notice(calc.build_notice(units))))
"""

from __future__ import annotations

from tally.shipping._types import ShippableUnit, ShipmentGroup, ShipmentNotice
from tally.shipping._calculator import ShippingCalculator, expand_units
from tally.shipping._render import render_notice, NOTICE_HEADER

__all__ = (
    "ShippableUnit",
    "ShipmentGroup",
    "ShipmentNotice",
    "ShippingCalculator",
    "expand_units",
    "render_notice",
    "NOTICE_HEADER",
)
