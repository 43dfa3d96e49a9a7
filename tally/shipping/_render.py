"""
Console rendering of the shipment notice.
"""

from __future__ import annotations

from tally.shipping._types import ShipmentNotice

NOTICE_HEADER = "** Shipment notice **"


def render_notice(notice: ShipmentNotice) -> list[str]:
    lines = [NOTICE_HEADER]
    lines.extend(f"{g.count}x {g.name} {g.total_weight_grams:.0f}g" for g in notice.groups)
    lines.append(f"Total package weight {notice.total_weight_kg:.1f}kg")
    return lines


__all__ = ("render_notice", "NOTICE_HEADER")
