"""
Console rendering of the checkout receipt.
"""

from __future__ import annotations

from tally.checkout._types import Receipt

RECEIPT_HEADER = "** Checkout receipt **"
RULE = "----------------------"


def render_receipt(receipt: Receipt) -> list[str]:
    lines = [RECEIPT_HEADER]
    lines.extend(f"{line.quantity}x {line.name} {line.line_total:.0f}" for line in receipt.lines)
    lines += [
        RULE,
        f"Subtotal {receipt.subtotal:.0f}",
        f"Shipping {receipt.shipping_fee:.0f}",
        f"Amount {receipt.total:.0f}",
        f"Customer balance after payment: {receipt.balance_after:.0f}",
    ]
    return lines


__all__ = ("render_receipt", "RECEIPT_HEADER", "RULE")
