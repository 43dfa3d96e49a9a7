"""
Checkout — validate, price, ship, settle.

    from tally.checkout import checkout

    match checkout(customer, cart):
        case Ok(receipt):
            print("\\n".join(render_receipt(receipt)))
        case Error(rejection):
            print(rejection)
"""

from __future__ import annotations

from datetime import datetime

from tally._types import Result, utcnow
from tally.account import Customer
from tally.cart import Cart
from tally.config import StoreConfig
from tally.shipping import ShippingCalculator
from tally.checkout._types import CheckoutStage, Rejection, Receipt, ReceiptLine
from tally.checkout._render import render_receipt, RECEIPT_HEADER, RULE
from tally.checkout._orchestrator import CheckoutOrchestrator


def checkout(
    customer: Customer,
    cart: Cart,
    *,
    config: StoreConfig | None = None,
    now: datetime | None = None,
) -> Result[Receipt, Rejection]:
    """
    One-shot checkout with a calculator built from config.

    Without ``config`` the defaults apply; the environment is read once at
    the entry point (``StoreConfig.from_env()``), never per checkout.
    ``now`` pins the clock for expiry checks; defaults to the current time.
    """
    cfg = config or StoreConfig()
    orchestrator = CheckoutOrchestrator(
        ShippingCalculator(cfg.shipping_fee),
        clock=(lambda: now) if now is not None else utcnow,
    )
    return orchestrator.run(customer, cart)


__all__ = (
    "checkout",
    "CheckoutOrchestrator",
    "CheckoutStage",
    "Rejection",
    "Receipt",
    "ReceiptLine",
    "render_receipt",
    "RECEIPT_HEADER",
    "RULE",
)
