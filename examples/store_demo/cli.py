"""
Scenario runner — the six sample checkouts.

┌──────────────────────────────────────────────────────────────────────┐
│  SCENARIO               CART                          OUTCOME         │
├──────────────────────────────────────────────────────────────────────┤
│  Normal Checkout        2 Cheese, 1 Biscuits, 1 Card  receipt         │
│  Mixed Products         2 Cheese, 1 TV, 1 Card        insufficient $  │
│  Empty Cart             —                             empty cart      │
│  Insufficient Balance   1 TV                          insufficient $  │
│  Out of Stock           5 Mobile (3 in stock)         add rejected    │
│  Expired Product        1 Expired Cheese              add rejected    │
└──────────────────────────────────────────────────────────────────────┘

Every scenario uses its own customer and cart but shares the catalog, so
stock sold in one scenario is gone for the next.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence
from datetime import datetime

from tally._types import Ok, Error, utcnow
from tally.account import Customer
from tally.cart import Cart
from tally.catalog import Item
from tally.checkout import checkout, render_receipt
from tally.config import StoreConfig
from tally.log import setup_logging
from tally.shipping import render_notice

from examples._infra import banner, add_or_report
from examples.store_demo.catalog import DemoCatalog, seed


type Scenario = tuple[str, str, float, Callable[[DemoCatalog], list[tuple[Item, int]]]]

SCENARIOS: tuple[Scenario, ...] = (
    ("Test Case 1: Normal Checkout", "John", 500,
     lambda c: [(c.cheese, 2), (c.biscuits, 1), (c.scratch_card, 1)]),
    ("Test Case 2: Mixed Products", "Alice", 1000,
     lambda c: [(c.cheese, 2), (c.tv, 1), (c.scratch_card, 1)]),
    ("Test Case 3: Empty Cart", "Bob", 500,
     lambda c: []),
    ("Test Case 4: Insufficient Balance", "Charlie", 100,
     lambda c: [(c.tv, 1)]),
    ("Test Case 5: Out of Stock", "Dave", 2000,
     lambda c: [(c.mobile, 5)]),
    ("Test Case 6: Expired Product", "Eve", 300,
     lambda c: [(c.expired_cheese, 1)]),
)


def run_scenario(
    scenario: Scenario,
    catalog: DemoCatalog,
    config: StoreConfig,
    now: datetime,
) -> None:
    title, name, balance, pick = scenario
    banner(title)

    customer = Customer(name, balance)
    cart = Cart()
    for item, qty in pick(catalog):
        if not add_or_report(cart, item, qty, now):
            # A failed add ends the scenario before checkout.
            return

    match checkout(customer, cart, config=config, now=now):
        case Ok(receipt):
            if receipt.notice is not None:
                print("\n".join(render_notice(receipt.notice)))
            print("\n".join(render_receipt(receipt)))
        case Error(rejection):
            print(rejection)


def run_all(config: StoreConfig | None = None, now: datetime | None = None) -> DemoCatalog:
    cfg = config or StoreConfig.from_env()
    at = now or utcnow()
    catalog = seed(at)
    for scenario in SCENARIOS:
        run_scenario(scenario, catalog, cfg, at)
    return catalog


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m examples.store_demo.main",
        description="Run the sample checkout scenarios.",
    )
    parser.add_argument("--shipping-fee", type=float, default=None, help="override TALLY_SHIPPING_FEE")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=sorted(logging.getLevelNamesMapping()),
        default=None,
        help="override LOG_LEVEL (default ERROR for the demo)",
    )
    parser.add_argument("--json-logs", action="store_true", help="emit logs as JSON")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    env = StoreConfig.from_env()
    cfg = StoreConfig(
        shipping_fee=env.shipping_fee if args.shipping_fee is None else args.shipping_fee,
        log_level=args.log_level or "ERROR",
        log_format="json" if args.json_logs else env.log_format,
    )
    setup_logging(cfg)
    run_all(cfg)
    return 0


__all__ = ("SCENARIOS", "run_scenario", "run_all", "build_parser", "main")
