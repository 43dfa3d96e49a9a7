from __future__ import annotations

import logging
from datetime import datetime, UTC

import pytest

import tally.log
from tally.account import Customer
from tally.cart import Cart
from tally.catalog import ShippableItem, DigitalItem
from tally.config import StoreConfig
from tally.shipping import ShippingCalculator

# Anchored to real time: items created relative to NOW must still be fresh
# when Cart.add falls back to the system clock.
NOW = datetime.now(UTC).replace(microsecond=0)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo any handler setup_logging attached during a test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in [h for h in root.handlers if getattr(h, "_tally", False)]:
        root.removeHandler(handler)
    root.setLevel(level)
    tally.log._configured = False


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def config() -> StoreConfig:
    return StoreConfig(shipping_fee=30.0)


@pytest.fixture
def calculator() -> ShippingCalculator:
    return ShippingCalculator(fee=30.0)


@pytest.fixture
def cheese(now: datetime) -> ShippableItem:
    return ShippableItem.create("Cheese", 100, 10, 0.2, "15d", now=now)


@pytest.fixture
def biscuits(now: datetime) -> ShippableItem:
    return ShippableItem.create("Biscuits", 150, 8, 0.7, "30d", now=now)


@pytest.fixture
def tv() -> ShippableItem:
    return ShippableItem("TV", 5000, 5, 15.0)


@pytest.fixture
def mobile() -> ShippableItem:
    return ShippableItem("Mobile", 3000, 3, 0.5)


@pytest.fixture
def scratch_card() -> DigitalItem:
    return DigitalItem("Mobile Scratch Card", 50, 100)


@pytest.fixture
def customer() -> Customer:
    return Customer("John", 500)


@pytest.fixture
def cart() -> Cart:
    return Cart()
