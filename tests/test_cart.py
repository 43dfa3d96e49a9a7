"""
Cart tests: accumulation, soft reservation, rejection order.
"""

from __future__ import annotations

import logging
from datetime import timedelta

import pytest

from tally.cart import Cart
from tally.catalog import ShippableItem
from tally.errors import ExpiredItemError, InsufficientStockError, InvalidQuantityError

from tests._helpers import ok_value, err_value


class TestAdd:
    """Tests for Cart.add()."""

    def test_accumulates_per_item(self, cart, cheese):
        """Repeated adds of one item grow a single line."""
        assert ok_value(cart.add(cheese, 2)) == 2
        assert ok_value(cart.add(cheese, 1)) == 3
        assert len(cart) == 1
        assert cart.quantity_of(cheese) == 3

    def test_soft_reservation(self, cart, mobile):
        """Each add is checked against live stock, never against the cart."""
        assert ok_value(cart.add(mobile, 3)) == 3
        assert ok_value(cart.add(mobile, 3)) == 6
        assert mobile.available_quantity == 3

    def test_insufficient_stock(self, cart, mobile):
        err = err_value(cart.add(mobile, 5))
        assert err == InsufficientStockError("Mobile", 3, 5)
        assert str(err) == "Not enough stock for Mobile. Available: 3, Requested: 5"
        assert cart.is_empty()

    def test_expired_item(self, cart, now):
        item = ShippableItem.create("Expired Cheese", 100, 5, 0.2, "-2d", now=now)
        err = err_value(cart.add(item, 1, now))
        assert isinstance(err, ExpiredItemError)
        assert str(err) == "Expired Cheese is expired"
        assert item not in cart

    def test_expiry_checked_before_stock(self, cart, now):
        """Expired wins over an over-sized request."""
        item = ShippableItem("Old Milk", 10, 1, 1.0, expires_at=now - timedelta(hours=1))
        assert isinstance(err_value(cart.add(item, 50, now)), ExpiredItemError)

    @pytest.mark.parametrize("quantity", [0, -1, True, 1.5])
    def test_rejects_bad_quantity(self, cart, cheese, quantity):
        err = err_value(cart.add(cheese, quantity))
        assert isinstance(err, InvalidQuantityError)
        assert err.requested == quantity
        assert cart.is_empty()

    def test_failed_add_keeps_existing_line(self, cart, mobile):
        cart.add(mobile, 2)
        err_value(cart.add(mobile, 4))
        assert cart.quantity_of(mobile) == 2

    def test_logs_addition(self, cart, cheese, caplog):
        with caplog.at_level(logging.INFO, logger="tally.cart._cart"):
            cart.add(cheese, 2)
        assert "Added 2x Cheese to cart" in caplog.text


class TestContents:
    """Tests for cart inspection helpers."""

    def test_subtotal(self, cart, cheese, biscuits):
        cart.add(cheese, 2)
        cart.add(biscuits, 1)
        assert cart.subtotal() == 350

    def test_empty_subtotal(self, cart):
        assert cart.subtotal() == 0

    def test_lines_keep_insertion_order(self, cart, cheese, biscuits, scratch_card):
        cart.add(biscuits, 1)
        cart.add(scratch_card, 2)
        cart.add(cheese, 1)
        cart.add(biscuits, 1)
        assert [(line.item.name, line.quantity) for line in cart.lines()] == [
            ("Biscuits", 2),
            ("Mobile Scratch Card", 2),
            ("Cheese", 1),
        ]

    def test_line_total(self, cart, biscuits):
        cart.add(biscuits, 3)
        assert cart.lines()[0].line_total == 450

    def test_same_name_items_stay_separate(self, cart):
        """Lines key on item identity, not on name."""
        a = ShippableItem("Cheese", 100, 10, 0.2)
        b = ShippableItem("Cheese", 120, 10, 0.2)
        cart.add(a, 1)
        cart.add(b, 1)
        assert len(cart) == 2
        assert cart.subtotal() == 220

    def test_clear(self, cart, cheese):
        cart.add(cheese, 1)
        cart.clear()
        assert cart.is_empty()
        assert len(cart) == 0

    def test_repr(self, cart, cheese):
        cart.add(cheese, 2)
        assert repr(cart) == "Cart(2x Cheese)"
