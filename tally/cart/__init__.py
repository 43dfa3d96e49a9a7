"""
Cart — what the customer intends to buy.

    from tally.cart import Cart

    cart = Cart()
    cart.add(cheese, 2)
    cart.subtotal()
"""

from __future__ import annotations

from tally.cart._cart import Cart, CartLine, AddError

__all__ = ("Cart", "CartLine", "AddError")
