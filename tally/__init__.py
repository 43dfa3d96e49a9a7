"""
tally — in-memory retail checkout.

    from tally import catalog as K    # Items and expiry
    from tally import shipping as Sh  # Flat-rate shipping
    from tally import saga as S       # Compensating settlement
    from tally.cart import Cart
    from tally.account import Customer
    from tally.checkout import checkout
"""

from tally import catalog
from tally import cart
from tally import shipping
from tally import account
from tally import saga
from tally import checkout
from tally import errors
from tally._types import (
    Result,
    Ok,
    Error,
    Option,
    Some,
    Nothing,
    Money,
    Kilograms,
)

__version__ = "0.1.0"

__all__ = (
    "catalog",
    "cart",
    "shipping",
    "account",
    "saga",
    "checkout",
    "errors",
    "Result",
    "Ok",
    "Error",
    "Option",
    "Some",
    "Nothing",
    "Money",
    "Kilograms",
)
