"""
Account — the paying customer.
"""

from __future__ import annotations

from tally.account._customer import Customer

__all__ = ("Customer",)
