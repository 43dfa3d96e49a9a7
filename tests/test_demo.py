"""
Demo harness tests: the six sample scenarios end to end.
"""

from __future__ import annotations

import pytest

from tally.config import StoreConfig

from examples.store_demo.cli import SCENARIOS, run_all, main


class TestDemo:
    """Tests for the store demo."""

    def test_scenario_titles(self):
        assert [s[0] for s in SCENARIOS] == [
            "Test Case 1: Normal Checkout",
            "Test Case 2: Mixed Products",
            "Test Case 3: Empty Cart",
            "Test Case 4: Insufficient Balance",
            "Test Case 5: Out of Stock",
            "Test Case 6: Expired Product",
        ]

    def test_output(self, capsys, now):
        run_all(StoreConfig(), now=now)
        out = capsys.readouterr().out

        for expected in (
            "=== Test Case 1: Normal Checkout ===",
            "Added 2x Cheese to cart",
            "2x Cheese 400g",
            "1x Biscuits 700g",
            "Total package weight 1.1kg",
            "1x Mobile Scratch Card 50",
            "Amount 430",
            "Customer balance after payment: 70",
            "Error: Customer's balance is insufficient. Required: 5280, Available: 1000",
            "Error: Cart is empty",
            "Error: Customer's balance is insufficient. Required: 5030, Available: 100",
            "Error: Not enough stock for Mobile. Available: 3, Requested: 5",
            "Error: Expired Cheese is expired",
        ):
            assert expected in out

    def test_stock_after_run(self, capsys, now):
        catalog = run_all(StoreConfig(), now=now)
        capsys.readouterr()

        assert catalog.cheese.available_quantity == 8
        assert catalog.biscuits.available_quantity == 7
        assert catalog.scratch_card.available_quantity == 99
        assert catalog.tv.available_quantity == 5
        assert catalog.mobile.available_quantity == 3
        assert catalog.expired_cheese.available_quantity == 5

    def test_main(self, capsys, monkeypatch):
        monkeypatch.delenv("TALLY_SHIPPING_FEE", raising=False)
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert main(["--shipping-fee", "0"]) == 0
        assert "Amount 400" in capsys.readouterr().out

    def test_main_rejects_unknown_level(self, capsys):
        with pytest.raises(SystemExit):
            main(["--log-level", "basic_format"])
        assert "invalid choice" in capsys.readouterr().err
