"""
StoreConfig tests.
"""

from __future__ import annotations

import pytest

from tally.config import StoreConfig, DEFAULT_SHIPPING_FEE


class TestStoreConfig:
    """Tests for defaults and validation."""

    def test_defaults(self):
        cfg = StoreConfig()
        assert cfg.shipping_fee == DEFAULT_SHIPPING_FEE == 30.0
        assert cfg.log_level == "INFO"
        assert cfg.log_format == "text"

    def test_rejects_negative_fee(self):
        with pytest.raises(ValueError):
            StoreConfig(shipping_fee=-5)

    def test_rejects_unknown_format(self):
        with pytest.raises(ValueError):
            StoreConfig(log_format="xml")  # type: ignore[arg-type]

    @pytest.mark.parametrize("level", ["BASIC_FORMAT", "verbose", "info", ""])
    def test_rejects_unknown_level(self, level):
        """Only logging level names are accepted, never other module attributes."""
        with pytest.raises(ValueError, match="log_level"):
            StoreConfig(log_level=level)

    @pytest.mark.parametrize("level", ["DEBUG", "WARN", "CRITICAL", "NOTSET"])
    def test_accepts_level_names(self, level):
        assert StoreConfig(log_level=level).log_level == level


class TestFromEnv:
    """Tests for StoreConfig.from_env()."""

    def test_empty_environment(self):
        assert StoreConfig.from_env({}) == StoreConfig()

    def test_reads_values(self):
        cfg = StoreConfig.from_env(
            {"TALLY_SHIPPING_FEE": "12.5", "LOG_LEVEL": " debug ", "LOG_FORMAT": "JSON"}
        )
        assert cfg == StoreConfig(shipping_fee=12.5, log_level="DEBUG", log_format="json")

    def test_malformed_fee(self):
        with pytest.raises(ValueError, match="TALLY_SHIPPING_FEE"):
            StoreConfig.from_env({"TALLY_SHIPPING_FEE": "thirty"})

    def test_negative_fee(self):
        with pytest.raises(ValueError):
            StoreConfig.from_env({"TALLY_SHIPPING_FEE": "-1"})

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="log_level"):
            StoreConfig.from_env({"LOG_LEVEL": "basic_format"})

    def test_process_environment(self, monkeypatch):
        monkeypatch.setenv("TALLY_SHIPPING_FEE", "0")
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert StoreConfig.from_env().shipping_fee == 0
