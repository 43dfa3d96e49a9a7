"""
Logging setup tests.
"""

from __future__ import annotations

import json
import logging
from io import StringIO

from tally.config import StoreConfig
from tally.log import setup_logging, get_logger


def _tally_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if getattr(h, "_tally", False)]


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_json_records_carry_extra(self):
        stream = StringIO()
        setup_logging(StoreConfig(log_format="json"), stream=stream, force=True)

        logging.getLogger("tally.test").info(
            "Added %dx %s to cart", 2, "Cheese", extra={"item": "Cheese", "quantity": 2}
        )

        payload = json.loads(stream.getvalue().splitlines()[-1])
        assert payload["message"] == "Added 2x Cheese to cart"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "tally.test"
        assert payload["item"] == "Cheese"
        assert payload["quantity"] == 2
        assert "timestamp" in payload

    def test_text_format(self):
        stream = StringIO()
        setup_logging(StoreConfig(log_level="WARNING"), stream=stream, force=True)

        log = logging.getLogger("tally.test")
        log.info("hidden")
        log.warning("shown")

        output = stream.getvalue()
        assert "hidden" not in output
        assert "WARNING [tally.test] shown" in output

    def test_configures_once(self):
        setup_logging(StoreConfig(), stream=StringIO(), force=True)
        setup_logging(StoreConfig(log_format="json"), stream=StringIO())
        assert len(_tally_handlers()) == 1

    def test_force_replaces_handler(self):
        setup_logging(StoreConfig(), stream=StringIO(), force=True)
        setup_logging(StoreConfig(), stream=StringIO(), force=True)
        assert len(_tally_handlers()) == 1

    def test_get_logger(self, monkeypatch):
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("TALLY_SHIPPING_FEE", raising=False)
        log = get_logger("tally.test")
        assert log.name == "tally.test"
        assert len(_tally_handlers()) == 1
