"""
Logging setup.

Every module logs through ``logging.getLogger(__name__)``; this module only
decides where records go and how they look. Structured context passed via
``extra={...}`` ends up as top-level keys in JSON mode.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, UTC
from typing import TextIO

from tally.config import StoreConfig

_configured = False

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Attributes every LogRecord has; anything else came from ``extra``.
_RESERVED = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RESERVED and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def setup_logging(
    config: StoreConfig | None = None,
    *,
    stream: TextIO | None = None,
    force: bool = False,
) -> None:
    """Attach a single stream handler to the root logger (once)."""
    global _configured
    if _configured and not force:
        return

    cfg = config or StoreConfig.from_env()
    level = logging.getLevelNamesMapping()[cfg.log_level]

    root = logging.getLogger()
    root.setLevel(level)

    if force:
        for handler in [h for h in root.handlers if getattr(h, "_tally", False)]:
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(
        JsonFormatter() if cfg.log_format == "json" else logging.Formatter(TEXT_FORMAT)
    )
    handler._tally = True  # type: ignore[attr-defined]
    root.addHandler(handler)

    _configured = True


def get_logger(name: str | None = None) -> logging.Logger:
    setup_logging()
    return logging.getLogger(name)


__all__ = ("JsonFormatter", "setup_logging", "get_logger", "TEXT_FORMAT")
