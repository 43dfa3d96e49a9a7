"""
Store configuration.

Values come from the environment so the demo and tests can override them
without touching code:

    TALLY_SHIPPING_FEE   flat shipping fee (default 30.0)
    LOG_LEVEL            root log level (default INFO)
    LOG_FORMAT           "text" or "json" (default text)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

type LogFormat = Literal["text", "json"]

DEFAULT_SHIPPING_FEE = 30.0


@dataclass(frozen=True, slots=True)
class StoreConfig:
    shipping_fee: float = DEFAULT_SHIPPING_FEE
    log_level: str = "INFO"
    log_format: LogFormat = "text"

    def __post_init__(self) -> None:
        if self.shipping_fee < 0:
            raise ValueError(f"shipping_fee must be non-negative, got {self.shipping_fee}")
        if self.log_format not in ("text", "json"):
            raise ValueError(f"log_format must be 'text' or 'json', got {self.log_format!r}")
        if self.log_level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> StoreConfig:
        env = os.environ if environ is None else environ

        raw_fee = env.get("TALLY_SHIPPING_FEE", str(DEFAULT_SHIPPING_FEE))
        try:
            fee = float(raw_fee)
        except ValueError:
            raise ValueError(f"TALLY_SHIPPING_FEE is not a number: {raw_fee!r}") from None

        fmt = env.get("LOG_FORMAT", "text").strip().lower()
        return cls(
            shipping_fee=fee,
            log_level=env.get("LOG_LEVEL", "INFO").strip().upper(),
            log_format=fmt,  # type: ignore[arg-type]
        )


__all__ = ("StoreConfig", "LogFormat", "DEFAULT_SHIPPING_FEE")
