"""
Expiry resolution — relative spec → absolute instant.

Grammar: ``['-'] [sign] digits unit`` where unit is ``d`` (days), ``h`` (hours)
or ``m`` (months, counted as 30 days). A leading ``-`` puts the instant
in the past; a signed amount flips direction again, so ``"--5d"`` lands
five days ahead.

Resolution never fails: a malformed spec is logged and treated as
"never expires", an unknown unit is logged and read as days.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta

from tally._types import Result, Ok, Error, Option, Some, Nothing, utcnow
from tally.errors import InvalidExpirySpecError

logger = logging.getLogger(__name__)

_AMOUNT = re.compile(r"[+-]?[0-9]+")

_UNITS: dict[str, timedelta] = {
    "d": timedelta(days=1),
    "h": timedelta(hours=1),
    "m": timedelta(days=30),
}

_FALLBACK_UNIT = timedelta(days=1)

# ═══════════════════════════════════════════════════════════════════════════════
# Parsed Spec
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ExpirySpec:
    amount: int
    unit: str
    past: bool = False

    @property
    def unit_known(self) -> bool:
        return self.unit in _UNITS

    @property
    def duration(self) -> timedelta:
        return _UNITS.get(self.unit, _FALLBACK_UNIT) * self.amount

    def apply(self, now: datetime) -> datetime:
        return now - self.duration if self.past else now + self.duration


# ═══════════════════════════════════════════════════════════════════════════════
# parse() / resolve()
# ═══════════════════════════════════════════════════════════════════════════════


def parse(spec: str) -> Result[ExpirySpec, InvalidExpirySpecError]:
    """
    Parse a non-empty relative expiry spec.

    The last character is always taken as the unit; everything between
    the optional past marker and the unit must be an integer, optionally
    signed.

    Example:
        parse("15d")   → Ok(ExpirySpec(15, "d"))
        parse("-2d")   → Ok(ExpirySpec(2, "d", past=True))
        parse("3w")    → Ok(ExpirySpec(3, "w"))  # unknown unit, read as days
        parse("--5d")  → Ok(ExpirySpec(-5, "d", past=True))  # five days ahead
        parse("xd")    → Error(InvalidExpirySpecError(...))
    """
    past = spec.startswith("-")
    body = spec[1:] if past else spec

    if not body:
        return Error(InvalidExpirySpecError(spec, "missing amount and unit"))

    unit = body[-1]
    amount = body[:-1]
    if not _AMOUNT.fullmatch(amount):
        return Error(InvalidExpirySpecError(spec, f"amount {amount!r} is not an integer"))

    return Ok(ExpirySpec(amount=int(amount), unit=unit, past=past))


def resolve(spec: str | None, now: datetime | None = None) -> Option[datetime]:
    """
    Resolve a relative spec into an absolute instant.

    Returns Nothing() for an absent/empty spec and for any spec that
    cannot be parsed; those are non-expiring.
    """
    if not spec:
        return Nothing()

    match parse(spec):
        case Error(err):
            logger.warning("%s; treating as non-expiring", err, extra={"spec": spec})
            return Nothing()
        case Ok(parsed):
            if not parsed.unit_known:
                logger.warning(
                    "Unknown unit: %s. Using days.", parsed.unit, extra={"spec": spec}
                )
            try:
                return Some(parsed.apply(now or utcnow()))
            except OverflowError:
                logger.warning(
                    "Expiry %r is out of range; treating as non-expiring", spec,
                    extra={"spec": spec},
                )
                return Nothing()


# ═══════════════════════════════════════════════════════════════════════════════
# is_expired()
# ═══════════════════════════════════════════════════════════════════════════════


def is_expired(instant: datetime | None, now: datetime | None = None) -> bool:
    """True iff ``now`` is strictly after ``instant``. No instant → never."""
    if instant is None:
        return False
    return (now or utcnow()) > instant


__all__ = ("ExpirySpec", "parse", "resolve", "is_expired")
