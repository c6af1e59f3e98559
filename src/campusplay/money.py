"""Decimal helpers for monetary amounts.

Every rounding here is half-up, applied to the exact decimal value of the
input rather than to its binary float approximation.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from campusplay.errors import InvalidInput

Numeric = Union[Decimal, float, str, int]

CENT = Decimal("0.01")
UNIT = Decimal("1")
NAIRA_SIGN = "₦"

_NAIRA_NOISE = re.compile(r"[₦,\s]")


def to_decimal(value: Numeric) -> Decimal:
    """Convert a number to ``Decimal`` via its string form."""

    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise InvalidInput(f"{value!r} is not a monetary amount")
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise InvalidInput(f"{value!r} is not a monetary amount") from exc
    if not result.is_finite():
        raise InvalidInput(f"{value!r} is not a finite amount")
    return result


def round2(value: Numeric) -> Decimal:
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def round_whole(value: Numeric) -> int:
    return int(to_decimal(value).quantize(UNIT, rounding=ROUND_HALF_UP))


def format_naira(amount: Numeric) -> str:
    """Render ``1234.5`` as ``₦1,234.50``."""

    return f"{NAIRA_SIGN}{round2(amount):,.2f}"


def parse_naira(text: str) -> float:
    """Parse a naira string, returning 0.0 for anything unparseable."""

    cleaned = _NAIRA_NOISE.sub("", text or "")
    try:
        parsed = Decimal(cleaned)
    except (InvalidOperation, ValueError):
        return 0.0
    return float(parsed) if parsed.is_finite() else 0.0
