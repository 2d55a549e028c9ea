"""
Monetary codec: service-side prices are floats, stored prices are exact NUMERIC(10, 2) strings.
Rounding is half away from zero at the third fractional digit.
"""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from app.core.exceptions import EncodingError

CENTS = Decimal("0.01")
# NUMERIC(10, 2): at most eight integer digits
MAX_STORABLE = Decimal("99999999.99")


def to_storage(price: float) -> str:
    """Format a price with exactly two fractional digits, e.g. 3.25 -> "3.25", 19.999 -> "20.00"."""
    if isinstance(price, bool) or not isinstance(price, (int, float, Decimal)):
        raise EncodingError(f"price must be a number, got {type(price).__name__}")
    if isinstance(price, float) and not math.isfinite(price):
        raise EncodingError(f"price must be finite, got {price!r}")
    # repr() gives the shortest decimal that reads back as the same float,
    # so 2.675 rounds as written rather than as 2.67499999...
    exact = price if isinstance(price, Decimal) else Decimal(repr(price))
    if not exact.is_finite():
        raise EncodingError(f"price must be finite, got {price!r}")
    if exact < 0:
        raise EncodingError(f"price must not be negative, got {price!r}")
    try:
        stored = exact.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise EncodingError(f"price out of range: {price!r}") from exc
    if stored > MAX_STORABLE:
        raise EncodingError(f"price exceeds {MAX_STORABLE}: {price!r}")
    return str(stored)


def from_storage(raw: Union[str, Decimal]) -> float:
    """Parse a stored decimal back into a float; lossless for anything to_storage produced."""
    if isinstance(raw, Decimal):
        exact = raw
    elif isinstance(raw, str):
        try:
            exact = Decimal(raw.strip())
        except InvalidOperation as exc:
            raise EncodingError(f"not a decimal value: {raw!r}") from exc
    else:
        raise EncodingError(f"stored price must be a decimal string, got {type(raw).__name__}")
    if not exact.is_finite():
        raise EncodingError(f"stored price must be finite, got {raw!r}")
    # float(str) is correctly rounded, so "3.25" gives exactly the float literal 3.25
    return float(str(exact))
