"""Value types and coercion helpers shared across the domain.

The only validation the domain performs is basic numeric coercion:
user-entered prices and stock levels are turned into non-negative numbers,
and anything that does not parse falls back to zero instead of failing.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum

ZERO = Decimal("0")
CENT = Decimal("0.01")


class MovementType(Enum):
    """Direction of a stock movement."""

    IN = "IN"
    OUT = "OUT"

    @staticmethod
    def for_delta(delta: int) -> MovementType:
        return MovementType.IN if delta > 0 else MovementType.OUT


def _to_decimal(raw: object) -> Decimal | None:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError):
        return None
    if not value.is_finite():
        return None
    return value


def coerce_price(raw: object) -> Decimal:
    """Coerce *raw* to a non-negative Decimal price rounded to cents.

    Blank, unparseable, non-finite and negative inputs all become zero, as
    do prices the persisted document cannot store exactly as a JSON number.
    """
    value = _to_decimal(raw)
    if value is None or value < ZERO:
        return ZERO
    try:
        value = value.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return ZERO
    as_float = float(value)
    if not math.isfinite(as_float) or Decimal(str(as_float)) != value:
        return ZERO
    return value


def coerce_stock(raw: object) -> int:
    """Coerce *raw* to a non-negative whole stock level.

    Fractional values are truncated; anything invalid or negative is 0.
    """
    value = _to_decimal(raw)
    if value is None or value < ZERO:
        return 0
    return int(value)
