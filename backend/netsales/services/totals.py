# Overview: Sale total calculation over the four card-network amounts.

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

# Wire keys of the four payment-method amounts, in display order
AMOUNT_FIELDS = ("mastercardAmount", "madaAmount", "visaAmount", "gccAmount")

HALALA = Decimal("0.01")


def coerce_amount(value: Any) -> float:
    """
    Normalize a monetary amount.

    Numbers pass through, numeric strings are parsed; absent, blank,
    non-numeric and non-finite input becomes 0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        amount = float(value)
    elif isinstance(value, str):
        try:
            amount = float(value.strip())
        except ValueError:
            return 0.0
    else:
        return 0.0
    if not math.isfinite(amount):
        return 0.0
    return amount


def round_amount(value: Any) -> float:
    """Coerce an amount and round it half-up to halalas; this is the stored value."""
    return float(_to_halalas(value))


def _to_halalas(value: Any) -> Decimal:
    return Decimal(str(coerce_amount(value))).quantize(HALALA, rounding=ROUND_HALF_UP)


def calculate_total(mastercard: Any = 0, mada: Any = 0, visa: Any = 0, gcc: Any = 0) -> float:
    """Sum of the four amounts, each rounded to halalas first."""
    return float(sum((_to_halalas(v) for v in (mastercard, mada, visa, gcc)), Decimal("0")))


def total_for(entry: dict) -> float:
    """Total for a wire-form sale dict; any supplied 'total' is ignored."""
    return calculate_total(*(entry.get(key) for key in AMOUNT_FIELDS))
