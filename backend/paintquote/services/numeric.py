"""
Numeric guard for untrusted input.

Every value that reaches a calculator passes through safe_number first, so a
NaN, an infinity or a stray string never propagates into a dollar amount.
"""

import math
from decimal import ROUND_HALF_UP, Context, Decimal

# Enough digits to quantize any finite float without InvalidOperation
_ROUNDING_CONTEXT = Context(prec=400)


def safe_number(value: object, fallback: float = 0.0) -> float:
    """Return value as a float when it is a finite real number, else fallback.

    Numeric strings are accepted ("12.5"). Booleans are not numbers here.
    Never raises.
    """
    if isinstance(value, bool) or value is None:
        return fallback
    if isinstance(value, (int, float, Decimal)):
        try:
            number = float(value)
        except OverflowError:
            return fallback
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return fallback
    else:
        return fallback
    return number if math.isfinite(number) else fallback


def non_negative(value: object, fallback: float = 0.0) -> float:
    """safe_number clamped at zero."""
    return max(0.0, safe_number(value, fallback))


def safe_count(value: object) -> int:
    """Whole, non-negative count (doors, windows, risers...)."""
    return int(non_negative(value))


def round_currency(value: object, places: int = 2) -> float:
    """Round half-up to `places` decimals. Idempotent."""
    number = safe_number(value)
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(repr(number)).quantize(
        quantum, rounding=ROUND_HALF_UP, context=_ROUNDING_CONTEXT
    )
    return float(rounded)


def round_cents(value: object) -> float:
    return round_currency(value, 2)


def round_whole(value: object) -> float:
    return round_currency(value, 0)
