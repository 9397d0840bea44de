"""Convert sensor states to display strings."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any

from .const import PLACEHOLDER, UNIT_KILOWATT, UNIT_WATT

_ONE_DECIMAL = Decimal("0.1")
# Wide enough for the largest float written out in full
_CONTEXT = Context(prec=400)


def _to_number(value: Any) -> float | None:
    """Coerce a state value to a finite float, None when not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _fixed_one_decimal(number: float) -> str:
    # -0.0 prints as 0.0
    number = number or 0.0
    # Decimal(float) keeps the exact binary value, so only true ties round away from zero
    return str(Decimal(number).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP, context=_CONTEXT))


def format_power(value: Any) -> str:
    """Format a power reading in watts, switching to kW from 1000 W in magnitude up."""
    number = _to_number(value)
    if number is None:
        return PLACEHOLDER
    if abs(number) >= 1000:
        return f"{_fixed_one_decimal(number / 1000)} {UNIT_KILOWATT}"
    return f"{math.floor(number + 0.5)} {UNIT_WATT}"


def format_energy(value: Any) -> str:
    """Format an energy reading with one decimal, the unit is left to the caller."""
    number = _to_number(value)
    if number is None:
        return PLACEHOLDER
    return _fixed_one_decimal(number)
