"""Canonical decimal text for double-precision values."""

import math
from decimal import Decimal

# Plain notation is used for magnitudes in [1e-3, 1e7); scientific otherwise.
_PLAIN_LOWER = 1e-3
_PLAIN_UPPER = 1e7


def canonical_text(value: float) -> str:
    """Render a float the way the classic double-to-string conversion does.

    Uses the shortest digit string that round-trips (Python's ``repr``) laid
    out in one of two shapes:

        6.0, -0.5, 0.001, 1234567.0      plain, at least one fractional digit
        1.0E7, 1.2345E-4, -2.5E10        scientific, one integer digit

    Non-finite values become ``NaN``, ``Infinity`` and ``-Infinity``.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "-0.0" if math.copysign(1.0, value) < 0 else "0.0"

    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0") or "0"
    # Position of the decimal point relative to the start of ``digits``
    point = len(digit_tuple) + exponent
    prefix = "-" if sign else ""

    magnitude = abs(value)
    if _PLAIN_LOWER <= magnitude < _PLAIN_UPPER:
        if point <= 0:
            return f"{prefix}0.{'0' * -point}{digits}"
        if point >= len(digits):
            return f"{prefix}{digits}{'0' * (point - len(digits))}.0"
        return f"{prefix}{digits[:point]}.{digits[point:]}"

    fraction = digits[1:] or "0"
    return f"{prefix}{digits[0]}.{fraction}E{point - 1}"
