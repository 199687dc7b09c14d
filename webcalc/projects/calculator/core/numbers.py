"""
Number <-> display text helpers.

Results are shown the way a browser prints numbers: shortest round-trip
digits, no trailing ".0", exponent form only for very large or very small
magnitudes.
"""
import math
from decimal import Decimal

from webcalc.projects.calculator.core.constants import PRECISION

# Decimal point positions outside (EXPONENT_LOW, EXPONENT_HIGH] switch to exponent form
EXPONENT_LOW = -6
EXPONENT_HIGH = 21


def to_precision(value: float, digits: int = PRECISION) -> float:
    """Round value to `digits` significant digits. Infinity and NaN pass through."""
    if not math.isfinite(value):
        return value
    return float(format(value, f".{digits}g"))


def _shortest_digits(value: float) -> tuple[str, int]:
    """
    Shortest digit string that round-trips `value` (positive, finite).
    Returns (digits, point) where value == 0.<digits> * 10**point.
    """
    _, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    return digits, exponent + len(digits)


def format_number(value: float) -> str:
    """Convert a float to display text: 14.0 -> "14", 1e-7 -> "1e-7", -0.0 -> "0"."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    digits, point = _shortest_digits(abs(value))
    count = len(digits)

    if count <= point <= EXPONENT_HIGH:
        return sign + digits + "0" * (point - count)
    if 0 < point <= EXPONENT_HIGH:
        return sign + digits[:point] + "." + digits[point:]
    if EXPONENT_LOW < point <= 0:
        return sign + "0." + "0" * -point + digits

    exponent = point - 1
    exponent_text = f"e{'+' if exponent >= 0 else '-'}{abs(exponent)}"
    mantissa = digits if count == 1 else digits[0] + "." + digits[1:]
    return sign + mantissa + exponent_text


def parse_number(text: str) -> float:
    """Parse a numeric literal as typed into the buffer ("5.", ".5", "12.25")."""
    return float(text)
