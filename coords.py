import math
import re
from decimal import Decimal

# Plain decimal, optionally with an exponent: "40.7", "-.5", "1e-5"
DECIMAL_PATTERN = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$")


def parse_coordinate(raw: str) -> float:
    """Parse a path segment like "40.7128" into a float.

    Raises ValueError for anything that is not a finite decimal number.
    """
    if not DECIMAL_PATTERN.match(raw):
        raise ValueError(f"Coordinate is not a decimal number: {raw!r}")
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"Coordinate is not finite: {raw!r}")
    return value


def format_coordinate(value: float) -> str:
    # Fixed notation, shortest digits: 40.0 -> "40", 1e-05 -> "0.00001"
    value = float(value)
    if value == 0:
        return "0"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
