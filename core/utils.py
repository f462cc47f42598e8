import math
from decimal import Decimal
from typing import Any, Optional


def round_half_up(value: float, digits: int = 0) -> float:
    """Round half away from zero for non-negative values (2.5 -> 3, 0.05 -> 0.1).

    Python's built-in round() uses banker's rounding, which would turn a 72.5
    score into 72. Every rounded number the engine reports (score, skill
    compatibility, distance) goes through this helper so the rule is the same
    everywhere.

    Non-finite values are returned unchanged.

    Args:
        value: Number to round
        digits: Decimal places to keep

    Returns:
        Rounded value as float
    """
    if not math.isfinite(value):
        return value
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def parse_float(value: Optional[Any]) -> Optional[float]:
    """
    Parse a raw query value into a finite float.

    Returns None for missing, empty, non-numeric, NaN or infinite input,
    so callers can treat the parameter as absent.
    """
    if value is None:
        return None

    if isinstance(value, Decimal):
        value = float(value)

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None

    try:
        result = float(value)
    except (ValueError, TypeError):
        return None

    if not math.isfinite(result):
        return None
    return result


def parse_positive_int(value: Optional[Any], default: int) -> int:
    """
    Parse a raw query value into a positive int, falling back to default.

    Zero, negative and non-numeric values all give the default.
    "2.7" is accepted and truncated to 2.
    """
    if value is None or isinstance(value, bool):
        return default

    if isinstance(value, int):
        return value if value > 0 else default

    number = parse_float(value)
    if number is None:
        return default

    result = int(number)
    return result if result > 0 else default
