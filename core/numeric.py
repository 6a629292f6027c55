"""Permissive numeric helpers shared by the calculator, composer and assembler.

Profile values arrive as strings straight from the questionnaire, so the
core never raises on bad numbers: anything unparseable becomes 0.
"""

import math
from typing import Any


def to_number(value: Any) -> float:
    """Coerce a form value to a float, returning 0.0 when it is not a number."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        text = str(value).strip()
        number = float(text) if text else 0.0
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def round_half_up(value: float, ndigits: int = 0):
    """Round halves towards positive infinity.

    Python's built-in `round` rounds halves to even, which shifts calorie and
    macro figures by one on exact .5 values. Returns an int when
    `ndigits` is 0, otherwise a float.
    """
    if ndigits == 0:
        return int(math.floor(value + 0.5))
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor
