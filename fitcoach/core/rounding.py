"""
Integer rounding used for every displayed nutrition number.

Python's built-in round() is banker's rounding (round(2.5) == 2); the
calorie and macro targets round half away from zero instead.
"""
import math


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))
