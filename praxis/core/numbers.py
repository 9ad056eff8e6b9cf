"""Small numeric helpers shared by the engine."""

import math


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round half away from zero for positives (2.5 → 3), unlike ``round``."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_to_increment(value: float, increment: float) -> float:
    """Round to the nearest multiple of ``increment`` (ties go up)."""
    if increment <= 0:
        return value
    return math.floor(value / increment + 0.5) * increment
