"""Rounding and clamping shared by the 0-100 scores."""
from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round x.5 up (12.5 → 13), unlike Python's banker's rounding."""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))
