"""Rounding helpers shared by the analyzers."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounded up."""
    return math.floor(value + 0.5)


def round_grams(value: float) -> float:
    """Round a quantity to two decimals, with halves rounded up."""
    return math.floor(value * 100 + 0.5) / 100
