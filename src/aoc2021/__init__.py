"""
Advent of Code 2021 Solvers

Deterministic, receipts-first solvers for the day 1-3 puzzles:
sonar depth trends, submarine navigation, and binary diagnostics.
"""

__version__ = "0.1.0"

from .solvers import (
    measure_depth_increase,
    measure_depth_increase_sliding,
    measure_position,
    measure_position_with_aim,
    calculate_power_consumption,
    calculate_life_support_rating
)

__all__ = [
    "measure_depth_increase",
    "measure_depth_increase_sliding",
    "measure_position",
    "measure_position_with_aim",
    "calculate_power_consumption",
    "calculate_life_support_rating",
]
