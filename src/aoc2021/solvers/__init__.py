"""
Puzzle Solvers

One module per day; every solver is a pure function from a parsed input
to an integer.
"""

from .depth import (
    count_increases,
    window_sums,
    measure_depth_increase,
    measure_depth_increase_sliding
)
from .navigation import (
    Position,
    track_position,
    track_position_with_aim,
    measure_position,
    measure_position_with_aim
)
from .diagnostics import (
    PowerReading,
    LifeSupportReading,
    read_power,
    read_life_support,
    calculate_power_consumption,
    calculate_life_support_rating
)

__all__ = [
    # Day 1
    "count_increases",
    "window_sums",
    "measure_depth_increase",
    "measure_depth_increase_sliding",

    # Day 2
    "Position",
    "track_position",
    "track_position_with_aim",
    "measure_position",
    "measure_position_with_aim",

    # Day 3
    "PowerReading",
    "LifeSupportReading",
    "read_power",
    "read_life_support",
    "calculate_power_consumption",
    "calculate_life_support_rating",
]
