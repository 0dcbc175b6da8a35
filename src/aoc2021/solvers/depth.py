"""
Depth-Trend Counter (day 1)

Counts how often a sonar measurement, or the sum of a sliding window of
measurements, is strictly larger than the one before it.

The first value has no predecessor and is never counted.
"""

from collections import deque
from typing import Iterable, Iterator, List, Optional

from ..core.registry import param_registry


def count_increases(values: Iterable[int]) -> int:
    """
    Count strictly-increasing adjacent transitions.

    `previous` starts absent, so the first value is never an increase
    regardless of its magnitude (negative inputs included).
    """
    increase_count = 0
    previous: Optional[int] = None

    for value in values:
        if previous is not None and value > previous:
            increase_count += 1
        previous = value

    return increase_count


def window_sums(values: Iterable[int], size: int) -> Iterator[int]:
    """
    Yield the sum of every consecutive window of exactly `size` values.

    Nothing is yielded until `size` values have been seen.
    """
    if size < 1:
        raise ValueError(f"Window size must be positive, got {size}")

    window = deque(maxlen=size)
    for value in values:
        window.append(value)
        if len(window) == size:
            yield sum(window)


def measure_depth_increase(measurements: List[int]) -> int:
    """
    Counts the number of times depth increases.

    Example:
        >>> measure_depth_increase([199, 200, 208, 210, 200, 207, 240, 269, 260, 263])
        7
    """
    return count_increases(measurements)


def measure_depth_increase_sliding(measurements: List[int]) -> int:
    """
    Counts the number of depth increases within a 3-measurement sliding window.

    Inputs shorter than the window produce no windows and therefore 0.

    Example:
        >>> measure_depth_increase_sliding([199, 200, 208, 210, 200, 207, 240, 269, 260, 263])
        5
    """
    size = param_registry()["window_size"]
    return count_increases(window_sums(measurements, size))
