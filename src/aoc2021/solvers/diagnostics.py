"""
Bit-Diagnostics Extractor (day 3)

Derives ratings from a set of equal-width bit-strings using per-position
majority bits (ties resolve to '1').

Power consumption:
  gamma   = majority bit at every position, read as binary
  epsilon = minority bit at every position, read as binary
  result  = gamma * epsilon

Life support rating:
  Two candidate subsets (oxygen, co2) start as the whole set. At each
  position, a subset that still has more than one member appends its
  majority (oxygen) or minority (co2) bit to its prefix and keeps only
  the strings starting with that prefix. The scan stops once both
  subsets are singletons.
  result = oxygen * co2
"""

from typing import List, TypedDict

from ..kernel.bits import (
    majority_bit,
    minority_bit,
    complement_bit,
    bits_to_number,
    retain_prefix
)


class PowerReading(TypedDict):
    gamma: int
    epsilon: int
    gamma_bits: str
    epsilon_bits: str


class LifeSupportReading(TypedDict):
    oxygen: int
    co2: int
    oxygen_bits: str
    co2_bits: str
    positions_scanned: int


def _width(diagnostics: List[str]) -> int:
    if not diagnostics:
        raise ValueError("Diagnostic set is empty")
    return len(diagnostics[0])


def read_power(diagnostics: List[str]) -> PowerReading:
    """
    Compose gamma and epsilon from the per-position majority bits.

    Raises:
        ValueError: If the diagnostic set is empty.
    """
    width = _width(diagnostics)

    gamma_bits = []
    epsilon_bits = []
    for position in range(width):
        bit = majority_bit(diagnostics, position)
        gamma_bits.append(bit)
        epsilon_bits.append(complement_bit(bit))

    return {
        "gamma": bits_to_number(gamma_bits),
        "epsilon": bits_to_number(epsilon_bits),
        "gamma_bits": "".join(gamma_bits),
        "epsilon_bits": "".join(epsilon_bits),
    }


def read_life_support(diagnostics: List[str]) -> LifeSupportReading:
    """
    Narrow oxygen and co2 candidates position by position.

    Candidates are index lists into `diagnostics`; nothing is copied.
    A subset is frozen as soon as it holds a single index.

    If the minority bit is absent from the co2 subset (every candidate
    shares the bit at this position) the bit that is present is kept,
    so a non-empty subset never becomes empty.

    Raises:
        ValueError: If the diagnostic set is empty.
    """
    width = _width(diagnostics)

    oxygen = list(range(len(diagnostics)))
    co2 = list(range(len(diagnostics)))
    oxygen_prefix = ""
    co2_prefix = ""
    positions_scanned = 0

    for position in range(width):
        if len(oxygen) == 1 and len(co2) == 1:
            break
        positions_scanned += 1

        if len(oxygen) != 1:
            oxygen_prefix += majority_bit(diagnostics, position, oxygen)
            oxygen = retain_prefix(diagnostics, oxygen, oxygen_prefix)

        if len(co2) != 1:
            bit = minority_bit(diagnostics, position, co2)
            kept = retain_prefix(diagnostics, co2, co2_prefix + bit)
            if not kept:
                bit = complement_bit(bit)
                kept = retain_prefix(diagnostics, co2, co2_prefix + bit)
            co2_prefix += bit
            co2 = kept

    # Duplicates can leave several identical strings; the first one stands for all.
    oxygen_bits = diagnostics[oxygen[0]]
    co2_bits = diagnostics[co2[0]]

    return {
        "oxygen": bits_to_number(oxygen_bits),
        "co2": bits_to_number(co2_bits),
        "oxygen_bits": oxygen_bits,
        "co2_bits": co2_bits,
        "positions_scanned": positions_scanned,
    }


def calculate_power_consumption(diagnostics: List[str]) -> int:
    """
    Gamma rate multiplied by epsilon rate.

    Example:
        >>> calculate_power_consumption(["00100", "11110", "10110", "10111", "10101", "01111",
        ...                              "00111", "11100", "10000", "11001", "00010", "01010"])
        198
    """
    reading = read_power(diagnostics)
    return reading["gamma"] * reading["epsilon"]


def calculate_life_support_rating(diagnostics: List[str]) -> int:
    """
    Oxygen generator rating multiplied by CO2 scrubber rating.

    Example:
        >>> calculate_life_support_rating(["00100", "11110", "10110", "10111", "10101", "01111",
        ...                                "00111", "11100", "10000", "11001", "00010", "01010"])
        230
    """
    reading = read_life_support(diagnostics)
    return reading["oxygen"] * reading["co2"]
