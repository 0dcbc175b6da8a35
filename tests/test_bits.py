"""
Tests for the bit-string kernel.

Verifies:
  - majority bit per position on the sample set
  - ties resolve to '1' (and the minority to '0')
  - index-set filtering by prefix
"""

from aoc2021.kernel import (
    majority_bit,
    minority_bit,
    complement_bit,
    bits_to_number,
    retain_prefix
)

SAMPLE = [
    "00100", "11110", "10110", "10111", "10101", "01111",
    "00111", "11100", "10000", "11001", "00010", "01010",
]


def test_majority_bit_sample():
    """Most common bit at each position of the sample set."""
    assert majority_bit(SAMPLE, 0) == "1"
    assert majority_bit(SAMPLE, 1) == "0"
    assert majority_bit(SAMPLE, 2) == "1"
    assert majority_bit(SAMPLE, 3) == "1"
    assert majority_bit(SAMPLE, 4) == "0"

    print("✓ Majority bits match sample")


def test_majority_bit_tie_favours_one():
    assert majority_bit(["0", "1"], 0) == "1"
    assert majority_bit(["10", "01"], 1) == "1"
    assert majority_bit(["0011", "1100", "0101", "1010"], 2) == "1"

    assert minority_bit(["0", "1"], 0) == "0"


def test_majority_bit_over_subset():
    # Candidates 3 and 5 ("10111", "01111") both have '1' at position 4
    assert majority_bit(SAMPLE, 4, [3, 5]) == "1"
    # Candidates 0 and 8 ("00100", "10000") tie at position 0
    assert majority_bit(SAMPLE, 0, [0, 8]) == "1"
    assert minority_bit(SAMPLE, 0, [0, 8]) == "0"


def test_complement_bit():
    assert complement_bit("1") == "0"
    assert complement_bit("0") == "1"


def test_bits_to_number():
    assert bits_to_number(["1", "0", "1", "1", "0"]) == 22
    assert bits_to_number("01001") == 9
    assert bits_to_number("0") == 0


def test_retain_prefix_preserves_order():
    indices = list(range(len(SAMPLE)))
    kept = retain_prefix(SAMPLE, indices, "10")

    assert kept == [2, 3, 4, 8]
    assert [SAMPLE[i] for i in kept] == ["10110", "10111", "10101", "10000"]

    assert retain_prefix(SAMPLE, kept, "101") == [2, 3, 4]
    assert retain_prefix(SAMPLE, kept, "") == kept
