"""
Core Component: Parameter Registry

Frozen constants for deterministic puzzle solving.
All global parameters (window width, tie-break bit, direction words,
resource layout, etc.) are defined here with exact values.

No randomness, no environment leakage, no optionals.
"""


def param_registry() -> dict:
    """
    Returns a frozen mapping of all global constants used by the solvers.

    Keys and values are JSON-serializable primitives or lists/tuples.
    This registry is hashed into every section receipt to prove parametric consistency.

    Returns:
        dict: Frozen parameter mapping with exact keys and values.

    Raises:
        RegistryError: If any required key is missing (internal consistency check).
    """
    registry = {
        # Depth trend: width of the sliding window (day 1, part 2)
        "window_size": 3,

        # Navigation: recognised direction words, in declaration order
        "directions": ["forward", "up", "down"],

        # Diagnostics: bit alphabet and tie-break (count(1) >= count(0) -> '1')
        "bit_alphabet": ["0", "1"],
        "majority_tie_bit": "1",

        # Resource layout
        "resources_dirname": "resources",
        "resource_template": "day_{day}_input.txt",

        # Output line format
        "label_template": "Day {day} - Part {part}",

        # Puzzle ids, in run order
        "puzzle_ids": [
            "day1-part1", "day1-part2",
            "day2-part1", "day2-part2",
            "day3-part1", "day3-part2",
        ],

        # Hashing
        "hash_algo": "BLAKE3",
        "text_encoding": "utf-8",
    }

    # Consistency check: ensure all required keys are present
    required_keys = {
        "window_size", "directions", "bit_alphabet", "majority_tie_bit",
        "resources_dirname", "resource_template", "label_template",
        "puzzle_ids", "hash_algo", "text_encoding"
    }

    actual_keys = set(registry.keys())
    if actual_keys != required_keys:
        missing = required_keys - actual_keys
        extra = actual_keys - required_keys
        raise RegistryError(
            f"param_registry() key mismatch. Missing: {missing}, Extra: {extra}"
        )

    return registry


class RegistryError(Exception):
    """Raised when param_registry() has missing or unexpected keys."""
    pass
