"""
Bit-String Kernel

Pure operations over equal-width '0'/'1' strings.

Representation:
  - a diagnostic set is a list[str], every string the same width
  - a candidate subset is a list[int] of indices into that set
  - position 0 is the leftmost (most significant) character

Width consistency is a caller guarantee and is not re-validated here.
"""

from typing import List, Optional, Sequence

from ..core.registry import param_registry


def majority_bit(
    diagnostics: Sequence[str],
    position: int,
    indices: Optional[Sequence[int]] = None
) -> str:
    """
    Return the most common bit at a character position.

    Counts '1' and '0' at `position` across the strings selected by
    `indices` (all strings when None).

    Args:
        diagnostics: Diagnostic set.
        position: 0-based character position.
        indices: Optional candidate subset (indices into diagnostics).

    Returns:
        str: The bit seen more often; the registry tie bit ('1') on a tie.

    Invariant:
        Ties resolve to '1'.

    Example:
        >>> majority_bit(["10", "01"], 0)
        '1'
    """
    if indices is None:
        indices = range(len(diagnostics))

    ones = 0
    zeroes = 0
    for i in indices:
        bit = diagnostics[i][position]
        if bit == "1":
            ones += 1
        elif bit == "0":
            zeroes += 1

    if ones > zeroes:
        return "1"
    if zeroes > ones:
        return "0"
    return param_registry()["majority_tie_bit"]


def complement_bit(bit: str) -> str:
    """'1' -> '0', anything else -> '1'."""
    return "0" if bit == "1" else "1"


def minority_bit(
    diagnostics: Sequence[str],
    position: int,
    indices: Optional[Sequence[int]] = None
) -> str:
    """Complement of majority_bit (ties therefore resolve to '0')."""
    return complement_bit(majority_bit(diagnostics, position, indices))


def bits_to_number(bits: Sequence[str]) -> int:
    """
    Interpret a sequence of '0'/'1' characters as a binary number.

    Example:
        >>> bits_to_number(['1', '0', '1', '1', '0'])
        22
    """
    return int("".join(bits), 2)


def retain_prefix(
    diagnostics: Sequence[str],
    indices: Sequence[int],
    prefix: str
) -> List[int]:
    """
    Keep only the candidate indices whose string starts with prefix.

    Order of the surviving indices is preserved.
    """
    return [i for i in indices if diagnostics[i].startswith(prefix)]
