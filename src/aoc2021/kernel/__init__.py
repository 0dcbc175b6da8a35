"""
Bit-String Kernel

Minimal kernel of pure operations on '0'/'1' strings:
  - majority_bit / minority_bit: per-position bit counts
  - bits_to_number: binary interpretation
  - retain_prefix: prefix filtering over an index set
"""

from .bits import (
    majority_bit,
    minority_bit,
    complement_bit,
    bits_to_number,
    retain_prefix
)

__all__ = [
    "majority_bit",
    "minority_bit",
    "complement_bit",
    "bits_to_number",
    "retain_prefix",
]
