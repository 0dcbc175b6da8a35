"""
Core foundation: receipts, hashing, resource loading, parameter registry.

Frozen constants and deterministic line-level I/O.
"""

from .registry import param_registry, RegistryError
from .hashing import blake3_hash
from .resources import (
    Command,
    read_from_resource,
    split_lines,
    file_lines_to_numbers,
    parse_commands,
    parse_diagnostics,
    serialize_lines,
    ResourceError,
    InputError
)
from .receipts import (
    Receipts,
    assert_digests_equal,
    ReceiptError,
    DeterminismError
)

__all__ = [
    # Registry
    "param_registry",
    "RegistryError",

    # Hashing
    "blake3_hash",

    # Resources
    "Command",
    "read_from_resource",
    "split_lines",
    "file_lines_to_numbers",
    "parse_commands",
    "parse_diagnostics",
    "serialize_lines",
    "ResourceError",
    "InputError",

    # Receipts
    "Receipts",
    "assert_digests_equal",
    "ReceiptError",
    "DeterminismError",
]
