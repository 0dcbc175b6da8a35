"""
Core Component: Puzzle Run Receipts

One receipt per puzzle run: where the input came from, the solver's
intermediate reading, and the answer. The digest is bound to the
parameter registry by hash, so two runs over the same input under the
same constants must produce the same section_hash.
"""

import json
from typing import Any, Dict, Mapping

from .registry import param_registry
from .hashing import blake3_hash

RECEIPTS_FORMAT = "aoc2021-receipts/1"


class Receipts:
    """
    Ordered key/value record for one puzzle section (e.g. "day3-part2").

    Values are restricted to what JSON round-trips exactly: int, bool,
    str, None, and lists or str-keyed dicts of those. Floats are refused.
    """

    def __init__(self, section: str):
        self.section = section
        self.payload: Dict[str, Any] = {}

    def put(self, key: str, value: Any) -> None:
        """
        Record one value under a new key.

        Raises:
            ReceiptError: If the key was already recorded or the value
                holds a type outside the allowed set.
        """
        if key in self.payload:
            raise ReceiptError(f"Duplicate key in receipts: '{key}'")
        _check_value(value, key)
        self.payload[key] = value

    def put_reading(self, key: str, reading: Mapping[str, Any]) -> None:
        """Record a solver reading (a TypedDict) as a plain dict."""
        self.put(key, dict(reading))

    def digest(self) -> dict:
        """
        Return the section digest.

        section_hash = blake3(stable_json({section, format,
                                           param_registry_hash, payload}))
        """
        body = {
            "section": self.section,
            "format": RECEIPTS_FORMAT,
            "param_registry_hash": blake3_hash(_encode(param_registry())),
            "payload": dict(self.payload),
        }
        body["section_hash"] = blake3_hash(_encode(body))
        return body


def assert_digests_equal(digest_a: dict, digest_b: dict) -> None:
    """
    Check that two digests of the same section carry the same hash.

    Raises:
        DeterminismError: Naming the first payload key whose value differs
            (None when only the envelope differs).
    """
    if digest_a["section_hash"] == digest_b["section_hash"]:
        return

    payload_a = digest_a["payload"]
    payload_b = digest_b["payload"]
    for key in list(payload_a) + [k for k in payload_b if k not in payload_a]:
        value_a = payload_a.get(key, "<MISSING>")
        value_b = payload_b.get(key, "<MISSING>")
        if value_a != value_b:
            raise DeterminismError(digest_a["section"], key, value_a, value_b)

    raise DeterminismError(digest_a["section"], None, None, None)


def stable_json_dumps(obj: Any) -> str:
    """Compact JSON with sorted keys (hashing input and CLI receipts output)."""
    return json.dumps(obj, sort_keys=True, ensure_ascii=False, separators=(',', ':'))


def _encode(obj: Any) -> bytes:
    return stable_json_dumps(obj).encode('utf-8')


def _check_value(value: Any, key: str) -> None:
    if isinstance(value, float):
        raise ReceiptError(f"Floats forbidden in receipts (key: '{key}')")
    if value is None or isinstance(value, (bool, int, str)):
        return
    if isinstance(value, (list, tuple)):
        for i, item in enumerate(value):
            _check_value(item, f"{key}[{i}]")
        return
    if isinstance(value, dict):
        for k, v in value.items():
            _check_value(v, f"{key}.{k}")
        return
    raise ReceiptError(
        f"Invalid type in receipts: {type(value).__name__} (key: '{key}')"
    )


class ReceiptError(Exception):
    """Raised when a receipt value is duplicated or not JSON-exact."""
    pass


class DeterminismError(Exception):
    """Raised when two runs of one section disagree."""

    def __init__(self, section: str, key: str | None, value_a: Any, value_b: Any):
        self.section = section
        self.key = key
        self.value_a = value_a
        self.value_b = value_b
        if key is None:
            detail = "section hashes differ"
        else:
            detail = f"'{key}' was {value_a!r} then {value_b!r}"
        super().__init__(f"Runs of '{section}' disagree: {detail}")
