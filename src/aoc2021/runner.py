"""
Advent of Code 2021 Runner

Loads a named puzzle input, parses it, runs the matching solver and
prints "<Label>: <result>".

Puzzles:
  - day1-part1 / day1-part2: depth-trend counter (plain / sliding window)
  - day2-part1 / day2-part2: navigation tracker (direct / aim)
  - day3-part1 / day3-part2: bit diagnostics (power / life support)

Every run produces a section receipt (input hash, intermediates, result)
so that a double run can prove the solvers are pure.
"""

import re
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, TypedDict

from .core import (
    Receipts,
    param_registry,
    blake3_hash,
    assert_digests_equal,
    read_from_resource,
    split_lines,
    file_lines_to_numbers,
    parse_commands,
    parse_diagnostics,
    serialize_lines,
    ResourceError,
    InputError,
    DeterminismError
)
from .core.receipts import stable_json_dumps
from .solvers import (
    measure_depth_increase,
    measure_depth_increase_sliding,
    track_position,
    track_position_with_aim,
    measure_position,
    measure_position_with_aim,
    read_power,
    read_life_support,
    calculate_power_consumption,
    calculate_life_support_rating
)


# ============================================================================
# Puzzle Table
# ============================================================================

class Puzzle(TypedDict):
    day: int
    part: int
    parse: Callable[[str], List[Any]]
    solve: Callable[[List[Any]], int]
    trace: Optional[Callable[[List[Any]], Dict]]  # intermediates for receipts


def _parse_numbers(text: str) -> List[int]:
    return file_lines_to_numbers(text)


def _parse_commands(text: str) -> List:
    return parse_commands(split_lines(text))


def _parse_diagnostics(text: str) -> List[str]:
    return parse_diagnostics(split_lines(text))


def _trace_window(measurements: List[int]) -> Dict:
    size = param_registry()["window_size"]
    return {"window_size": size, "windows": max(len(measurements) - size + 1, 0)}


PUZZLES: Dict[str, Puzzle] = {
    "day1-part1": {
        "day": 1, "part": 1,
        "parse": _parse_numbers,
        "solve": measure_depth_increase,
        "trace": None,
    },
    "day1-part2": {
        "day": 1, "part": 2,
        "parse": _parse_numbers,
        "solve": measure_depth_increase_sliding,
        "trace": _trace_window,
    },
    "day2-part1": {
        "day": 2, "part": 1,
        "parse": _parse_commands,
        "solve": measure_position,
        "trace": track_position,
    },
    "day2-part2": {
        "day": 2, "part": 2,
        "parse": _parse_commands,
        "solve": measure_position_with_aim,
        "trace": track_position_with_aim,
    },
    "day3-part1": {
        "day": 3, "part": 1,
        "parse": _parse_diagnostics,
        "solve": calculate_power_consumption,
        "trace": read_power,
    },
    "day3-part2": {
        "day": 3, "part": 2,
        "parse": _parse_diagnostics,
        "solve": calculate_life_support_rating,
        "trace": read_life_support,
    },
}

# Puzzle run when none is named.
DEFAULT_PUZZLE = "day1-part2"

_PUZZLE_ID_RE = re.compile(r"(?:day)?(\d+)(?:[.\-_]|-?part)(\d+)", re.IGNORECASE)


def parse_puzzle_id(token: str) -> str:
    """
    Normalise a puzzle id: "day3-part2", "3.2", "3-2" -> "day3-part2".

    Raises:
        UnknownPuzzle: If the token names no known puzzle.
    """
    match = _PUZZLE_ID_RE.fullmatch(token.strip())
    if match:
        puzzle_id = f"day{int(match.group(1))}-part{int(match.group(2))}"
        if puzzle_id in PUZZLES:
            return puzzle_id
    raise UnknownPuzzle(token)


def puzzle_label(puzzle_id: str) -> str:
    """Output label for a puzzle id, e.g. "Day 1 - Part 2"."""
    puzzle = PUZZLES[puzzle_id]
    return param_registry()["label_template"].format(day=puzzle["day"], part=puzzle["part"])


def puzzle_resource(puzzle_id: str) -> str:
    """Resource file name a puzzle reads by default."""
    return param_registry()["resource_template"].format(day=PUZZLES[puzzle_id]["day"])


# ============================================================================
# Solve
# ============================================================================

def _load_input(
    puzzle_id: str,
    resources_dir: Optional[Path],
    text: Optional[str]
) -> Tuple[str, str]:
    """Return (text, source) for a puzzle, reading its resource unless text is given."""
    if text is not None:
        return text, "<text>"
    source = puzzle_resource(puzzle_id)
    return read_from_resource(source, resources_dir), source


def _build_section(puzzle_id: str, text: str, source: str) -> Tuple[int, Receipts]:
    """Parse text, run the solver, and record one receipts section."""
    puzzle = PUZZLES[puzzle_id]
    receipts = Receipts(puzzle_id)

    lines = split_lines(text)
    receipts.put("inputs", {
        "source": source,
        "lines": len(lines),
        "input_hash": blake3_hash(serialize_lines(lines))
    })

    parsed = puzzle["parse"](text)

    if puzzle["trace"] is not None:
        receipts.put_reading("trace", puzzle["trace"](parsed))

    result = puzzle["solve"](parsed)
    receipts.put("result", result)

    return result, receipts


def solve(
    puzzle_id: str,
    resources_dir: Optional[Path] = None,
    text: Optional[str] = None
) -> Tuple[int, Dict]:
    """
    Run one puzzle.

    Args:
        puzzle_id: Puzzle id or alias (see parse_puzzle_id).
        resources_dir: Directory holding day_<N>_input.txt. Default: repository resources/.
        text: Raw input text; when given, no resource is read.

    Returns:
        Tuple of (result, receipts_digest).

    Raises:
        UnknownPuzzle: Unknown puzzle id.
        ResourceError: Input resource missing or unreadable.
        InputError: Input line cannot be parsed.
    """
    puzzle_id = parse_puzzle_id(puzzle_id)
    text, source = _load_input(puzzle_id, resources_dir, text)

    result, receipts = _build_section(puzzle_id, text, source)
    return result, receipts.digest()


def solve_with_determinism_check(
    puzzle_id: str,
    resources_dir: Optional[Path] = None,
    text: Optional[str] = None
) -> Tuple[int, Dict]:
    """
    Run a puzzle twice on the same input and verify identical receipts.

    Returns:
        Tuple of (result, receipts_digest) with determinism flags added.

    Raises:
        DeterminismError: If the section hashes differ.
        RuntimeError: If the results differ.
    """
    puzzle_id = parse_puzzle_id(puzzle_id)
    text, source = _load_input(puzzle_id, resources_dir, text)

    result_1, receipts_1 = _build_section(puzzle_id, text, source)
    result_2, receipts_2 = _build_section(puzzle_id, text, source)
    if result_1 != result_2:
        raise RuntimeError(
            f"Determinism check failed for {puzzle_id}: {result_1} != {result_2}"
        )

    digest = receipts_2.digest()
    assert_digests_equal(receipts_1.digest(), digest)
    digest["determinism.double_run_ok"] = True
    return result_1, digest


class UnknownPuzzle(KeyError):
    """Raised for a puzzle id that is not in PUZZLES."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(token)

    def __str__(self) -> str:
        known = ", ".join(PUZZLES)
        return f"Unknown puzzle '{self.token}'. Known puzzles: {known}"


# ============================================================================
# CLI Entry Point
# ============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        prog="aoc2021",
        description="Advent of Code 2021 puzzle runner (days 1-3)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default puzzle (day 1, part 2)
  python -m aoc2021.runner

  # One puzzle, by id or alias
  python -m aoc2021.runner day3-part2
  python -m aoc2021.runner 3.2

  # Every puzzle, with a double-run determinism check
  python -m aoc2021.runner --all --determinism-check

  # Custom input file and receipts dump
  python -m aoc2021.runner 2.1 --input my_input.txt --receipts
        """
    )

    parser.add_argument(
        "puzzles",
        nargs="*",
        help=f"Puzzle ids ('day1-part1' or '1.1'). Default: {DEFAULT_PUZZLE}."
    )

    parser.add_argument(
        "--all",
        action="store_true",
        help="Run every puzzle in order."
    )

    parser.add_argument(
        "--resources",
        type=Path,
        default=None,
        help="Directory holding day_<N>_input.txt. Default: repository resources/."
    )

    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Read this file instead of the puzzle resource (single puzzle only)."
    )

    parser.add_argument(
        "--determinism-check",
        action="store_true",
        help="Run each puzzle twice and compare receipts. Default: False."
    )

    parser.add_argument(
        "--receipts",
        action="store_true",
        help="Emit receipts JSON (to --output, or stderr)."
    )

    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output file for receipts JSON. Default: stderr."
    )

    args = parser.parse_args(argv)

    tokens = list(param_registry()["puzzle_ids"]) if args.all else (args.puzzles or [DEFAULT_PUZZLE])

    try:
        puzzle_ids = [parse_puzzle_id(token) for token in tokens]
    except UnknownPuzzle as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.input is not None and len(puzzle_ids) != 1:
        print("Error: --input needs exactly one puzzle", file=sys.stderr)
        return 2

    run = solve_with_determinism_check if args.determinism_check else solve
    all_receipts = {}

    try:
        text = None
        if args.input is not None:
            try:
                text = args.input.read_text(encoding=param_registry()["text_encoding"])
            except OSError as e:
                raise ResourceError(f"Unable to read input {args.input}: {e}") from e

        for puzzle_id in puzzle_ids:
            result, receipts = run(puzzle_id, resources_dir=args.resources, text=text)
            all_receipts[puzzle_id] = receipts
            print(f"{puzzle_label(puzzle_id)}: {result}")
    except (ResourceError, InputError, ValueError, DeterminismError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.receipts:
        if args.output:
            try:
                args.output.write_text(stable_json_dumps(all_receipts) + "\n", encoding="utf-8")
            except OSError as e:
                print(f"Error: Unable to write receipts {args.output}: {e}", file=sys.stderr)
                return 1
            print(f"Receipts written to: {args.output}", file=sys.stderr)
        else:
            print(stable_json_dumps(all_receipts), file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
