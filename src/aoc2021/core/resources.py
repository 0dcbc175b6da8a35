"""
Core Component: Resource Loading & Line Parsing

Reads named puzzle inputs from the resources directory and turns them
into the parsed collections the solvers consume:

  - numbers:     one base-10 signed integer per line
  - commands:    "<word> <number>" per line
  - diagnostics: one '0'/'1' bit-string per line

Any I/O or parse failure is fatal: no partial results are returned.
"""

import re
from pathlib import Path
from typing import List, Literal, Optional, TypedDict

from .registry import param_registry

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

Direction = Literal["forward", "up", "down"]


class Command(TypedDict):
    """One parsed navigation command."""
    word: str  # raw direction token as written
    direction: Optional[Direction]  # None when the word is not recognised
    magnitude: int


def default_resources_dir() -> Path:
    """Return the repository-level resources directory."""
    # src/aoc2021/core/resources.py -> repository root
    return Path(__file__).resolve().parents[3] / param_registry()["resources_dirname"]


def read_from_resource(filename: str, resources_dir: Optional[Path] = None) -> str:
    """
    Read a file from the resources directory as a string.

    Args:
        filename: Logical resource name (e.g., "day_1_input.txt").
        resources_dir: Directory to read from. Default: repository resources/.

    Returns:
        str: Full file contents.

    Raises:
        ResourceError: If the file is missing or unreadable.

    Example:
        >>> read_from_resource("test.txt")
        '1\\n2\\n3'
    """
    base = Path(resources_dir) if resources_dir is not None else default_resources_dir()
    path = base / filename
    try:
        return path.read_text(encoding=param_registry()["text_encoding"])
    except FileNotFoundError:
        raise ResourceError(f"Resource not found: {path}") from None
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceError(f"Unable to read resource {path}: {e}") from e


def split_lines(text: str) -> List[str]:
    """Split raw text on line boundaries (a final newline adds no empty line)."""
    return text.splitlines()


def parse_int(token: str, line_no: int) -> int:
    """
    Parse one base-10 signed integer.

    Raises:
        InputError: If token is not an optionally signed run of digits.
    """
    if not _INTEGER_RE.fullmatch(token):
        raise InputError(f"Expected an integer, got {token!r}", line_no)
    return int(token)


def file_lines_to_numbers(text: str) -> List[int]:
    """
    Read a string input as a list of numbers, one per line.

    Raises:
        InputError: On the first non-numeric line (1-based line number).

    Example:
        >>> file_lines_to_numbers("1\\n2\\n3")
        [1, 2, 3]
    """
    return [parse_int(line, i) for i, line in enumerate(split_lines(text), start=1)]


def parse_command(line: str, line_no: int = 1) -> Command:
    """
    Parse "<word> <number>" into a Command.

    Unknown words are kept with direction=None; the tracker ignores them.
    A missing or non-numeric magnitude is an InputError.
    """
    parts = line.split(" ")
    if len(parts) < 2:
        raise InputError(f"Expected '<direction> <amount>', got {line!r}", line_no)

    word = parts[0]
    magnitude = parse_int(parts[1], line_no)
    direction = word if word in param_registry()["directions"] else None

    return {"word": word, "direction": direction, "magnitude": magnitude}


def parse_commands(lines: List[str]) -> List[Command]:
    """Parse every line with parse_command (1-based line numbers in errors)."""
    return [parse_command(line, i) for i, line in enumerate(lines, start=1)]


def parse_diagnostics(lines: List[str]) -> List[str]:
    """
    Validate bit-strings and return them unchanged.

    Every line must have the width of the first one; the solvers index
    positions by that width.

    Raises:
        InputError: If a line holds anything other than '0' and '1',
            or its width differs from the first line's.
    """
    alphabet = set(param_registry()["bit_alphabet"])
    for i, line in enumerate(lines, start=1):
        if not line or not set(line) <= alphabet:
            raise InputError(f"Expected a bit-string of '0'/'1', got {line!r}", i)
        if len(line) != len(lines[0]):
            raise InputError(
                f"Expected {len(lines[0])} bits like line 1, got {len(line)} in {line!r}", i
            )
    return list(lines)


def serialize_lines(lines: List) -> bytes:
    """
    Encode a parsed input as a stable byte stream for hashing.

    Format (exact):
      - one item per line, str() of each item
      - items joined with b"\\n", UTF-8, no trailing newline
    """
    return "\n".join(str(item) for item in lines).encode(param_registry()["text_encoding"])


class ResourceError(Exception):
    """Raised when a resource file is missing or unreadable."""
    pass


class InputError(ValueError):
    """Raised when an input line cannot be parsed."""

    def __init__(self, message: str, line_no: int):
        self.line_no = line_no
        super().__init__(f"line {line_no}: {message}")
