"""
Tests for the puzzle runner and CLI.

Verifies:
  - all six puzzles against the bundled sample resources
  - receipts contents and double-run determinism
  - CLI output format and exit codes
"""

import json

import pytest

from aoc2021.core import InputError, ResourceError
from aoc2021.runner import (
    PUZZLES,
    UnknownPuzzle,
    main,
    parse_puzzle_id,
    puzzle_label,
    puzzle_resource,
    solve,
    solve_with_determinism_check
)

EXPECTED = {
    "day1-part1": 7,
    "day1-part2": 5,
    "day2-part1": 150,
    "day2-part2": 900,
    "day3-part1": 198,
    "day3-part2": 230,
}


@pytest.mark.parametrize("puzzle_id,expected", sorted(EXPECTED.items()))
def test_solve_sample_resources(puzzle_id, expected):
    result, receipts = solve(puzzle_id)

    assert result == expected
    assert receipts["section"] == puzzle_id
    assert receipts["payload"]["result"] == expected
    assert receipts["payload"]["inputs"]["source"] == puzzle_resource(puzzle_id)


def test_parse_puzzle_id_aliases():
    assert parse_puzzle_id("day3-part2") == "day3-part2"
    assert parse_puzzle_id("3.2") == "day3-part2"
    assert parse_puzzle_id("1-1") == "day1-part1"
    assert parse_puzzle_id("Day2Part1") == "day2-part1"

    for bad in ["day4-part1", "1.3", "nonsense", ""]:
        with pytest.raises(UnknownPuzzle):
            parse_puzzle_id(bad)


def test_labels_and_resources():
    assert puzzle_label("day1-part2") == "Day 1 - Part 2"
    assert puzzle_resource("day3-part1") == "day_3_input.txt"
    assert set(PUZZLES) == set(EXPECTED)


def test_solve_from_text():
    result, receipts = solve("2.1", text="forward 3\ndown 4\n")

    assert result == 12
    assert receipts["payload"]["inputs"]["source"] == "<text>"
    assert receipts["payload"]["inputs"]["lines"] == 2
    assert receipts["payload"]["trace"]["horizontal"] == 3


def test_receipts_trace_diagnostics():
    _, receipts = solve("day3-part2")
    trace = receipts["payload"]["trace"]

    assert trace["oxygen"] == 23
    assert trace["co2"] == 10


def test_solve_custom_resources_dir(tmp_path):
    (tmp_path / "day_1_input.txt").write_text("1\n3\n2\n4\n", encoding="utf-8")

    result, _ = solve("day1-part1", resources_dir=tmp_path)
    assert result == 2


def test_solve_errors(tmp_path):
    with pytest.raises(ResourceError):
        solve("day1-part1", resources_dir=tmp_path)

    with pytest.raises(InputError):
        solve("day1-part1", text="1\nx\n")

    with pytest.raises(InputError):
        solve("day2-part2", text="forward 1\nup many\n")


def test_determinism_check():
    for puzzle_id, expected in EXPECTED.items():
        result, receipts = solve_with_determinism_check(puzzle_id)
        assert result == expected
        assert receipts["determinism.double_run_ok"] is True

        # Repeat runs produce the same section hash
        _, plain = solve(puzzle_id)
        assert plain["section_hash"] == receipts["section_hash"]

    print("✓ All puzzles deterministic")


def test_cli_default(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Day 1 - Part 2: 5\n"


def test_cli_all(capsys):
    assert main(["--all", "--determinism-check"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Day 1 - Part 1: 7",
        "Day 1 - Part 2: 5",
        "Day 2 - Part 1: 150",
        "Day 2 - Part 2: 900",
        "Day 3 - Part 1: 198",
        "Day 3 - Part 2: 230",
    ]


def test_cli_input_and_receipts(tmp_path, capsys):
    input_file = tmp_path / "diag.txt"
    input_file.write_text("01\n10\n", encoding="utf-8")
    receipts_file = tmp_path / "receipts.json"

    code = main(["3.1", "--input", str(input_file), "--receipts", "--output", str(receipts_file)])

    assert code == 0
    assert capsys.readouterr().out == "Day 3 - Part 1: 0\n"

    receipts = json.loads(receipts_file.read_text(encoding="utf-8"))
    assert receipts["day3-part1"]["payload"]["trace"]["gamma_bits"] == "11"


def test_cli_errors(tmp_path, capsys):
    assert main(["day9-part9"]) == 2
    assert "Unknown puzzle" in capsys.readouterr().err

    assert main(["1.1", "--resources", str(tmp_path)]) == 1
    assert "Error:" in capsys.readouterr().err

    bad = tmp_path / "bad.txt"
    bad.write_text("1\nnope\n", encoding="utf-8")
    assert main(["1.1", "--input", str(bad)]) == 1
    assert "line 2" in capsys.readouterr().err

    assert main(["1.1", "1.2", "--input", str(bad)]) == 2


def test_cli_ragged_diagnostics(tmp_path, capsys):
    """Bit-strings of different widths are a fatal input error, not a crash."""
    for text in ["101\n01\n", "10\n011\n111\n"]:
        ragged = tmp_path / "ragged.txt"
        ragged.write_text(text, encoding="utf-8")

        assert main(["3.1", "--input", str(ragged)]) == 1
        err = capsys.readouterr().err
        assert err.startswith("Error: line 2:")

    with pytest.raises(InputError):
        solve("day3-part1", text="10\n011\n111\n")


def test_cli_unwritable_output(tmp_path, capsys):
    target = tmp_path / "no_such_dir" / "receipts.json"

    assert main(["1.1", "--receipts", "--output", str(target)]) == 1
    captured = capsys.readouterr()
    assert captured.out == "Day 1 - Part 1: 7\n"
    assert "Unable to write receipts" in captured.err
