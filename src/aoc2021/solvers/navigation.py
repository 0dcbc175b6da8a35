"""
Navigation Tracker (day 2)

Replays "<direction> <amount>" commands to find the final horizontal
position and depth; the answer is their product.

Two variants:
  - direct: forward moves horizontally, down/up change depth
  - aim:    down/up change aim; forward moves horizontally and
            changes depth by aim * amount

Commands with an unrecognised direction are no-ops.
"""

from typing import List, TypedDict

from ..core.resources import Command


class Position(TypedDict):
    """Final submarine state after replaying a command list."""
    horizontal: int
    depth: int
    aim: int
    ignored_words: List[str]  # unrecognised direction words, in input order


def track_position(commands: List[Command]) -> Position:
    """Replay commands with direct depth changes."""
    horizontal = 0
    depth = 0
    ignored_words = []

    for command in commands:
        direction = command["direction"]
        amount = command["magnitude"]

        if direction == "forward":
            horizontal += amount
        elif direction == "up":
            depth -= amount
        elif direction == "down":
            depth += amount
        else:
            ignored_words.append(command["word"])

    return {"horizontal": horizontal, "depth": depth, "aim": 0, "ignored_words": ignored_words}


def track_position_with_aim(commands: List[Command]) -> Position:
    """Replay commands where down/up steer aim and forward dives along it."""
    horizontal = 0
    depth = 0
    aim = 0
    ignored_words = []

    for command in commands:
        direction = command["direction"]
        amount = command["magnitude"]

        if direction == "forward":
            horizontal += amount
            depth += aim * amount
        elif direction == "up":
            aim -= amount
        elif direction == "down":
            aim += amount
        else:
            ignored_words.append(command["word"])

    return {"horizontal": horizontal, "depth": depth, "aim": aim, "ignored_words": ignored_words}


def measure_position(commands: List[Command]) -> int:
    """
    Horizontal position multiplied by depth (direct variant).

    May be negative when depth ends above the surface.
    """
    position = track_position(commands)
    return position["horizontal"] * position["depth"]


def measure_position_with_aim(commands: List[Command]) -> int:
    """Horizontal position multiplied by depth (aim variant)."""
    position = track_position_with_aim(commands)
    return position["horizontal"] * position["depth"]
