"""Day 2: steer the submarine with forward/backward/up/down commands."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from reindeer2021.day01 import _input_path, _report


def _commands(lines: Iterable[str]) -> Iterator[tuple[str, int]]:
    for line in lines:
        fields = line.split()
        if len(fields) < 2:
            raise ValueError(f"malformed command: {line!r}")
        yield fields[0], int(fields[1])


def part_one(lines: Iterable[str]) -> int:
    """Product of horizontal position and depth, moving directly."""
    horizontal = depth = 0
    for direction, amount in _commands(lines):
        match direction:
            case "forward":
                horizontal += amount
            case "backward":
                horizontal -= amount
            case "up":
                depth -= amount
            case "down":
                depth += amount
    return horizontal * depth


def part_two(lines: Iterable[str]) -> int:
    """Product of horizontal position and depth, steering by aim."""
    horizontal = depth = aim = 0
    for direction, amount in _commands(lines):
        match direction:
            case "forward":
                horizontal += amount
                depth += amount * aim
            case "backward":
                horizontal -= amount
                depth -= amount * aim
            case "up":
                aim -= amount
            case "down":
                aim += amount
    return horizontal * depth


def main(argv: Sequence[str] | None = None) -> None:
    path = _input_path(argv)
    if path is not None:
        commands = Path(path).read_text().strip().splitlines()
        _report(commands, (part_one, part_two), catch_errors=False)


if __name__ == "__main__":
    main()