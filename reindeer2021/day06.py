"""Day 6: model an exponentially growing lanternfish population."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from reindeer2021.day01 import _input_path, _report

MAX_TIMER = 8
RESET_TIMER = 6


def load_state(data: str) -> list[int]:
    """Count fish by timer value, read from the first line of comma-separated timers."""
    first_line = data.split("\n", 1)[0]
    state = [0] * (MAX_TIMER + 1)
    for raw in first_line.split(","):
        timer = int(raw)
        if not 0 <= timer <= MAX_TIMER:
            raise ValueError(f"timer out of range: {timer}")
        state[timer] += 1
    return state


def simulate(state: Sequence[int], days: int) -> list[int]:
    """Return the timer counts after the given number of days."""
    current = list(state)
    for _ in range(days):
        spawning = current[0]
        current = current[1:] + [spawning]
        current[RESET_TIMER] += spawning
    return current


def part_one(content: str) -> int:
    """Number of fish after 80 days."""
    return sum(simulate(load_state(content), 80))


def part_two(content: str) -> int:
    """Number of fish after 256 days."""
    return sum(simulate(load_state(content), 256))


def main(argv: Sequence[str] | None = None) -> None:
    timers = Path(_input_path(argv, "input.txt")).read_text().strip()
    _report(timers, (part_one, part_two))


if __name__ == "__main__":
    main()