"""Day 7: align crab submarines using as little fuel as possible."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

from reindeer2021.day01 import _input_path, _report

FuelFunction = Callable[[Sequence[int], int], int]


def parse_positions(text: str) -> list[int]:
    """Read comma-separated horizontal positions."""
    return [int(raw) for raw in text.strip().split(",")]


def _linear_fuel(positions: Sequence[int], target: int) -> int:
    return sum(abs(position - target) for position in positions)


def _triangular_fuel(positions: Sequence[int], target: int) -> int:
    distances = (abs(position - target) for position in positions)
    return sum(distance * (distance + 1) // 2 for distance in distances)


def _descend(positions: Sequence[int], candidates: Sequence[int], fuel_for: FuelFunction) -> int:
    """Walk candidates in order, stopping as soon as fuel stops decreasing."""
    best = fuel_for(positions, candidates[0])
    for target in candidates[1:]:
        fuel = fuel_for(positions, target)
        if fuel >= best:
            break
        best = fuel
    return best


def part_one(positions: Sequence[int]) -> int:
    """Least fuel when each step costs one unit, trying only occupied positions."""
    if not positions:
        raise ValueError("no crab positions given")
    return _descend(positions, sorted(set(positions)), _linear_fuel)


def part_two(positions: Sequence[int]) -> int:
    """Least fuel when each further step costs one more unit than the last."""
    if not positions:
        raise ValueError("no crab positions given")
    low, high = min(positions), max(positions)
    candidates = [low, *range(low + 1, high)]
    return _descend(positions, candidates, _triangular_fuel)


def main(argv: Sequence[str] | None = None) -> None:
    text = Path(_input_path(argv, "input.txt")).read_text()
    _report(
        text,
        (lambda raw: part_one(parse_positions(raw)), lambda raw: part_two(parse_positions(raw))),
    )


if __name__ == "__main__":
    main()