"""Day 3: decode power and life-support ratings from a binary diagnostic."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from reindeer2021.day01 import _input_path, _report


def _column(lines: Sequence[str], bit: int) -> list[int]:
    return [int(line[bit]) for line in lines]


def _most_common_is_one(column: Sequence[int]) -> bool:
    # Ties favour 1.
    return sum(column) >= len(column) / 2


def part_one(lines: Sequence[str]) -> int:
    """Product of the gamma and epsilon rates."""
    if not lines:
        raise ValueError("no diagnostic lines given")
    columns = [_column(lines, bit) for bit in range(len(lines[0]))]
    gamma = "".join("1" if _most_common_is_one(col) else "0" for col in columns)
    epsilon = "".join("0" if bit == "1" else "1" for bit in gamma)
    return int(gamma, 2) * int(epsilon, 2)


def _weed_out(lines: Sequence[str], check: int) -> str:
    candidates = list(lines)
    for bit in range(len(lines)):
        if len(candidates) == 1:
            return candidates[0]
        if not candidates:
            break
        column = _column(candidates, bit)
        keep = check if _most_common_is_one(column) else 1 - check
        candidates = [line for line, value in zip(candidates, column) if value == keep]
    raise ValueError("could not weed out binaries")


def part_two(lines: Sequence[str]) -> int:
    """Product of the oxygen generator and CO2 scrubber ratings."""
    oxygen = _weed_out(lines, 1)
    co2 = _weed_out(lines, 0)
    return int(oxygen, 2) * int(co2, 2)


def main(argv: Sequence[str] | None = None) -> None:
    path = _input_path(argv)
    if path is not None:
        report = Path(path).read_text().strip().splitlines()
        _report(report, (part_one, part_two), catch_errors=False)


if __name__ == "__main__":
    main()