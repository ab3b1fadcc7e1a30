"""Day 1: count how often a sonar depth measurement increases."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Sequence
from itertools import pairwise
from pathlib import Path
from typing import Any

WINDOW = 3

_PART_LABELS = ("One", "Two")


def _input_path(argv: Sequence[str] | None, default: str | None = None) -> str | None:
    """First command-line argument, else default; complain when neither exists."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        return args[0]
    if default is None:
        print("You must pass the txt file as an arg")
    return default


def _report(
    data: Any,
    solvers: Iterable[Callable[[Any], int]],
    *,
    catch_errors: bool = True,
) -> None:
    """Print each part's answer; on a ValueError either report it and stop, or re-raise."""
    for label, solve in zip(_PART_LABELS, solvers):
        try:
            answer = solve(data)
        except ValueError as err:
            if not catch_errors:
                raise
            print(f"failed to parse Part{label}", err)
            return
        print(f"Part {label}: {answer} ")


def _count_increases(values: Iterable[int]) -> int:
    return sum(later > earlier for earlier, later in pairwise(values))


def part_one(nums: Sequence[int]) -> int:
    """Count measurements larger than the one before them."""
    if not nums:
        raise ValueError("no measurements given")
    return _count_increases(nums)


def part_two(nums: Sequence[int]) -> int:
    """Count increases between sums of three-measurement sliding windows."""
    if len(nums) < WINDOW:
        raise ValueError(f"need at least {WINDOW} measurements, got {len(nums)}")
    windows = zip(*(nums[offset:] for offset in range(WINDOW)))
    return _count_increases(sum(window) for window in windows)


def _load_ints(path: str) -> list[int]:
    return [int(token) for token in Path(path).read_text().split()]


def main(argv: Sequence[str] | None = None) -> None:
    path = _input_path(argv)
    if path is not None:
        _report(_load_ints(path), (part_one, part_two), catch_errors=False)


if __name__ == "__main__":
    main()