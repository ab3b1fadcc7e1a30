"""Day 15: find the lowest-risk path through a cave of risk levels."""

from __future__ import annotations

import heapq
import sys
from collections.abc import Sequence
from pathlib import Path

MAX_RISK = 9


def _build_grid(lines: Sequence[str], multiplier: int) -> list[list[int]]:
    rows = [line.strip() for line in lines if line.strip()]
    if not rows:
        raise ValueError("empty cave")
    if any(not row.isdigit() for row in rows):
        raise ValueError("could not convert char to int")
    if len({len(row) for row in rows}) != 1:
        raise ValueError("cave rows differ in length")
    if multiplier < 1:
        raise ValueError(f"multiplier must be positive, got {multiplier}")

    grid = []
    for tile_row in range(multiplier):
        for row in rows:
            extended = []
            for tile_col in range(multiplier):
                for char in row:
                    risk = int(char) + tile_row + tile_col
                    if risk > MAX_RISK:
                        risk -= MAX_RISK
                    extended.append(risk)
            grid.append(extended)
    return grid


def lowest_risk(lines: Sequence[str], multiplier: int) -> int:
    """Least total risk from the top-left to the bottom-right of the tiled cave."""
    grid = _build_grid(lines, multiplier)
    height, width = len(grid), len(grid[0])
    goal = (height - 1, width - 1)
    best = {(0, 0): 0}
    queue = [(0, 0, 0)]
    while queue:
        distance, r, c = heapq.heappop(queue)
        if (r, c) == goal:
            return distance
        if distance > best[(r, c)]:
            continue
        for nr, nc in ((r + 1, c), (r, c + 1), (r - 1, c), (r, c - 1)):
            if 0 <= nr < height and 0 <= nc < width:
                candidate = distance + grid[nr][nc]
                if candidate < best.get((nr, nc), candidate + 1):
                    best[(nr, nc)] = candidate
                    heapq.heappush(queue, (candidate, nr, nc))
    return best[goal]


def part_one(lines: Sequence[str]) -> int:
    """Lowest total risk through the cave as given."""
    return lowest_risk(lines, 1)


def part_two(lines: Sequence[str]) -> int:
    """Lowest total risk through the cave tiled five times each way."""
    return lowest_risk(lines, 5)


def main(argv: Sequence[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    filename = args[0] if args else "input.txt"
    lines = Path(filename).read_text().strip().splitlines()

    try:
        answer = part_one(lines)
    except ValueError as err:
        print("failed to parse PartOne", err)
        return
    print(f"Part One: {answer} ")

    try:
        answer2 = part_two(lines)
    except ValueError as err:
        print("failed to parse PartTwo", err)
        return
    print(f"Part Two: {answer2} ")


if __name__ == "__main__":
    main()