"""Day 11: simulate flashing dumbo octopuses."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

Point = tuple[int, int]

MAX_ENERGY = 9
PART_ONE_STEPS = 100
STEP_LIMIT = 1000


@dataclass
class Grid:
    """A rectangular grid of octopus energy levels, indexed by (row, column)."""

    energy: list[list[int]]

    @classmethod
    def parse(cls, lines: Sequence[str]) -> Grid:
        rows = [line.strip() for line in lines if line.strip()]
        if not rows:
            raise ValueError("empty grid")
        if any(not row.isdigit() for row in rows):
            raise ValueError("could not convert char to num in grid")
        if len({len(row) for row in rows}) != 1:
            raise ValueError("grid rows differ in length")
        return cls([[int(char) for char in row] for row in rows])

    @property
    def size(self) -> int:
        return len(self.energy) * len(self.energy[0])

    def _cells(self) -> Iterator[Point]:
        for r, row in enumerate(self.energy):
            for c in range(len(row)):
                yield r, c

    def _neighbours(self, row: int, col: int) -> Iterator[Point]:
        height, width = len(self.energy), len(self.energy[0])
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                r, c = row + dr, col + dc
                if (dr or dc) and 0 <= r < height and 0 <= c < width:
                    yield r, c

    def step(self) -> int:
        """Advance one step and return how many octopuses flashed."""
        for r, c in self._cells():
            self.energy[r][c] += 1

        flashed: set[Point] = set()
        pending = [(r, c) for r, c in self._cells() if self.energy[r][c] > MAX_ENERGY]
        while pending:
            point = pending.pop()
            if point in flashed:
                continue
            flashed.add(point)
            for r, c in self._neighbours(*point):
                self.energy[r][c] += 1
                if self.energy[r][c] > MAX_ENERGY and (r, c) not in flashed:
                    pending.append((r, c))

        for r, c in flashed:
            self.energy[r][c] = 0
        return len(flashed)

    def __str__(self) -> str:
        rows = ("".join(str(value) for value in row) for row in self.energy)
        return "[[ " + "\n   ".join(rows) + " ]]"


def part_one(lines: Sequence[str]) -> int:
    """Total flashes after 100 steps."""
    grid = Grid.parse(lines)
    return sum(grid.step() for _ in range(PART_ONE_STEPS))


def part_two(lines: Sequence[str]) -> int:
    """First step (1-based) on which every octopus flashes; 0 if none within 1000 steps."""
    grid = Grid.parse(lines)
    for step in range(1, STEP_LIMIT + 1):
        if grid.step() == grid.size:
            return step
    return 0


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