"""Day 9: find low points and basins in a cave height map."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from reindeer2021.day01 import _input_path, _report

Point = tuple[int, int]

BASIN_WALL = 9


@dataclass(frozen=True)
class HeightMap:
    """A grid of single-digit heights, indexed by (row, column)."""

    rows: tuple[tuple[int, ...], ...]

    @classmethod
    def parse(cls, lines: Sequence[str]) -> HeightMap:
        if not lines:
            raise ValueError("empty height map")
        try:
            rows = tuple(tuple(int(char) for char in line) for line in lines)
        except ValueError:
            raise ValueError("could not create heightmap") from None
        return cls(rows)

    def _neighbours(self, row: int, col: int) -> Iterator[Point]:
        max_row = len(self.rows) - 1
        max_col = len(self.rows[0]) - 1
        if row > max_row or col > max_col:
            raise IndexError("col and row out of range")
        for r, c in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            if 0 <= r <= max_row and 0 <= c <= max_col:
                yield r, c

    def low_points(self) -> list[Point]:
        """Cells strictly lower than every neighbour, in reading order."""
        return [
            (r, c)
            for r, row in enumerate(self.rows)
            for c, height in enumerate(row)
            if all(self.rows[nr][nc] > height for nr, nc in self._neighbours(r, c))
        ]

    def basin_size(self, point: Point) -> int:
        """Number of cells reachable from point without crossing a 9."""
        seen = {point}
        pending = [point]
        while pending:
            for neighbour in self._neighbours(*pending.pop()):
                r, c = neighbour
                if neighbour in seen or self.rows[r][c] == BASIN_WALL:
                    continue
                seen.add(neighbour)
                pending.append(neighbour)
        return len(seen)


def part_one(lines: Sequence[str]) -> int:
    """Sum of risk levels (height + 1) of all low points."""
    heights = HeightMap.parse(lines)
    return sum(heights.rows[r][c] + 1 for r, c in heights.low_points())


def part_two(lines: Sequence[str]) -> int:
    """Product of the sizes of the three largest basins."""
    heights = HeightMap.parse(lines)
    sizes = sorted((heights.basin_size(point) for point in heights.low_points()), reverse=True)
    if len(sizes) < 3:
        raise ValueError(f"need at least three basins, found {len(sizes)}")
    return math.prod(sizes[:3])


def main(argv: Sequence[str] | None = None) -> None:
    heights = Path(_input_path(argv, "input.txt")).read_text().strip().splitlines()
    _report(heights, (part_one, part_two))


if __name__ == "__main__":
    main()