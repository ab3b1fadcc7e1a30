"""Day 5: count points where hydrothermal vent lines overlap."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import chain
from pathlib import Path

from reindeer2021.day01 import _input_path, _report

_LINE = re.compile(r"\s*(-?\d+),\s*(-?\d+)\s*->\s*(-?\d+),\s*(-?\d+)")


@dataclass(frozen=True)
class _Segment:
    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def parse(cls, text: str) -> _Segment:
        match = _LINE.match(text)
        if match is None:
            raise ValueError(f"malformed vent line: {text!r}")
        return cls(*(int(group) for group in match.groups()))

    def points(self, diagonals: bool) -> Iterator[tuple[int, int]]:
        if self.x1 == self.x2:
            step = 1 if self.y2 >= self.y1 else -1
            yield from ((self.x1, y) for y in range(self.y1, self.y2 + step, step))
        elif self.y1 == self.y2:
            step = 1 if self.x2 >= self.x1 else -1
            yield from ((x, self.y1) for x in range(self.x1, self.x2 + step, step))
        elif diagonals:
            x, y = self.x1, self.y1
            yield x, y
            while x != self.x2:
                x += 1 if x < self.x2 else -1
                y += 1 if y < self.y2 else -1
                yield x, y


def count_overlaps(lines: Iterable[str], diagonals: bool) -> int:
    """Number of points covered by at least two vent lines."""
    segments = [_Segment.parse(line) for line in lines]
    counts = Counter(chain.from_iterable(seg.points(diagonals) for seg in segments))
    return sum(1 for hits in counts.values() if hits > 1)


def part_one(lines: Iterable[str]) -> int:
    """Overlaps counting only horizontal and vertical lines."""
    return count_overlaps(lines, diagonals=False)


def part_two(lines: Iterable[str]) -> int:
    """Overlaps counting diagonal lines too."""
    return count_overlaps(lines, diagonals=True)


def main(argv: Sequence[str] | None = None) -> None:
    vents = Path(_input_path(argv, "input.txt")).read_text().strip().splitlines()
    _report(vents, (part_one, part_two))


if __name__ == "__main__":
    main()