"""Day 13: fold transparent paper marked with dots."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

_DOT = re.compile(r"\s*(\d+)\s*,\s*(\d+)\s*$")
_FOLD = re.compile(r"\s*fold along ([xy])=(\d+)\s*$")


@dataclass
class Paper:
    """Dot positions as (x, y), plus the fold instructions still to apply."""

    dots: set[tuple[int, int]] = field(default_factory=set)
    folds: list[tuple[str, int]] = field(default_factory=list)

    @classmethod
    def parse(cls, data: str) -> Paper:
        dot_block, sep, fold_block = data.strip().partition("\n\n")
        if not sep:
            raise ValueError("expected dots and fold instructions separated by a blank line")
        paper = cls()
        for line in dot_block.splitlines():
            match = _DOT.match(line)
            if match is None:
                raise ValueError(f"malformed dot: {line!r}")
            paper.dots.add((int(match[1]), int(match[2])))
        for line in fold_block.splitlines():
            match = _FOLD.match(line)
            if match is None:
                raise ValueError(f"malformed fold instruction: {line!r}")
            paper.folds.append((match[1], int(match[2])))
        return paper

    def fold(self, axis: str, line: int) -> None:
        """Fold up along y=line, or left along x=line for any other axis."""
        if axis == "y":
            self.dots = {(x, 2 * line - y if y > line else y) for x, y in self.dots}
        else:
            self.dots = {(2 * line - x if x > line else x, y) for x, y in self.dots}

    def render(self) -> str:
        """Draw the dots as '#' on a field of '.', one row per line."""
        if not self.dots:
            return ""
        width = max(x for x, _ in self.dots) + 1
        height = max(y for _, y in self.dots) + 1
        return "".join(
            "".join("#" if (x, y) in self.dots else "." for x in range(width)) + "\n"
            for y in range(height)
        )

    def __len__(self) -> int:
        return len(self.dots)


def part_one(content: str) -> int:
    """Visible dots after the first fold."""
    paper = Paper.parse(content)
    for axis, line in paper.folds[:1]:
        paper.fold(axis, line)
    return len(paper)


def part_two(content: str) -> str:
    """The drawing left after every fold."""
    paper = Paper.parse(content)
    for axis, line in paper.folds:
        paper.fold(axis, line)
    return paper.render()


def main(argv: Sequence[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    filename = args[0] if args else "input.txt"
    content = Path(filename).read_text()

    try:
        answer = part_one(content)
    except ValueError as err:
        print("failed to parse PartOne", err)
        return
    print(f"Part One: {answer} ")

    try:
        drawing = part_two(content)
    except ValueError as err:
        print("failed to parse PartTwo", err)
        return
    print("Part Two:")
    print(drawing)


if __name__ == "__main__":
    main()