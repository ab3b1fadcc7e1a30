"""Day 4: play bingo against a giant squid."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from reindeer2021.day01 import _input_path, _report

BOARD_SIZE = 5


@dataclass(eq=False)
class _Board:
    rows: tuple[tuple[int, ...], ...]
    marked: set[tuple[int, int]] = field(default_factory=set)

    @classmethod
    def parse(cls, block: str) -> _Board:
        rows = [[int(value) for value in line.split()] for line in block.splitlines() if line.strip()]
        if len(rows) > BOARD_SIZE or any(len(row) > BOARD_SIZE for row in rows):
            raise ValueError(f"board larger than {BOARD_SIZE}x{BOARD_SIZE}: {block!r}")
        padded = [tuple(row + [0] * (BOARD_SIZE - len(row))) for row in rows]
        padded += [(0,) * BOARD_SIZE] * (BOARD_SIZE - len(padded))
        return cls(tuple(padded))

    def _cells(self) -> Iterator[tuple[int, int, int]]:
        for r, row in enumerate(self.rows):
            for c, value in enumerate(row):
                yield r, c, value

    def mark(self, number: int) -> bool:
        """Mark the first cell holding number; return whether that completes a line."""
        hit = next(((r, c) for r, c, value in self._cells() if value == number), None)
        if hit is None:
            return False
        self.marked.add(hit)
        r, c = hit
        row_done = all((r, col) in self.marked for col in range(BOARD_SIZE))
        col_done = all((row, c) in self.marked for row in range(BOARD_SIZE))
        return row_done or col_done

    def unmarked_sum(self) -> int:
        return sum(value for r, c, value in self._cells() if (r, c) not in self.marked)


def _parse(content: str) -> tuple[Iterator[int], list[_Board]]:
    header, *blocks = content.strip().split("\n\n")
    draws = (int(raw) for raw in header.split(","))
    return draws, [_Board.parse(block) for block in blocks]


def part_one(content: str) -> int:
    """Score of the first board to win."""
    draws, boards = _parse(content)
    for number in draws:
        winners = [board for board in boards if board.mark(number)]
        if winners:
            return winners[0].unmarked_sum() * number
    return 0


def part_two(content: str) -> int:
    """Score of the last board to win."""
    draws, boards = _parse(content)
    for number in draws:
        winners = [board for board in boards if board.mark(number)]
        if not winners:
            continue
        if len(boards) == 1:
            return boards[0].unmarked_sum() * number
        boards = [board for board in boards if board not in winners]
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    game = Path(_input_path(argv, "input.txt")).read_text()
    _report(game, (part_one, part_two))


if __name__ == "__main__":
    main()