"""Day 10: score corrupted and incomplete bracket chunks."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

_PAIRS = {"(": ")", "[": "]", "{": "}", "<": ">"}
_OPENERS = {closer: opener for opener, closer in _PAIRS.items()}
_CORRUPT_SCORES = {")": 3, "]": 57, "}": 1197, ">": 25137}
_AUTOCOMPLETE_SCORES = {")": 1, "]": 2, "}": 3, ">": 4}


@dataclass(frozen=True)
class LineCheck:
    """Outcome of checking one line: the offending closer, or the missing closers."""

    corrupted_by: str | None = None
    completion: str = ""

    @property
    def is_corrupted(self) -> bool:
        return self.corrupted_by is not None

    @property
    def is_incomplete(self) -> bool:
        return self.corrupted_by is None


def check_line(line: str) -> LineCheck:
    """Find the first illegal closer, or the closers needed to finish the line."""
    stack: list[str] = []
    for char in line:
        if char in _PAIRS:
            stack.append(char)
        elif char in _OPENERS:
            if not stack:
                raise ValueError(f"closing {char!r} with nothing open")
            if stack.pop() != _OPENERS[char]:
                return LineCheck(corrupted_by=char)
        else:
            raise ValueError(f"unexpected character {char!r}")
    return LineCheck(completion="".join(_PAIRS[opener] for opener in reversed(stack)))


def autocomplete_score(text: str) -> int:
    """Score a completion string: times five, plus the closer's points, per character."""
    score = 0
    for char in text:
        if char not in _AUTOCOMPLETE_SCORES:
            raise ValueError(f"not a closing bracket: {char!r}")
        score = score * 5 + _AUTOCOMPLETE_SCORES[char]
    return score


def part_one(lines: Iterable[str]) -> int:
    """Total syntax error score of corrupted lines."""
    checks = (check_line(line) for line in lines)
    return sum(_CORRUPT_SCORES[check.corrupted_by] for check in checks if check.corrupted_by)


def part_two(lines: Iterable[str]) -> int:
    """Middle autocomplete score of the incomplete lines."""
    scores = sorted(
        autocomplete_score(check.completion)
        for check in map(check_line, lines)
        if check.is_incomplete
    )
    if not scores:
        raise ValueError("no incomplete lines")
    return scores[len(scores) // 2]


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