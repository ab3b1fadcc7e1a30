"""Day 8: decode scrambled seven-segment displays."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

# Segment counts that identify a digit on their own: 1, 7, 4 and 8.
_UNIQUE_LENGTHS = {2: 1, 3: 7, 4: 4, 7: 8}
_OUTPUT_DIGITS = 4


def _normalise(pattern: str) -> str:
    return "".join(sorted(pattern))


def _contains(outer: str, inner: str) -> bool:
    return set(inner) <= set(outer)


@dataclass(frozen=True)
class Entry:
    """The ten signal patterns and four output digits of one display."""

    patterns: tuple[str, ...]
    digits: tuple[str, ...]

    def _mapping(self) -> dict[str, int]:
        mapping: dict[str, int] = {}
        fives: list[str] = []
        sixes: list[str] = []
        for pattern in self.patterns:
            size = len(pattern)
            if size in _UNIQUE_LENGTHS:
                mapping[pattern] = _UNIQUE_LENGTHS[size]
            elif size == 5:
                fives.append(pattern)
            elif size == 6:
                sixes.append(pattern)

        by_value = {value: pattern for pattern, value in mapping.items()}
        if 1 not in by_value or 4 not in by_value:
            raise ValueError("patterns for 1 and 4 are required")
        one, four = by_value[1], by_value[4]

        def claim(candidates: list[str], part: str, value: int) -> str:
            for candidate in candidates:
                if _contains(candidate, part):
                    mapping[candidate] = value
                    candidates.remove(candidate)
                    return candidate
            raise ValueError(f"pattern not found: {part}")

        # Of 2, 3 and 5 only 3 holds every segment of 1.
        claim(fives, one, 3)
        # 9 holds every segment of 4, then 0 holds 1; 6 is what is left.
        claim(sixes, four, 9)
        claim(sixes, one, 0)
        if not sixes:
            raise ValueError("no pattern left for 6")
        six = sixes[0]
        mapping[six] = 6
        # 5 fits inside 6; 2 does not.
        for candidate in fives:
            mapping[candidate] = 5 if _contains(six, candidate) else 2
        return mapping

    def decode(self) -> int:
        """The four output digits read as a single number."""
        mapping = self._mapping()
        try:
            text = "".join(str(mapping[digit]) for digit in self.digits)
        except KeyError as err:
            raise ValueError(f"undecodable output pattern: {err.args[0]}") from None
        return int(text)


def parse_entry(line: str) -> Entry:
    """Parse 'patterns | outputs' into an Entry with sorted segment letters."""
    left, sep, right = line.partition(" | ")
    if not sep:
        raise ValueError(f"missing ' | ' separator: {line!r}")
    digits = tuple(_normalise(code) for code in right.split())
    if len(digits) != _OUTPUT_DIGITS:
        raise ValueError(f"expected {_OUTPUT_DIGITS} output digits, got {len(digits)}")
    return Entry(tuple(_normalise(p) for p in left.split()), digits)


def part_one(lines: Iterable[str]) -> int:
    """How many output digits are 1, 4, 7 or 8."""
    lengths: Counter[int] = Counter()
    for line in lines:
        _, sep, right = line.partition(" | ")
        if not sep:
            raise ValueError(f"missing ' | ' separator: {line!r}")
        lengths.update(len(value) for value in right.split())
    return sum(lengths[size] for size in _UNIQUE_LENGTHS)


def part_two(lines: Iterable[str]) -> int:
    """Sum of all decoded output values."""
    return sum(parse_entry(line).decode() for line in lines)


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