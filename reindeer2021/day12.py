"""Day 12: count paths through a system of connected caves."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

START = "start"
END = "end"


def _is_big(name: str) -> bool:
    return name[0].isupper()


@dataclass
class CaveSystem:
    """Caves and the caves each one leads into."""

    flows: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def parse(cls, lines: Iterable[str]) -> CaveSystem:
        system = cls()
        for line in lines:
            parts = line.strip().split("-")
            if len(parts) != 2 or not all(parts):
                raise ValueError(f"malformed connection: {line!r}")
            system.connect(*parts)
        return system

    def connect(self, first: str, second: str) -> None:
        """Link two caves; nothing leads into start and end leads nowhere."""
        self.flows.setdefault(first, [])
        self.flows.setdefault(second, [])
        if second != START and first != END:
            self.flows[first].append(second)
        if first != START and second != END:
            self.flows[second].append(first)

    def paths(self, allow_revisit: bool) -> Iterator[tuple[str, ...]]:
        """Every path from start to end; small caves at most once, or one of them twice."""
        if START not in self.flows:
            raise ValueError("cave system has no start")

        def walk(path: tuple[str, ...], revisited: bool) -> Iterator[tuple[str, ...]]:
            for cave in self.flows[path[-1]]:
                revisit = not _is_big(cave) and cave in path
                if revisit and (not allow_revisit or revisited):
                    continue
                extended = path + (cave,)
                if cave == END:
                    yield extended
                else:
                    yield from walk(extended, revisited or revisit)

        yield from walk((START,), False)

    def count_paths(self, allow_revisit: bool) -> int:
        """Number of distinct paths from start to end."""
        return sum(1 for _ in self.paths(allow_revisit))

    def __str__(self) -> str:
        lines = []
        for name, targets in self.flows.items():
            label = f"{name} (big)" if _is_big(name) else name
            lines.append(f"\n  {label:<8}: " + ", ".join(targets))
        return "CaveSystem {" + "".join(lines) + "\n}"


def part_one(lines: Iterable[str]) -> int:
    """Paths visiting each small cave at most once."""
    return CaveSystem.parse(lines).count_paths(allow_revisit=False)


def part_two(lines: Iterable[str]) -> int:
    """Paths where a single small cave may be visited twice."""
    return CaveSystem.parse(lines).count_paths(allow_revisit=True)


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