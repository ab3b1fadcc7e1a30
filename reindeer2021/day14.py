"""Day 14: grow a polymer by pair insertion and count its elements."""

from __future__ import annotations

import re
import sys
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import pairwise
from pathlib import Path

_RULE = re.compile(r"\s*(\S{1,2})\s*->\s*(\S)")


@dataclass
class Polymer:
    """A polymer template and the rules saying which element goes between a pair."""

    template: str
    rules: dict[str, str] = field(default_factory=dict)

    @classmethod
    def parse(cls, data: str) -> Polymer:
        template, sep, rule_block = data.strip().partition("\n\n")
        if not sep:
            raise ValueError("expected a template and insertion rules separated by a blank line")
        rules: dict[str, str] = {}
        for line in rule_block.splitlines():
            match = _RULE.match(line)
            if match is None:
                # Lines that are not rules are ignored.
                continue
            rules[match[1]] = match[2]
        return cls(template.strip(), rules)

    def insert_pairs(self, steps: int) -> Counter[str]:
        """Element counts of the polymer after the given number of insertion steps."""
        pairs = Counter(first + second for first, second in pairwise(self.template))
        elements = Counter(self.template)
        for _ in range(steps):
            grown: Counter[str] = Counter()
            for pair, count in pairs.items():
                inserted = self.rules.get(pair)
                if inserted is None:
                    grown[pair] += count
                    continue
                elements[inserted] += count
                grown[pair[0] + inserted] += count
                grown[inserted + pair[1]] += count
            pairs = grown
        return elements


def _spread(elements: Counter[str]) -> int:
    if not elements:
        raise ValueError("polymer has no elements")
    counts = elements.values()
    return max(counts) - min(counts)


def part_one(content: str) -> int:
    """Most common minus least common element count after 10 steps."""
    return _spread(Polymer.parse(content).insert_pairs(10))


def part_two(content: str) -> int:
    """Most common minus least common element count after 40 steps."""
    return _spread(Polymer.parse(content).insert_pairs(40))


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
        answer2 = part_two(content)
    except ValueError as err:
        print("failed to parse PartTwo", err)
        return
    print(f"Part Two: {answer2} ")


if __name__ == "__main__":
    main()