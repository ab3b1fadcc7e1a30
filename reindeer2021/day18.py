"""Day 18: add and reduce snailfish numbers."""

from __future__ import annotations

import json
import logging
import sys
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from functools import reduce as fold
from pathlib import Path
from typing import Any, Union

logger = logging.getLogger(__name__)

EXPLODE_DEPTH = 4
SPLIT_AT = 10

Element = Union[int, "Pair"]
_Slot = tuple["Pair", str]


@dataclass(eq=False)
class Pair:
    """A snailfish number: two elements, each a regular number or a nested pair."""

    left: Element
    right: Element
    parent: Pair | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for child in (self.left, self.right):
            if isinstance(child, Pair):
                child.parent = self

    def _depth(self) -> int:
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def _root(self) -> Pair:
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def _leaves(self) -> Iterator[_Slot]:
        """Every regular-number slot, left to right, as (owning pair, side)."""
        for side in ("left", "right"):
            child = getattr(self, side)
            if isinstance(child, Pair):
                yield from child._leaves()
            else:
                yield self, side

    def add(self, other: Pair) -> Pair:
        """Join two numbers into a new pair and reduce it."""
        joined = Pair(self, other)
        joined.reduce()
        return joined

    def reduce(self) -> None:
        """Explode the leftmost deep pair, else split the leftmost large number, until neither applies."""
        while True:
            deep = self.nested_at_depth(EXPLODE_DEPTH)
            if deep is not None:
                deep.explode()
                logger.debug("After explode: %s", self)
                continue
            large = self.first_with_value_at_least(SPLIT_AT)
            if large is None:
                return
            large.split(SPLIT_AT)
            logger.debug("After split:   %s", self)

    def explode(self) -> None:
        """Push both numbers out to their neighbours and replace this pair with 0."""
        parent = self.parent
        if parent is None:
            raise ValueError("cannot explode the outermost pair")
        if not (isinstance(self.left, int) and isinstance(self.right, int)):
            raise ValueError(f"only a pair of regular numbers can explode: {self}")

        slots = list(self._root()._leaves())
        index = next(i for i, (owner, side) in enumerate(slots) if owner is self and side == "left")
        if index > 0:
            owner, side = slots[index - 1]
            setattr(owner, side, getattr(owner, side) + self.left)
        if index + 2 < len(slots):
            owner, side = slots[index + 2]
            setattr(owner, side, getattr(owner, side) + self.right)

        side = "left" if parent.left is self else "right"
        setattr(parent, side, 0)
        self.parent = None

    def split(self, threshold: int) -> None:
        """Replace the left number if it is at least threshold, else the right one, with a halved pair."""
        side = "left" if isinstance(self.left, int) and self.left >= threshold else "right"
        value = getattr(self, side)
        if not isinstance(value, int):
            raise ValueError(f"no regular number to split in {self}")
        half = value // 2
        setattr(self, side, Pair(half, value - half, parent=self))

    def nested_at_depth(self, depth: int) -> Pair | None:
        """The first pair, in breadth-first order, nested inside at least depth pairs."""
        queue: deque[Pair] = deque([self])
        while queue:
            current = queue.popleft()
            if current._depth() >= depth:
                return current
            queue.extend(child for child in (current.left, current.right) if isinstance(child, Pair))
        return None

    def first_with_value_at_least(self, value: int) -> Pair | None:
        """The pair holding the leftmost regular number that is at least value."""
        for child in (self.left, self.right):
            if isinstance(child, Pair):
                found = child.first_with_value_at_least(value)
                if found is not None:
                    return found
            elif child >= value:
                return self
        return None

    def magnitude(self) -> int:
        """Three times the left magnitude plus twice the right."""
        left = self.left.magnitude() if isinstance(self.left, Pair) else self.left
        right = self.right.magnitude() if isinstance(self.right, Pair) else self.right
        return 3 * left + 2 * right

    def __str__(self) -> str:
        return f"[{self.left},{self.right}]"


def _build(node: Any) -> Pair:
    if not isinstance(node, list) or len(node) != 2:
        raise ValueError(f"a pair needs exactly two elements: {node!r}")
    elements: list[Element] = []
    for item in node:
        if isinstance(item, list):
            elements.append(_build(item))
        elif isinstance(item, (int, float)) and not isinstance(item, bool):
            elements.append(int(item))
        else:
            raise ValueError(f"not a number or a pair: {item!r}")
    return Pair(elements[0], elements[1])


def parse_pair(text: str) -> Pair:
    """Parse a snailfish number written as nested two-element lists."""
    return _build(json.loads(text))


def part_one(lines: Sequence[str]) -> int:
    """Magnitude of the sum of every number, added in order."""
    if not lines:
        raise ValueError("no snailfish numbers given")
    total = fold(lambda acc, line: acc.add(parse_pair(line)), lines[1:], parse_pair(lines[0]))
    return total.magnitude()


def part_two(lines: Sequence[str]) -> int:
    """Largest magnitude from adding any two different numbers."""
    best = 0
    for i, first in enumerate(lines):
        for j, second in enumerate(lines):
            if i != j:
                best = max(best, parse_pair(first).add(parse_pair(second)).magnitude())
    return best


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