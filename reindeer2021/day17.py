"""Day 17: fire a probe into a target area with drag and gravity."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

_TARGET = re.compile(
    r"\s*target area: x=(-?\d+)\.\.(-?\d+), y=(-?\d+)\.\.(-?\d+)"
)


@dataclass(frozen=True)
class Target:
    """An inclusive rectangular target area."""

    xmin: int
    xmax: int
    ymin: int
    ymax: int

    def contains(self, x: int, y: int) -> bool:
        """Whether the point lies inside the area."""
        return self.xmin <= x <= self.xmax and self.ymin <= y <= self.ymax


@dataclass
class Probe:
    """A probe's position and velocity, and the highest point it has reached."""

    x: int
    y: int
    vx: int
    vy: int
    max_height: int = 0
    _drag_x: int = field(default=-1, init=False, repr=False)

    def tick(self) -> None:
        """Advance one step: move, then apply drag and gravity."""
        self.x += self.vx
        self.y += self.vy
        # Once horizontal velocity reaches 0 it stays there.
        if self.vx == 0:
            self._drag_x = 0
        self.vx += self._drag_x
        self.vy -= 1
        self.max_height = max(self.max_height, self.y)

    def _missed(self, target: Target) -> bool:
        return self.x > target.xmax or self.y < target.ymin

    def launch(self, target: Target) -> bool:
        """Step until the probe lands in the target or passes it."""
        while not self._missed(target):
            self.tick()
            if target.contains(self.x, self.y):
                return True
        return False


def parse_target(data: str) -> Target:
    """Read 'target area: x=A..B, y=C..D'."""
    match = _TARGET.match(data)
    if match is None:
        raise ValueError(f"expected 4 values in target description: {data!r}")
    return Target(*(int(group) for group in match.groups()))


def _min_x_velocity(distance: int) -> int:
    """Smallest starting x velocity whose drag-limited travel reaches distance."""
    velocity = travelled = 0
    while travelled < distance:
        velocity += 1
        travelled += velocity
    return velocity


def _launches(target: Target) -> Iterator[tuple[Probe, bool]]:
    """Try every plausible starting velocity, yielding each probe and whether it hit."""
    x_low, x_high = _min_x_velocity(target.xmin), target.xmax
    # A probe fired upward returns to y=0 moving at -(vy+1), so vy beyond -ymin-1 overshoots.
    y_low, y_high = target.ymin, -target.ymin - 1
    for vy in range(y_low, y_high + 1):
        for vx in range(x_low, x_high + 1):
            probe = Probe(0, 0, vx, vy)
            yield probe, probe.launch(target)


def part_one(content: str) -> int:
    """Highest y reached by any probe that hits the target."""
    target = parse_target(content)
    return max((probe.max_height for probe, hit in _launches(target) if hit), default=0)


def part_two(content: str) -> int:
    """Number of starting velocities that hit the target."""
    target = parse_target(content)
    return sum(1 for _, hit in _launches(target) if hit)


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