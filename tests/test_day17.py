import pytest

from reindeer2021.day17 import Probe, Target, parse_target, part_one, part_two

EXAMPLE = "target area: x=20..30, y=-10..-5\n"


def test_ticking():
    probe = Probe(0, 0, 7, 2)
    probe.tick()
    assert (probe.x, probe.y) == (7, 2)
    assert (probe.vx, probe.vy) == (6, 1)
    probe.tick()
    assert (probe.x, probe.y) == (13, 3)
    assert (probe.vx, probe.vy) == (5, 0)


def test_horizontal_velocity_stops_at_zero():
    probe = Probe(0, 0, 1, 0)
    for _ in range(4):
        probe.tick()
    assert probe.vx == 0
    assert probe.x == 1


def test_max_height_tracked():
    probe = Probe(0, 0, 0, 3)
    for _ in range(6):
        probe.tick()
    assert probe.max_height == 6


@pytest.mark.parametrize("point", [(20, -5), (25, -7), (30, -10)])
def test_target_contains(point):
    assert Target(20, 30, -10, -5).contains(*point) is True


@pytest.mark.parametrize("point", [(19, -5), (31, -5), (15, -4), (19, -4)])
def test_target_does_not_contain(point):
    assert Target(20, 30, -10, -5).contains(*point) is False


def test_probe_launch_hits():
    assert Probe(0, 0, 20, -10).launch(Target(20, 30, -10, -5)) is True


def test_probe_launch_misses():
    assert Probe(0, 0, 17, -4).launch(Target(20, 30, -10, -5)) is False


def test_parse_target():
    assert parse_target(EXAMPLE) == Target(20, 30, -10, -5)


def test_parse_target_rejects_garbage():
    with pytest.raises(ValueError):
        parse_target("target: somewhere")


def test_example_part_one():
    assert part_one(EXAMPLE) == 45


def test_example_part_two():
    assert part_two(EXAMPLE) == 112


def test_part_two_failed_example():
    target = parse_target(EXAMPLE)
    assert Probe(0, 0, 6, 0).launch(target) is True