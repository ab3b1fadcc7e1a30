import pytest

from reindeer2021.day09 import HeightMap, main, part_one, part_two

FLOOR = ["2199943210", "3987894921", "9856789892", "8767896789", "9899965678"]


@pytest.mark.parametrize("solve, expected", [(part_one, 15), (part_two, 1134)])
def test_floor(solve, expected):
    assert solve(FLOOR) == expected


def test_low_points():
    assert HeightMap.parse(FLOOR).low_points() == [(0, 1), (0, 9), (2, 2), (4, 6)]


@pytest.mark.parametrize(
    "point, size",
    [((0, 1), 3), ((0, 9), 9), ((2, 2), 14), ((4, 6), 9)],
)
def test_basin_sizes(point, size):
    assert HeightMap.parse(FLOOR).basin_size(point) == size


def test_out_of_range_point_raises():
    with pytest.raises(IndexError):
        HeightMap.parse(FLOOR).basin_size((10, 0))


@pytest.mark.parametrize("solve, lines", [(HeightMap.parse, ["12a"]), (part_two, ["191"])])
def test_bad_map_raises(solve, lines):
    with pytest.raises(ValueError):
        solve(lines)


def test_main_reports_risk(tmp_path, capsys):
    map_file = tmp_path / "floor.txt"
    map_file.write_text("\n".join(FLOOR))
    main([str(map_file)])
    assert capsys.readouterr().out.splitlines() == ["Part One: 15 ", "Part Two: 1134 "]