import pytest

from reindeer2021.day07 import main, parse_positions, part_one, part_two

CRABS = "16,1,2,0,4,2,7,1,2,14\n"


def test_parse_positions():
    assert parse_positions(CRABS) == [16, 1, 2, 0, 4, 2, 7, 1, 2, 14]


@pytest.mark.parametrize(
    "solve, positions, expected",
    [
        (part_one, parse_positions(CRABS), 37),
        (part_two, parse_positions(CRABS), 168),
        (part_one, [5], 0),
        (part_two, [5], 0),
        (part_one, [0, 4], 4),
    ],
)
def test_least_fuel(solve, positions, expected):
    assert solve(positions) == expected


@pytest.mark.parametrize("solve", [part_one, part_two])
def test_empty_positions_raise(solve):
    with pytest.raises(ValueError):
        solve([])


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        parse_positions("1,x,3")


def test_main_reports_fuel(tmp_path, capsys):
    crab_file = tmp_path / "crabs.txt"
    crab_file.write_text(CRABS)
    main([str(crab_file)])
    assert capsys.readouterr().out.splitlines() == ["Part One: 37 ", "Part Two: 168 "]