import pytest

from reindeer2021.day11 import Grid, main, part_one, part_two

EXAMPLE = """\
5483143223
2745854711
5264556173
6141336146
6357385478
4167524645
2176841721
6882881134
4846848554
5283751526""".splitlines()

SMALL = ["11111", "19991", "19191", "19991", "11111"]


def test_example_one():
    assert part_one(EXAMPLE) == 1656


def test_example_two():
    assert part_two(EXAMPLE) == 195


def test_small_grid_first_step():
    grid = Grid.parse(SMALL)
    assert grid.step() == 9
    assert grid.energy == [
        [3, 4, 5, 4, 3],
        [4, 0, 0, 0, 4],
        [5, 0, 0, 0, 5],
        [4, 0, 0, 0, 4],
        [3, 4, 5, 4, 3],
    ]


def test_small_grid_second_step():
    grid = Grid.parse(SMALL)
    grid.step()
    assert grid.step() == 0
    assert grid.energy[0] == [4, 5, 6, 5, 4]
    assert grid.energy[2] == [6, 1, 1, 1, 6]


def test_string_form():
    grid = Grid.parse(["12", "34"])
    assert str(grid) == "[[ 12\n   34 ]]"


def test_invalid_character_raises():
    with pytest.raises(ValueError):
        Grid.parse(["12a", "345"])


def test_main_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    main([str(path)])
    out = capsys.readouterr().out
    assert "Part One: 1656" in out
    assert "Part Two: 195" in out