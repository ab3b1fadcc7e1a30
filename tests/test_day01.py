import pytest

from reindeer2021.day01 import main, part_one, part_two

EXAMPLE = [199, 200, 208, 210, 200, 207, 240, 269, 260, 263]


@pytest.mark.parametrize("solve, expected", [(part_one, 7), (part_two, 5)])
def test_example(solve, expected):
    assert solve(EXAMPLE) == expected


def test_main_reads_ten_values(tmp_path, capsys):
    path = tmp_path / "example.txt"
    path.write_text("\n".join(map(str, EXAMPLE)) + "\n")
    main([str(path)])
    assert capsys.readouterr().out == "Part One: 7 \nPart Two: 5 \n"


def test_part_one_flat_sequence():
    assert part_one([3, 3, 3]) == 0


@pytest.mark.parametrize("solve, nums", [(part_one, []), (part_two, [1, 2])])
def test_too_few_measurements_raise(solve, nums):
    with pytest.raises(ValueError):
        solve(nums)


def test_main_without_file(capsys):
    main([])
    assert capsys.readouterr().out.strip() == "You must pass the txt file as an arg"