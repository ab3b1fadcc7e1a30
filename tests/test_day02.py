import pytest

from reindeer2021.day02 import main, part_one, part_two

COURSE = ["forward 5", "down 5", "forward 8", "up 3", "down 8", "forward 2"]


@pytest.mark.parametrize("solve, expected", [(part_one, 150), (part_two, 900)])
def test_course(solve, expected):
    assert solve(COURSE) == expected


@pytest.mark.parametrize(
    "commands, expected",
    [
        (["forward 5", "backward 2", "down 3"], 9),
        (["forward 2", "sideways 9", "down 2"], 4),
    ],
)
def test_part_one_moves(commands, expected):
    assert part_one(commands) == expected


@pytest.mark.parametrize("solve, command", [(part_one, "forward x"), (part_two, "forward")])
def test_malformed_command_raises(solve, command):
    with pytest.raises(ValueError):
        solve([command])


def test_main_reports_course(tmp_path, capsys):
    course_file = tmp_path / "course.txt"
    course_file.write_text("\n".join(COURSE))
    main([str(course_file)])
    assert capsys.readouterr().out.splitlines() == ["Part One: 150 ", "Part Two: 900 "]