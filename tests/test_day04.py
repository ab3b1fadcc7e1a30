import pytest

from reindeer2021.day04 import main, part_one, part_two

GAME = """7,4,9,5,11,17,23,2,0,14,21,24,10,16,13,6,15,25,12,22,18,20,8,19,3,26,1

22 13 17 11  0
 8  2 23  4 24
21  9 14 16  7
 6 10  3 18  5
 1 12 20 15 19

 3 15  0  2 22
 9 18 13 17  5
19  8  7 25 23
20 11 10 24  4
14 21 16 12  6

14 21 17 24  4
10 16 15  9 19
18  8 23 26 20
22 11 13  6  5
 2  0 12  3  7
"""

SINGLE_BOARD = """1,2,3,4,5

1 2 3 4 5
6 7 8 9 10
11 12 13 14 15
16 17 18 19 20
21 22 23 24 25
"""


@pytest.mark.parametrize(
    "solve, content, expected",
    [
        (part_one, GAME, 4512),
        (part_two, GAME, 1924),
        # unmarked sum is 325 - 15 = 310, last number 5
        (part_one, SINGLE_BOARD, 1550),
        (part_two, SINGLE_BOARD, 1550),
        (part_one, SINGLE_BOARD.replace("1,2,3,4,5", "1,7,13"), 0),
    ],
)
def test_scores(solve, content, expected):
    assert solve(content) == expected


@pytest.mark.parametrize(
    "solve, content",
    [
        (part_one, SINGLE_BOARD.replace("1,2,3,4,5", "1,x")),
        (part_two, SINGLE_BOARD.replace("13", "zz")),
    ],
)
def test_bad_input_raises(solve, content):
    with pytest.raises(ValueError):
        solve(content)


def test_main_reports_failure(tmp_path, capsys):
    game_file = tmp_path / "game.txt"
    game_file.write_text(SINGLE_BOARD.replace("1,2,3,4,5", "1,x"))
    main([str(game_file)])
    assert capsys.readouterr().out.startswith("failed to parse PartOne")


def test_main_reports_scores(tmp_path, capsys):
    game_file = tmp_path / "game.txt"
    game_file.write_text(GAME)
    main([str(game_file)])
    assert capsys.readouterr().out.splitlines() == ["Part One: 4512 ", "Part Two: 1924 "]