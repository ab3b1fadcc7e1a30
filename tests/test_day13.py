import pytest

from reindeer2021.day13 import Paper, main, part_one, part_two

EXAMPLE = """\
6,10
0,14
9,10
0,3
10,4
4,11
6,0
6,12
4,1
0,13
10,12
3,4
3,0
8,4
1,10
2,14
8,10
9,0

fold along y=7
fold along x=5
"""

SQUARE = "#####\n#...#\n#...#\n#...#\n#####\n"


def test_example_one():
    assert part_one(EXAMPLE) == 17


def test_example_two_draws_square():
    assert part_two(EXAMPLE) == SQUARE


def test_parse_reads_dots_and_folds():
    paper = Paper.parse(EXAMPLE)
    assert len(paper) == 18
    assert (6, 10) in paper.dots
    assert paper.folds == [("y", 7), ("x", 5)]


def test_fold_up_mirrors_points():
    paper = Paper(dots={(0, 14), (3, 2)})
    paper.fold("y", 7)
    assert paper.dots == {(0, 0), (3, 2)}


def test_fold_left_mirrors_points():
    paper = Paper(dots={(10, 4), (1, 1)})
    paper.fold("x", 5)
    assert paper.dots == {(0, 4), (1, 1)}


def test_render_small():
    paper = Paper(dots={(0, 0), (2, 1)})
    assert paper.render() == "#..\n..#\n"


def test_missing_fold_section_raises():
    with pytest.raises(ValueError):
        Paper.parse("1,2\n3,4\n")


def test_main_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    out = capsys.readouterr().out
    assert "Part One: 17" in out
    assert SQUARE in out