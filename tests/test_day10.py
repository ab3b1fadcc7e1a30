import pytest

from reindeer2021.day10 import autocomplete_score, check_line, main, part_one, part_two

EXAMPLE = [
    "[({(<(())[]>[[{[]{<()<>>",
    "[(()[<>])]({[<{<<[]>>(",
    "{([(<{}[<>[]}>{[]{[(<()>",
    "(((({<>}<{<{<>}{[]{[]{}",
    "[[<[([]))<([[{}[[()]]]",
    "[{[{({}]{}}([{[{{{}}([]",
    "{<[[]]>}<{[{[{[]{()[[[]",
    "[<(<(<(<{}))><([]([]()",
    "<{([([[(<>()){}]>(<<{{",
    "<{([{{}}[<[[[<>{}]]]>[]]",
]


def test_example_one():
    assert part_one(EXAMPLE) == 26397


def test_example_two():
    assert part_two(EXAMPLE) == 288957


def test_corrupted_line():
    check = check_line("{([(<{}[<>[]}>{[]{[(<()>")
    assert check.is_corrupted
    assert check.corrupted_by == "}"


def test_incomplete_line_completion():
    check = check_line("[({(<(())[]>[[{[]{<()<>>")
    assert check.is_incomplete
    assert check.completion == "}}]])})]"
    assert autocomplete_score(check.completion) == 288957


def test_autocomplete_score():
    assert autocomplete_score("])}>") == 294
    assert autocomplete_score("") == 0


def test_complete_line_has_empty_completion():
    check = check_line("([]{<>})")
    assert check.is_incomplete
    assert check.completion == ""


def test_unknown_character_raises():
    with pytest.raises(ValueError):
        check_line("(a)")


def test_unbalanced_closer_raises():
    with pytest.raises(ValueError):
        check_line(")")


def test_no_incomplete_lines_raises():
    with pytest.raises(ValueError):
        part_two(["(]"])


def test_main_prints_answers(tmp_path, capsys):
    data = tmp_path / "input.txt"
    data.write_text("\n".join(EXAMPLE) + "\n")
    main([str(data)])
    out = capsys.readouterr().out
    assert "Part One: 26397" in out
    assert "Part Two: 288957" in out