import pytest

from aoc22.day5 import (
    CrateStacks,
    parse_crate_stacks,
    parse_move,
    read_moves,
    run_part1,
    run_part2,
)

SAMPLE = (
    "    [D]    \n"
    "[N] [C]    \n"
    "[Z] [M] [P]\n"
    " 1   2   3 \n"
    "\n"
    "move 1 from 2 to 1\n"
    "move 3 from 1 to 3\n"
    "move 2 from 2 to 1\n"
    "move 1 from 1 to 2\n"
)


def _sample_stacks():
    return CrateStacks([["Z", "N"], ["M", "C", "D"], ["P"]])


def _apply_sample_moves(stacks, keep_order):
    stacks.move(1, 2, 1, keep_order)
    stacks.move(3, 1, 3, keep_order)
    stacks.move(2, 2, 1, keep_order)
    stacks.move(1, 1, 2, keep_order)


def test_move_reversed():
    stacks = _sample_stacks()
    _apply_sample_moves(stacks, keep_order=False)
    assert stacks.top_crates() == ["C", "M", "Z"]


def test_move_ordered():
    stacks = _sample_stacks()
    _apply_sample_moves(stacks, keep_order=True)
    assert stacks.top_crates() == ["M", "C", "D"]


def test_move_does_not_change_input_lists():
    original = [["Z", "N"], ["M"]]
    stacks = CrateStacks(original)
    stacks.move(2, 1, 2, False)
    assert original == [["Z", "N"], ["M"]]
    assert stacks.stacks == [[], ["M", "N", "Z"]]


def test_move_too_many_crates():
    with pytest.raises(ValueError):
        _sample_stacks().move(3, 3, 1, False)


def test_top_crates_of_empty_stack():
    with pytest.raises(IndexError):
        CrateStacks([["A"], []]).top_crates()


def test_parse_crate_stacks():
    stacks = parse_crate_stacks(SAMPLE.splitlines(keepends=True))
    assert stacks.stacks == [["Z", "N"], ["M", "C", "D"], ["P"]]
    assert stacks.top_crates() == ["N", "D", "P"]


def test_parse_crate_stacks_empty():
    with pytest.raises(ValueError):
        parse_crate_stacks(["\n"])


def test_parse_move():
    assert parse_move("move 13 from 2 to 9") == (13, 2, 9)


def test_parse_move_invalid():
    with pytest.raises(ValueError):
        parse_move("shift 1 from 2 to 3")


def test_read_moves_after_drawing():
    lines = iter(SAMPLE.splitlines(keepends=True))
    parse_crate_stacks(lines)
    assert list(read_moves(lines)) == [(1, 2, 1), (3, 1, 3), (2, 2, 1), (1, 1, 2)]


def test_run_part1(tmp_path, capsys):
    path = tmp_path / "day5.txt"
    path.write_text(SAMPLE)
    run_part1(str(path))
    assert capsys.readouterr().out == "Part 1: [C M Z]\n"


def test_run_part2(tmp_path, capsys):
    path = tmp_path / "day5.txt"
    path.write_text(SAMPLE)
    run_part2(str(path))
    assert capsys.readouterr().out == "Part 2: [M C D]\n"