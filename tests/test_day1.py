import pytest

from aoc22.day1 import find_richest_elves, read_elf_calories, run


@pytest.mark.parametrize(
    "calories, k, expected",
    [
        ([], 3, 0),
        ([1, 2, 3, 4, 5, 6], 3, 15),
        ([3, 1, 2, 4, 6, 5], 3, 15),
        ([1, 2], 3, 3),
    ],
)
def test_find_richest_elves(calories, k, expected):
    assert find_richest_elves(k, iter(calories)) == expected


def test_find_richest_elves_zero_k():
    assert find_richest_elves(0, [5, 6]) == 0


def test_read_elf_calories_groups():
    lines = ["1000\n", "2000\n", "3000\n", "\n", "4000\n", "\n", "5000\n", "6000\n", "\n"]
    assert list(read_elf_calories(lines)) == [6000, 4000, 11000]


def test_read_elf_calories_drops_unterminated_group():
    lines = ["1\n", "2\n", "\n", "7\n"]
    assert list(read_elf_calories(lines)) == [3]


def test_read_elf_calories_handles_crlf():
    assert list(read_elf_calories(["4\r\n", "5\r\n", "\r\n"])) == [9]


def test_read_elf_calories_rejects_garbage():
    with pytest.raises(ValueError):
        list(read_elf_calories(["abc\n", "\n"]))


def test_run_prints_total(tmp_path, capsys):
    path = tmp_path / "day1.txt"
    path.write_text("1\n2\n\n3\n\n10\n\n1\n\n")
    run(str(path))
    assert capsys.readouterr().out == "16\n"