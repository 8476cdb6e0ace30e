import pytest

from aoc22.day4 import SectionRange, parse_section_range, read_assignments, run


@pytest.mark.parametrize(
    "text, start, end",
    [("2-4", 2, 4), ("12-40", 12, 40), ("0-1", 0, 1), ("00-01", 0, 1)],
)
def test_parse_section_range(text, start, end):
    section = parse_section_range(text)
    assert (section.start, section.end) == (start, end)


@pytest.mark.parametrize("text", ["x-4", "2-y", "24"])
def test_parse_section_range_invalid(text):
    with pytest.raises(ValueError):
        parse_section_range(text)


@pytest.mark.parametrize("first, second", [((2, 8), (3, 7)), ((3, 7), (6, 6))])
def test_fully_contains(first, second):
    assert SectionRange(*first).fully_contains(SectionRange(*second)) is True


def test_not_fully_contains():
    assert SectionRange(3, 7).fully_contains(SectionRange(2, 8)) is False


@pytest.mark.parametrize(
    "first, second",
    [((5, 7), (7, 9)), ((2, 8), (3, 7)), ((6, 6), (4, 6)), ((2, 6), (4, 8))],
)
def test_contains(first, second):
    assert SectionRange(*first).contains(SectionRange(*second)) is True


@pytest.mark.parametrize("first, second", [((2, 4), (6, 8)), ((2, 3), (4, 5))])
def test_not_contains(first, second):
    assert SectionRange(*first).contains(SectionRange(*second)) is False


def test_read_assignments_stops_at_blank_line():
    lines = ["2-4,6-8\n", "2-3,4-5\n", "\n", "5-7,7-9\n"]
    assert list(read_assignments(lines)) == [("2-4", "6-8"), ("2-3", "4-5")]


def test_read_assignments_rejects_line_without_comma():
    with pytest.raises(ValueError):
        list(read_assignments(["2-4\n"]))


def test_run_sample(tmp_path, capsys):
    path = tmp_path / "day4.txt"
    path.write_text("2-4,6-8\n2-3,4-5\n5-7,7-9\n2-8,3-7\n6-6,4-6\n2-6,4-8\n")
    run(str(path))
    assert capsys.readouterr().out == "Part 1: 2\nPart 2: 4\n"