"""Day 4: overlapping section assignments."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class SectionRange:
    """An inclusive range of section IDs."""

    start: int
    end: int

    def fully_contains(self, other: "SectionRange") -> bool:
        """Return True if this range covers all of other."""
        return self.start <= other.start and self.end >= other.end

    def contains(self, other: "SectionRange") -> bool:
        """Return True if this range shares at least one section with other."""
        return self.start <= other.end and self.end >= other.start


def parse_section_range(text: str) -> SectionRange:
    """Parse a range written as START-END."""
    parts = text.split("-")
    if len(parts) < 2:
        raise ValueError(f"invalid section range: {text!r}")
    try:
        start = int(parts[0])
    except ValueError:
        raise ValueError(f"invalid start: {parts[0]!r}") from None
    try:
        end = int(parts[1])
    except ValueError:
        raise ValueError(f"invalid end: {parts[1]!r}") from None
    return SectionRange(start, end)


def read_assignments(lines: Iterable[str]) -> Iterator[tuple[str, str]]:
    """Yield the two comma-separated ranges of each line up to the first blank one."""
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line == "":
            return
        parts = line.split(",")
        if len(parts) < 2:
            raise ValueError(f"invalid assignment line: {line!r}")
        yield parts[0], parts[1]


def run(path: str) -> None:
    """Print how many pairs fully contain and how many overlap each other."""
    fully_contains = 0
    contains = 0
    with open(path, encoding="utf-8") as handle:
        for first_text, second_text in read_assignments(handle):
            first = parse_section_range(first_text)
            second = parse_section_range(second_text)
            if first.fully_contains(second) or second.fully_contains(first):
                fully_contains += 1
            if first.contains(second):
                contains += 1
    print(f"Part 1: {fully_contains}")
    print(f"Part 2: {contains}")