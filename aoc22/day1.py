"""Day 1: total calories carried by the best supplied elves."""

import heapq
from collections.abc import Iterable, Iterator


def read_elf_calories(lines: Iterable[str]) -> Iterator[int]:
    """Yield the calorie total of each group of lines ended by a blank line.

    A group that is not followed by a blank line is not yielded.
    """
    current = 0
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line == "":
            yield current
            current = 0
        else:
            current += int(line)


def find_richest_elves(k: int, calories: Iterable[int]) -> int:
    """Return the sum of the k largest calorie totals."""
    return sum(heapq.nlargest(k, calories))


def run(path: str) -> None:
    """Print the total carried by the three richest elves in the file."""
    with open(path, encoding="utf-8") as handle:
        print(find_richest_elves(3, read_elf_calories(handle)))