"""Day 3: rucksack item priorities."""

from collections.abc import Iterable, Iterator
from itertools import islice

from aoc22.utils import intersect_all


class Rucksack:
    """A rucksack whose items are split evenly into two compartments."""

    def __init__(self, encoded: str) -> None:
        half = len(encoded) // 2
        self.compartments = [encoded[:half], encoded[half:]]

    def find_duplicated_item(self) -> str:
        """Return an item found in every compartment."""
        common = intersect_all(set(c) for c in self.compartments)
        if not common:
            raise ValueError("no duplicated item found")
        return min(common)

    def item_set(self) -> set[str]:
        """Return the set of all items in the rucksack."""
        return {item for compartment in self.compartments for item in compartment}


def find_badge(group: Iterable[str]) -> str:
    """Return the item shared by every rucksack of a group."""
    common = intersect_all(Rucksack(encoded).item_set() for encoded in group)
    if not common:
        raise ValueError("cannot find badge")
    return min(common)


def calculate_score(item: str) -> int:
    """Return the priority of an item: a-z are 1-26, A-Z are 27-52."""
    if not item:
        raise ValueError("empty item")
    code = ord(item[0])
    if ord("a") <= code <= ord("z"):
        return code - ord("a") + 1
    if ord("A") <= code <= ord("Z"):
        return code - ord("A") + 27
    raise ValueError(f"invalid item: {item!r}")


def read_rucksacks(lines: Iterable[str]) -> Iterator[str]:
    """Yield each line up to the first blank one."""
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line == "":
            return
        yield line


def read_groups(lines: Iterable[str], group_size: int) -> Iterator[list[str]]:
    """Yield complete groups of group_size rucksacks; an incomplete one is dropped."""
    if group_size < 1:
        raise ValueError("group size must be positive")
    rucksacks = read_rucksacks(lines)
    while True:
        group = list(islice(rucksacks, group_size))
        if len(group) < group_size:
            return
        yield group


def run_part1(path: str) -> None:
    """Print the priority sum of the items duplicated in each rucksack."""
    with open(path, encoding="utf-8") as handle:
        total = sum(
            calculate_score(Rucksack(row).find_duplicated_item())
            for row in read_rucksacks(handle)
        )
    print(f"Part 1: {total}")


def run_part2(path: str) -> None:
    """Print the priority sum of the badges of each group of three."""
    with open(path, encoding="utf-8") as handle:
        total = sum(calculate_score(find_badge(group)) for group in read_groups(handle, 3))
    print(f"Part 2: {total}")