"""Day 5: rearranging stacks of crates."""

import re
from collections.abc import Iterable, Iterator

_MOVE_PATTERN = re.compile(r"move (\d+) from (\d+) to (\d+)")


class CrateStacks:
    """Numbered stacks of crates, each listed from bottom to top."""

    def __init__(self, stacks: Iterable[Iterable[str]]) -> None:
        self.stacks = [list(stack) for stack in stacks]

    def move(self, qty: int, src: int, dst: int, keep_order: bool) -> None:
        """Move qty crates from stack src to stack dst (both 1-indexed).

        Unless keep_order is set, crates are moved one at a time, so their
        order is reversed on the destination stack.
        """
        source = self.stacks[src - 1]
        if qty < 0 or qty > len(source):
            raise ValueError(f"cannot move {qty} crates from stack {src}")
        moved = source[len(source) - qty:]
        if not keep_order:
            moved.reverse()
        del source[len(source) - qty:]
        self.stacks[dst - 1].extend(moved)

    def top_crates(self) -> list[str]:
        """Return the top crate of every stack."""
        return [stack[-1] for stack in self.stacks]


def parse_crate_stacks(lines: Iterable[str]) -> CrateStacks:
    """Read the crate drawing up to the first blank line.

    The last line of the drawing holds the stack numbers, which fix the
    column of each stack.
    """
    drawing = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line == "":
            break
        drawing.append(line)
    if not drawing:
        raise ValueError("missing crate drawing")

    *rows, labels = drawing
    columns = [index for index, char in enumerate(labels) if char.isnumeric()]
    stacks: list[list[str]] = [[] for _ in columns]

    for row in reversed(rows):
        for stack, column in zip(stacks, columns):
            if column >= len(row):
                break
            if row[column].isalpha():
                stack.append(row[column])

    return CrateStacks(stacks)


def parse_move(line: str) -> tuple[int, int, int]:
    """Parse 'move QTY from SRC to DST' into (qty, src, dst)."""
    match = _MOVE_PATTERN.search(line)
    if match is None:
        raise ValueError(f"invalid move line: {line!r}")
    qty, src, dst = (int(group) for group in match.groups())
    return qty, src, dst


def read_moves(lines: Iterable[str]) -> Iterator[tuple[int, int, int]]:
    """Yield the parsed moves up to the first blank line."""
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line == "":
            return
        yield parse_move(line)


def _rearrange(path: str, keep_order: bool) -> list[str]:
    with open(path, encoding="utf-8") as handle:
        lines = iter(handle)
        stacks = parse_crate_stacks(lines)
        for qty, src, dst in read_moves(lines):
            stacks.move(qty, src, dst, keep_order)
    return stacks.top_crates()


def run_part1(path: str) -> None:
    """Print the top crates after moving crates one at a time."""
    print(f"Part 1: [{' '.join(_rearrange(path, keep_order=False))}]")


def run_part2(path: str) -> None:
    """Print the top crates after moving crates several at once."""
    print(f"Part 2: [{' '.join(_rearrange(path, keep_order=True))}]")