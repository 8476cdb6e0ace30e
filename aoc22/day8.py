"""Day 8: tree visibility and scenic scores on a height map."""

from collections.abc import Iterable, Iterator, Sequence
from enum import Enum
from math import prod


class Direction(Enum):
    """A direction to look in, as a (row, column) step."""

    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP = (-1, 0)
    DOWN = (1, 0)


class TreeMap:
    """A rectangular grid of tree heights."""

    def __init__(self, grid: Sequence[Sequence[int]]) -> None:
        if not grid or not grid[0]:
            raise ValueError("the grid must not be empty")
        cols = len(grid[0])
        if any(len(row) < cols for row in grid):
            raise ValueError("every row must be as long as the first")
        self.height = [list(row[:cols]) for row in grid]
        self.rows = len(self.height)
        self.cols = cols

    def _line_of_sight(self, row: int, col: int, direction: Direction) -> Iterator[int]:
        drow, dcol = direction.value
        i, j = row + drow, col + dcol
        while 0 <= i < self.rows and 0 <= j < self.cols:
            yield self.height[i][j]
            i, j = i + drow, j + dcol

    def is_visible_from(self, row: int, col: int, direction: Direction) -> bool:
        """Return True if every tree towards the edge in direction is shorter."""
        height = self.height[row][col]
        return all(other < height for other in self._line_of_sight(row, col, direction))

    def count_visible_trees(self, row: int, col: int, direction: Direction) -> int:
        """Count trees seen looking in direction, up to and including the first as tall."""
        height = self.height[row][col]
        count = 0
        for other in self._line_of_sight(row, col, direction):
            count += 1
            if other >= height:
                break
        return count


def read_grid(lines: Iterable[str]) -> list[list[int]]:
    """Read rows of digits up to the first blank line."""
    grid = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line == "":
            break
        grid.append([int(char) for char in line])
    return grid


def run(path: str) -> None:
    """Print how many trees are visible from outside and the best scenic score."""
    with open(path, encoding="utf-8") as handle:
        tree_map = TreeMap(read_grid(handle))

    positions = [(i, j) for i in range(tree_map.rows) for j in range(tree_map.cols)]
    visible = sum(
        any(tree_map.is_visible_from(i, j, direction) for direction in Direction)
        for i, j in positions
    )
    print(f"Visible: {visible}")

    score = max(
        (
            prod(tree_map.count_visible_trees(i, j, direction) for direction in Direction)
            for i, j in positions
        ),
        default=0,
    )
    print(f"Scenic score: {max(score, 0)}")