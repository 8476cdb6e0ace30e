"""Day 9: a rope of knots following its head around a grid."""

from collections.abc import Iterable, Iterator
from enum import Enum


class Direction(Enum):
    """A direction of movement as a (row, column) step."""

    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP = (-1, 0)
    DOWN = (1, 0)
    STATIONARY = (0, 0)


_DIRECTION_CODES = {
    "L": Direction.LEFT,
    "R": Direction.RIGHT,
    "U": Direction.UP,
    "D": Direction.DOWN,
}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _follow(leader: tuple[int, int], follower: tuple[int, int]) -> tuple[int, int]:
    drow, dcol = leader[0] - follower[0], leader[1] - follower[1]
    if abs(drow) <= 1 and abs(dcol) <= 1:
        return follower
    return follower[0] + _sign(drow), follower[1] + _sign(dcol)


class Bridge:
    """A rope of knots whose tail records every position it visits."""

    def __init__(self, start: tuple[int, int], num_knots: int) -> None:
        if num_knots < 1:
            raise ValueError("a rope needs at least one knot")
        start = (start[0], start[1])
        self._knots = [start] * num_knots
        self._seen = {start}

    @property
    def knots(self) -> tuple[tuple[int, int], ...]:
        """Positions of all knots, head first."""
        return tuple(self._knots)

    def move(self, direction: Direction, distance: int) -> None:
        """Move the head distance steps in direction, dragging the other knots."""
        drow, dcol = direction.value
        for _ in range(distance):
            head = self._knots[0]
            moved = [(head[0] + drow, head[1] + dcol)]
            for follower in self._knots[1:]:
                moved.append(_follow(moved[-1], follower))
            self._knots = moved
            if len(moved) > 1:
                self._seen.add(moved[-1])

    def total_visited(self) -> int:
        """Return how many distinct positions the tail has visited."""
        return len(self._seen)

    @staticmethod
    def _bounds(size: int) -> range:
        half = size // 2
        return range(-half, half)

    def render_seen(self, rows: int, cols: int) -> str:
        """Draw the visited positions around the origin, '#' for visited."""
        return "".join(
            "".join("#" if (i, j) in self._seen else "." for j in self._bounds(cols)) + "\n"
            for i in self._bounds(rows)
        )

    def render_state(self, rows: int, cols: int) -> str:
        """Draw the knots around the origin, each by its index."""
        labels: dict[tuple[int, int], str] = {}
        for index, position in enumerate(self._knots):
            labels.setdefault(position, str(index))
        return "".join(
            "".join(labels.get((i, j), ".") for j in self._bounds(cols)) + "\n"
            for i in self._bounds(rows)
        )


def parse_direction(token: str) -> Direction:
    """Decode L, R, U or D; anything else is Direction.STATIONARY."""
    return _DIRECTION_CODES.get(token, Direction.STATIONARY)


def read_movements(lines: Iterable[str]) -> Iterator[tuple[Direction, int]]:
    """Yield (direction, distance) for each line up to the first blank one."""
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line == "":
            return
        tokens = line.split(" ")
        if len(tokens) < 2:
            raise ValueError(f"invalid movement line: {line!r}")
        yield parse_direction(tokens[0]), int(tokens[1])


def run(path: str) -> None:
    """Print how many positions the tail visits for ropes of 2 and 10 knots."""
    short_rope = Bridge((0, 0), 2)
    long_rope = Bridge((0, 0), 10)
    with open(path, encoding="utf-8") as handle:
        for direction, distance in read_movements(handle):
            short_rope.move(direction, distance)
            long_rope.move(direction, distance)
    print(f"Part 1 tail visited: {short_rope.total_visited()}")
    print(f"Part 2 tails visited: {long_rope.total_visited()}")