"""Day 2: rock, paper, scissors strategy guide scoring."""

from collections.abc import Iterable, Iterator
from enum import Enum


class Shape(Enum):
    """A shape played in a round."""

    ROCK = 1
    PAPER = 2
    SCISSORS = 3


class Outcome(Enum):
    """The result of a round, from the player's point of view."""

    INVALID = 0
    LOSE = 1
    DRAW = 2
    WIN = 3


# Key shape beats value shape.
_BEATS = {
    Shape.ROCK: Shape.SCISSORS,
    Shape.SCISSORS: Shape.PAPER,
    Shape.PAPER: Shape.ROCK,
}

# Key shape loses to value shape.
_LOSES_TO = {
    Shape.ROCK: Shape.PAPER,
    Shape.PAPER: Shape.SCISSORS,
    Shape.SCISSORS: Shape.ROCK,
}

_SHAPE_SCORE = {Shape.ROCK: 1, Shape.PAPER: 2, Shape.SCISSORS: 3}

_OUTCOME_BONUS = {Outcome.WIN: 6, Outcome.DRAW: 3, Outcome.LOSE: 0}

_SELF_CODES = {"X": Shape.ROCK, "Y": Shape.PAPER, "Z": Shape.SCISSORS}
_OPPONENT_CODES = {"A": Shape.ROCK, "B": Shape.PAPER, "C": Shape.SCISSORS}
_OUTCOME_CODES = {"X": Outcome.LOSE, "Y": Outcome.DRAW, "Z": Outcome.WIN}


def decode_self(encoded: str) -> Shape:
    """Decode the player's shape from X, Y or Z."""
    try:
        return _SELF_CODES[encoded]
    except KeyError:
        raise ValueError(f"invalid shape: {encoded!r}") from None


def decode_opponent(encoded: str) -> Shape:
    """Decode the opponent's shape from A, B or C."""
    try:
        return _OPPONENT_CODES[encoded]
    except KeyError:
        raise ValueError(f"invalid shape: {encoded!r}") from None


def decode_outcome(encoded: str) -> Outcome:
    """Decode a desired outcome; unknown codes give Outcome.INVALID."""
    return _OUTCOME_CODES.get(encoded, Outcome.INVALID)


def find_shape_for_desired_outcome(opponent_shape: Shape, desired_outcome: Outcome) -> Shape:
    """Return the shape to play against opponent_shape to get desired_outcome."""
    if desired_outcome is Outcome.DRAW:
        return opponent_shape
    if desired_outcome is Outcome.WIN:
        return _LOSES_TO[opponent_shape]
    if desired_outcome is Outcome.LOSE:
        return _BEATS[opponent_shape]
    raise ValueError("invalid outcome")


def calculate_score(self_shape: Shape, opponent_shape: Shape) -> int:
    """Return the player's score for one round."""
    shape_score = _SHAPE_SCORE[self_shape]
    if self_shape is opponent_shape:
        return shape_score + _OUTCOME_BONUS[Outcome.DRAW]
    if _BEATS[self_shape] is opponent_shape:
        return shape_score + _OUTCOME_BONUS[Outcome.WIN]
    return shape_score + _OUTCOME_BONUS[Outcome.LOSE]


def read_strategy(lines: Iterable[str]) -> Iterator[list[str]]:
    """Yield the space-separated columns of each line up to the first blank one."""
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line == "":
            return
        yield line.split(" ")


def run_part1(path: str) -> None:
    """Print the total score when the second column is the shape to play."""
    with open(path, encoding="utf-8") as handle:
        total = sum(
            calculate_score(decode_self(row[1]), decode_opponent(row[0]))
            for row in read_strategy(handle)
        )
    print(f"Part 1: {total}")


def run_part2(path: str) -> None:
    """Print the total score when the second column is the desired outcome."""
    total = 0
    with open(path, encoding="utf-8") as handle:
        for row in read_strategy(handle):
            opponent = decode_opponent(row[0])
            shape = find_shape_for_desired_outcome(opponent, decode_outcome(row[1]))
            total += calculate_score(shape, opponent)
    print(f"Part 2: {total}")