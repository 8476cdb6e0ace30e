"""Small helpers shared by the puzzle solutions."""

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def reverse_list(items: Iterable[T]) -> list[T]:
    """Return a new list holding the items in reverse order."""
    return list(items)[::-1]


def intersect_all(sets: Iterable[Iterable[T]]) -> set[T]:
    """Return the items common to every one of the given sets."""
    first, *rest = list(sets) or [None]
    if first is None:
        raise ValueError("at least one set is required")
    return set(first).intersection(*rest)