"""Partitioning helper shared by the structural transformers."""

from __future__ import annotations

from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")


def group_consecutive_while(
    items: Sequence[T],
    predicate: Callable[[T, T], bool],
) -> List[List[T]]:
    """
    Split ``items`` into runs of adjacent elements.

    An element joins the run of its predecessor when
    ``predicate(current, previous)`` holds, otherwise it starts a new run.
    Every run holds at least one element and the concatenation of all runs
    equals ``items``.

    Example:
        >>> group_consecutive_while([1, "a", "b", 2], lambda c, p: type(c) is type(p))
        [[1], ['a', 'b'], [2]]
    """
    runs: List[List[T]] = []
    for index, current in enumerate(items):
        if index > 0 and predicate(current, items[index - 1]):
            runs[-1].append(current)
        else:
            runs.append([current])
    return runs
