"""Aggregation over iterables: truth tests, summation, zipping, pairing."""

from __future__ import annotations
from typing import Any, Hashable, Iterable, TypeVar
import builtins
import operator

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def all(iterable: Iterable[Any]) -> bool:
    """True if every element is truthy. Empty input is True."""
    for item in iterable:
        if not item:
            return False
    return True


def any(iterable: Iterable[Any]) -> bool:
    """True if some element is truthy. Empty input is False."""
    for item in iterable:
        if item:
            return True
    return False


def bool(value: Any) -> builtins.bool:
    return builtins.bool(value)


def sum(iterable: Iterable[Any], start: int = 0) -> Any:
    """
    Sum the elements from index start to the end.

    start is a position, not an initial value:
    ``sum([2, 2, 2, 2, 2], 1) == 8``. A negative start counts from 0.
    """
    items = list(iterable)
    total = 0
    for i in range(max(operator.index(start), 0), len(items)):
        total += items[i]
    return total


def zip(*iterables: Iterable[Any]) -> list[tuple[Any, ...]]:
    """Align iterables by position. Stops at the shortest input."""
    return list(builtins.zip(*iterables))


def dict(pairs: Iterable[tuple[K, V]]) -> builtins.dict[K, V]:
    """Build a mapping from (key, value) pairs; later keys win."""
    result: builtins.dict[K, V] = {}
    for key, value in pairs:
        result[key] = value
    return result
