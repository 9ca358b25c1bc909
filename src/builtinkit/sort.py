"""
Recursive partition sort with an optional comparator.

The first element of every partition is the pivot. Reverse ordering is
threaded through the recursion instead of reversing the final result, so
equal elements may change relative order.
"""

from __future__ import annotations
from typing import TypeVar, Callable, Iterable

T = TypeVar("T")

CompareFunc = Callable[[T, T], int]


def _partition(
    items: list[T], compare: CompareFunc[T] | None
) -> tuple[T, list[T], list[T]]:
    """Split items[1:] around items[0] into (pivot, less, not_less)."""
    pivot = items[0]
    left: list[T] = []
    right: list[T] = []
    for item in items[1:]:
        if compare is None:
            goes_left = item < pivot
        else:
            goes_left = compare(item, pivot) < 0
        if goes_left:
            left.append(item)
        else:
            right.append(item)
    return pivot, left, right


def sorted(
    iterable: Iterable[T],
    compare: CompareFunc[T] | None = None,
    reverse: bool = False,
) -> list[T]:
    """
    Return a new list with the elements of iterable in order.

    Args:
        iterable: Any finite iterable. It is consumed once.
        compare: Function returning negative if a precedes b,
                 positive if a follows b, zero if equal. Natural
                 ordering (``<``) is used when omitted.
        reverse: Swap the partitions at every level.

    Exceptions raised by compare propagate unchanged.

    Example:
        >>> sorted([4, 3, 2, 1])
        [1, 2, 3, 4]
        >>> sorted(["bb", "a", "ccc"], lambda a, b: len(b) - len(a))
        ['ccc', 'bb', 'a']
    """
    items = list(iterable)
    if len(items) <= 1:
        return items

    pivot, left, right = _partition(items, compare)
    if reverse:
        left, right = right, left

    return sorted(left, compare, reverse) + [pivot] + sorted(right, compare, reverse)
