"""
Lazy sequence producers.

Each function is a generator: nothing is computed until the consumer
asks for the next element, every element is produced once, and a
consumed producer cannot be rewound.
"""

from __future__ import annotations
from typing import Any, Callable, Iterable, Iterator, Sequence, TypeVar
import operator

T = TypeVar("T")
R = TypeVar("R")


def enumerate(iterable: Iterable[T], start: int = 0) -> Iterator[tuple[int, T]]:
    """Yield (index, value) pairs, counting from start."""
    n = operator.index(start)
    for item in iterable:
        yield n, item
        n += 1


def filter(
    predicate: Callable[[T], Any] | None, iterable: Iterable[T]
) -> Iterator[T]:
    """
    Yield the items for which predicate is truthy.

    With predicate None, yield the truthy items themselves.
    """
    if predicate is None:
        for item in iterable:
            if item:
                yield item
        return

    for item in iterable:
        if predicate(item):
            yield item


def map(func: Callable[..., R], iterable: Iterable[T], *args: Any) -> Iterator[R]:
    """
    Yield func(item, *args) for each item.

    Example:
        list(map(lambda x, n: x * 10 + n, [1, 2], 1))  # [11, 21]
    """
    for item in iterable:
        yield func(item, *args)


def reversed(seq: Sequence[T] | Iterable[T], count: int | None = None) -> Iterator[T]:
    """
    Yield the elements of seq from last to first.

    Args:
        seq: An indexable sequence. Other iterables are materialized first.
        count: Number of leading elements to walk back over. Passing it
               skips the len() call.
    """
    if not hasattr(seq, "__getitem__"):
        seq = list(seq)
    if not count:
        count = len(seq)
    for i in range(count - 1, -1, -1):
        yield seq[i]
