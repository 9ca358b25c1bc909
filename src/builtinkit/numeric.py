"""Integer to string conversions in bases 2, 8 and 16."""

from __future__ import annotations
import operator


def _signed(n: int, prefix: str, spec: str) -> str:
    n = operator.index(n)
    sign = "-" if n < 0 else ""
    return f"{sign}{prefix}{abs(n):{spec}}"


def bin(n: int) -> str:
    """Base-2 digits without a prefix, e.g. ``bin(7) == '111'``."""
    return _signed(n, "", "b")


def hex(n: int) -> str:
    """``0x``-prefixed lowercase hex; negatives get a leading ``-``."""
    return _signed(n, "0x", "x")


def oct(n: int) -> str:
    return _signed(n, "0o", "o")
