"""
Builtinkit: standalone sequence, numeric and introspection builtins.

Provides truth aggregation, lazy enumerate/filter/map/reversed, a
comparator-driven partition sort, base conversions, attribute
introspection, slice records and a mutable one-byte-slot container.

Usage:
    from builtinkit import sorted, enumerate, bytearray

    # Sort with a custom comparator
    ordered = sorted(items, lambda a, b: a.priority - b.priority)

    # Lazy (index, value) pairs
    for i, item in enumerate(items, 1):
        ...

    # Byte container
    data = bytearray.fromhex("20212223")
    str(data)  # ' !"#'
"""

import logging

from .aggregate import all, any, bool, sum, zip, dict
from .bytes import ByteArray, bytearray
from .config import Settings, get_settings, configure_logging
from .errors import ArgumentError
from .introspect import ascii, str, repr, dir, getattr, id
from .numeric import bin, hex, oct
from .primitives import enumerate, filter, map, reversed
from .slices import Slice, slice
from .sort import sorted, CompareFunc

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    # Aggregation
    "all",
    "any",
    "bool",
    "sum",
    "zip",
    "dict",
    # Lazy producers
    "enumerate",
    "filter",
    "map",
    "reversed",
    # Sorting
    "sorted",
    "CompareFunc",
    # Numbers
    "bin",
    "hex",
    "oct",
    # Introspection
    "ascii",
    "str",
    "repr",
    "dir",
    "getattr",
    "id",
    # Records and containers
    "Slice",
    "slice",
    "ByteArray",
    "bytearray",
    # Errors and settings
    "ArgumentError",
    "Settings",
    "get_settings",
    "configure_logging",
]
