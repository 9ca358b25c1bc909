"""
Object introspection: string coercion, attribute listing and lookup,
identity tokens.
"""

from __future__ import annotations
from typing import Any
import builtins
import inspect

from .sort import sorted

# Values that carry data only; dir() lists nothing for them.
_PLAIN_TYPES = (
    builtins.str,
    builtins.bytes,
    builtins.bytearray,
    int,
    float,
    complex,
    list,
    tuple,
    builtins.dict,
    set,
    frozenset,
    type(None),
)


def str(value: Any) -> builtins.str:
    return builtins.str(value)


def repr(value: Any) -> builtins.str:
    """String form of value; same as str()."""
    return str(value)


def ascii(value: Any) -> builtins.str:
    return repr(value)


def _is_public(name: builtins.str) -> builtins.bool:
    return not name.startswith("_")


def dir(value: Any = None) -> list[builtins.str]:
    """
    List the public names of an object.

    Returns the sorted public method names of the object's class followed
    by its sorted public field names (instance attributes and class-level
    data). Plain data values (numbers, strings, containers, None) give an
    empty list.

    Example:
        class Pet:
            legs = 4
            def speak(self): ...
        dir(Pet())  # ['speak', 'legs']
    """
    if isinstance(value, _PLAIN_TYPES):
        return []

    methods = set()
    fields = set()
    for name, member in inspect.getmembers(type(value)):
        if not _is_public(name):
            continue
        if inspect.isroutine(member):
            methods.add(name)
        elif not inspect.isclass(member):
            fields.add(name)

    for name in builtins.getattr(value, "__dict__", {}):
        if _is_public(name) and name not in methods:
            fields.add(name)

    return sorted(methods) + sorted(fields)


def getattr(obj: Any, name: builtins.str, default: Any = None) -> Any:
    """Read attribute name from obj, or default when it is absent."""
    return builtins.getattr(obj, name, default)


def id(obj: Any) -> builtins.str:
    """
    Identity token for obj.

    A 32-character lowercase hex string, unique among live objects and
    stable for obj's lifetime.
    """
    return f"{builtins.id(obj):032x}"
