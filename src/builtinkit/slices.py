"""Slice record built from one, two or three positional arguments."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any
import builtins

from .errors import ArgumentError


@dataclass
class Slice:
    """start/stop/step triple; stop is None until given."""
    start: Any = 0
    stop: Any = None
    step: Any = 1

    def to_slice(self) -> builtins.slice:
        """Native slice usable as a sequence index."""
        return builtins.slice(self.start, self.stop, self.step)


def slice(*args: Any) -> Slice:
    """
    Build a Slice.

    One argument sets stop only. Two or three arguments are
    ``(start, stop[, step=1])``.

    Raises:
        ArgumentError: called with no arguments or more than three.
    """
    if len(args) == 1:
        return Slice(stop=args[0])
    if len(args) in (2, 3):
        return Slice(*args)
    raise ArgumentError(f"slice expected 1 to 3 arguments, got {len(args)}")
