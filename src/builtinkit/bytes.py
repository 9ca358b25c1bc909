"""
Mutable container of one-byte slots.

Each slot holds a one-character string whose code point fits in a single
byte. Slots are addressed by non-negative integer index and the container
grows on assignment past its end. Deleting a slot compacts the indices
that follow it.
"""

from __future__ import annotations
from typing import Any, Iterable, Iterator
import builtins
import logging
import re

from .config import get_settings
from .errors import ArgumentError

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_HEX_PAIR = re.compile(r"[0-9a-fA-F]{2}")


def _check_index(index: Any) -> int:
    if isinstance(index, builtins.bool) or not isinstance(index, int):
        raise TypeError(
            f"byte array indices must be integers, not {type(index).__name__}"
        )
    return index


def _to_byte(value: Any) -> str:
    """Coerce value to its string form and require exactly one byte."""
    s = builtins.str(value)
    if len(s) != 1 or ord(s) > 0xFF:
        raise ValueError(f"Value {value!r} is invalid")
    return s


class ByteArray:
    """
    Mutable sequence of one-byte string slots.

    Example:
        x = ByteArray("abcdef", "ascii")
        x[1] = "z"
        del x[1]
        str(x)   # 'acdef'
        x.hex()  # '6163646566'
    """

    def __init__(
        self,
        source: Any = None,
        encoding: str | None = None,
        errors: str | None = None,
        *,
        compact_on_delete: bool | None = None,
    ):
        """
        Args:
            source: A string (requires encoding), a bytes-like object,
                    another ByteArray, or any iterable of one-byte values.
                    Falsy items of an iterable are stored unchecked.
            encoding: Codec used to split a string source into bytes.
            errors: Codec error handler for a string source.
            compact_on_delete: Drop every falsy slot when one is deleted.
                               Defaults to the configured setting.
        """
        if compact_on_delete is None:
            compact_on_delete = get_settings().compact_on_delete
        self._compact = compact_on_delete
        self._slots: dict[int, Any] = {}

        if source is None:
            values: Iterable[Any] = ()
        elif isinstance(source, builtins.str):
            if not encoding:
                raise TypeError("string argument without an encoding")
            encoded = source.encode(encoding, errors or "strict")
            values = [chr(b) for b in encoded]
        elif isinstance(source, (builtins.bytes, builtins.bytearray, memoryview)):
            values = [chr(b) for b in builtins.bytes(source)]
        elif isinstance(source, ByteArray):
            values = list(source)
        elif isinstance(source, Iterable):
            values = [_to_byte(v) if v else v for v in source]
        else:
            raise TypeError(
                f"cannot convert '{type(source).__name__}' object to byte array"
            )

        for i, value in builtins.enumerate(values):
            self._slots[i] = value

    @classmethod
    def fromhex(cls, text: str) -> ByteArray:
        """
        Build an instance from a string of hexadecimal digit pairs.

        Whitespace anywhere in text is ignored.

        Raises:
            ArgumentError: text has an odd number of digits.
            ValueError: a pair is not two hexadecimal digits.
        """
        digits = _WHITESPACE.sub("", text)
        if len(digits) % 2:
            raise ArgumentError("String length should be an even number")

        values = []
        for i in range(0, len(digits), 2):
            pair = digits[i:i + 2]
            if not _HEX_PAIR.fullmatch(pair):
                raise ValueError(f"Non-hexadecimal number found: {pair}")
            values.append(chr(int(pair, 16)))

        logger.debug("decoded %d bytes from hex", len(values))
        return cls(values)

    def __len__(self) -> int:
        return len(self._slots)

    def __getitem__(self, index: int) -> Any:
        index = _check_index(index)
        try:
            return self._slots[index]
        except KeyError:
            raise IndexError("byte array index out of range") from None

    def __setitem__(self, index: int, value: Any) -> None:
        index = _check_index(index)
        if index < 0:
            raise IndexError("byte array index out of range")
        self._slots[index] = _to_byte(value)

    def __delitem__(self, index: int) -> None:
        index = _check_index(index)
        if index not in self._slots:
            raise IndexError("byte array index out of range")
        del self._slots[index]

        if self._compact:
            values = [self._slots[k] for k in builtins.sorted(self._slots)]
            kept = [v for v in values if v]
            if len(kept) != len(values):
                logger.debug("compaction dropped %d falsy slots", len(values) - len(kept))
            self._slots = dict(builtins.enumerate(kept))
        else:
            self._slots = {
                (k - 1 if k > index else k): v for k, v in self._slots.items()
            }

    def has_index(self, index: int) -> bool:
        """True if slot index is occupied."""
        return _check_index(index) in self._slots

    def __iter__(self) -> Iterator[Any]:
        for k in builtins.sorted(self._slots):
            yield self._slots[k]

    def _bytes(self) -> Iterator[str]:
        """Occupied slots in index order, skipping falsy ones."""
        for v in self:
            if v:
                yield v

    def hex(self) -> str:
        """Lowercase two-digit hex of every byte, in index order."""
        return "".join(f"{ord(v):02x}" for v in self._bytes())

    def __str__(self) -> str:
        return "".join(self._bytes())

    def __bytes__(self) -> builtins.bytes:
        return builtins.bytes(ord(v) for v in self._bytes())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ByteArray):
            return NotImplemented
        return list(self) == list(other)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"bytearray({builtins.bytes(self)!r})"


bytearray = ByteArray
