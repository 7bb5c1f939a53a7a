"""A lightweight, shrinkable view over a str or bytes sequence."""

from __future__ import annotations

from functools import total_ordering
from typing import Union

_Text = Union[str, bytes]

_HASH_MASK = (1 << 64) - 1


def _as_source(data: object) -> _Text:
    if data is None:
        return b""
    if isinstance(data, (str, bytes)):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"cannot view {type(data).__name__} as a string piece")


@total_ordering
class StringPiece:
    """A view of part of a str or bytes object.

    The prefix and suffix can be dropped without copying the underlying data.
    Comparison is lexicographic over the viewed elements; pieces over str and
    pieces over bytes are never equal and cannot be ordered against each other.
    """

    __slots__ = ("_data", "_start", "_length")

    def __init__(self, data: object = None) -> None:
        if isinstance(data, StringPiece):
            self._data: _Text = data._data
            self._start: int = data._start
            self._length: int = data._length
            return
        self._data = _as_source(data)
        self._start = 0
        self._length = len(self._data)

    def _view(self) -> _Text:
        return self._data[self._start:self._start + self._length]

    @staticmethod
    def _coerce(other: object) -> StringPiece | None:
        if isinstance(other, StringPiece):
            return other
        if isinstance(other, (str, bytes, bytearray, memoryview)):
            return StringPiece(other)
        return None

    def _same_kind(self, other: StringPiece) -> bool:
        return isinstance(self._data, str) == isinstance(other._data, str)

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index):
        return self._view()[index]

    def __iter__(self):
        return iter(self._view())

    def __eq__(self, other: object) -> bool:
        piece = self._coerce(other)
        if piece is None:
            return NotImplemented
        if not self._same_kind(piece):
            return False
        return self._view() == piece._view()

    def __lt__(self, other: object) -> bool:
        piece = self._coerce(other)
        if piece is None:
            return NotImplemented
        return self.compare(piece) < 0

    def __hash__(self) -> int:
        return string_piece_hash(self)

    def __repr__(self) -> str:
        return f"StringPiece({self._view()!r})"

    def empty(self) -> bool:
        return self._length == 0

    def clear(self) -> None:
        """Make this an empty view."""
        self._data = self._data[:0]
        self._start = 0
        self._length = 0

    def remove_prefix(self, n: int) -> None:
        """Drop the first n elements from the view."""
        if n < 0 or n > self._length:
            raise ValueError(f"cannot remove {n} elements from a piece of length {self._length}")
        self._start += n
        self._length -= n

    def remove_suffix(self, n: int) -> None:
        """Drop the last n elements from the view."""
        if n < 0 or n > self._length:
            raise ValueError(f"cannot remove {n} elements from a piece of length {self._length}")
        self._length -= n

    def shrink(self, prefix: int, suffix: int) -> None:
        """Drop prefix elements from the front and suffix from the back."""
        if prefix < 0 or suffix < 0 or prefix + suffix > self._length:
            raise ValueError(
                f"cannot shrink a piece of length {self._length} by {prefix} and {suffix}"
            )
        self._start += prefix
        self._length -= prefix + suffix

    def compare(self, other: object) -> int:
        """Return -1, 0 or 1 as this piece sorts before, equal to or after other."""
        piece = self._coerce(other)
        if piece is None:
            raise TypeError(f"cannot compare a string piece with {type(other).__name__}")
        if not self._same_kind(piece):
            raise TypeError("cannot compare a text piece with a bytes piece")
        mine, theirs = self._view(), piece._view()
        if mine < theirs:
            return -1
        if mine > theirs:
            return 1
        return 0

    def starts_with(self, other: object) -> bool:
        piece = self._coerce(other)
        if piece is None:
            raise TypeError(f"cannot match a string piece against {type(other).__name__}")
        if not self._same_kind(piece):
            return False
        return self._view().startswith(piece._view())

    def as_string(self) -> _Text:
        """Return a copy of the viewed data, of the same type as the source."""
        return self._view()


def string_piece_hash(piece: StringPiece | str | bytes) -> int:
    """Polynomial hash (base 131) over the elements, wrapped to 64 bits.

    Bytes are taken as signed chars; text characters by code point.
    """
    view = StringPiece(piece).as_string()
    result = 0
    if isinstance(view, str):
        values = (ord(char) for char in view)
    else:
        values = (byte - 256 if byte >= 128 else byte for byte in view)
    for value in values:
        result = (result * 131 + value) & _HASH_MASK
    return result