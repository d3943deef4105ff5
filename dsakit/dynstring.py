"""A growable character string that tracks its own capacity."""

from __future__ import annotations

from collections.abc import Iterator
from functools import total_ordering
from typing import Optional, TextIO, Union

__all__ = ["DynString", "read_word", "read_line"]

_NUL = "\0"

StrLike = Union[str, "DynString"]


def _single_char(ch: str) -> str:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch


@total_ordering
class DynString:
    """A mutable string with an explicit capacity that only ever grows.

    A new string's capacity equals its length. Inserting that fills the
    capacity grows it to the new length; pushing a single character into a
    full string doubles it.
    """

    __hash__ = None  # mutable

    def __init__(self, text: StrLike = "") -> None:
        self._text = str(text)
        self._capacity = len(self._text)

    def reserve(self, n: int = 0) -> None:
        """Grow the capacity to ``n`` if it is smaller; never shrink it."""
        if n > self._capacity:
            self._capacity = n

    def resize(self, n: int, fill: str = _NUL) -> None:
        """Cut the string to ``n`` characters, or pad it with ``fill`` up to ``n``."""
        fill = _single_char(fill)
        if n < 0:
            raise ValueError(f"size must not be negative, got {n}")
        size = len(self._text)
        if n < size:
            self._text = self._text[:n]
            return
        if n >= self._capacity:
            self.reserve(n)
        self._text += fill * (n - size)

    def insert(
        self, pos: int, value: StrLike, count: Optional[int] = None
    ) -> "DynString":
        """Insert ``value`` before position ``pos`` and return this string.

        When ``value`` is a single character, ``count`` is how many copies of
        it to insert. Otherwise ``count`` limits how many leading characters
        of ``value`` are inserted.
        """
        size = len(self._text)
        if not 0 <= pos <= size:
            raise IndexError(f"insert position {pos} out of range for length {size}")
        if count is not None and count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        text = str(value)
        if len(text) == 1:
            if count is None:
                piece = text
                if size >= self._capacity:
                    self.reserve(max(size * 2, size + 1))
            else:
                piece = text * count
                if size + count >= self._capacity:
                    self.reserve(size + count)
        else:
            piece = text if count is None else text[:count]
            if size + len(piece) >= self._capacity:
                self.reserve(size + len(piece))
        self._text = self._text[:pos] + piece + self._text[pos:]
        return self

    def push_back(self, ch: str) -> None:
        """Append one character."""
        self.insert(len(self._text), _single_char(ch))

    def append(self, text: StrLike) -> "DynString":
        """Append ``text`` and return this string."""
        return self.insert(len(self._text), text)

    def __iadd__(self, other: StrLike) -> "DynString":
        return self.append(other)

    def find(self, value: StrLike, pos: int = 0) -> int:
        """Return the index of ``value`` at or after ``pos``, or -1 if absent."""
        text = str(value)
        size = len(self._text)
        limit = size if len(text) == 1 else size + 1
        if not 0 <= pos < limit:
            raise IndexError(f"search position {pos} out of range for length {size}")
        return self._text.find(text, pos)

    def erase(self, pos: int, length: Optional[int] = None) -> "DynString":
        """Remove ``length`` characters from ``pos`` (all of them by default)."""
        size = len(self._text)
        if not 0 <= pos < size:
            raise IndexError(f"erase position {pos} out of range for length {size}")
        if length is not None and length < 0:
            raise ValueError(f"length must not be negative, got {length}")
        if length is None or length >= size - pos:
            self._text = self._text[:pos]
        else:
            self._text = self._text[:pos] + self._text[pos + length :]
        return self

    def pop_back(self) -> None:
        """Drop the last character; an empty string stays empty."""
        if self._text:
            self._text = self._text[:-1]

    def clear(self) -> None:
        """Remove every character; the capacity is kept."""
        self._text = ""

    def capacity(self) -> int:
        """Return how many characters fit before the string must grow."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._text)

    def __iter__(self) -> Iterator[str]:
        return iter(self._text)

    def __getitem__(self, index: Union[int, slice]) -> str:
        return self._text[index]

    def __setitem__(self, index: int, ch: str) -> None:
        ch = _single_char(ch)
        i = range(len(self._text))[index]
        self._text = self._text[:i] + ch + self._text[i + 1 :]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (DynString, str)):
            return self._text == str(other)
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, (DynString, str)):
            return self._text < str(other)
        return NotImplemented

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._text!r})"


def _read_until(stream: TextIO, stops: str) -> DynString:
    result = DynString()
    while (ch := stream.read(1)) and ch not in stops:
        result.push_back(ch)
    return result


def read_word(stream: TextIO) -> DynString:
    """Read characters up to the next space or newline, which is consumed."""
    return _read_until(stream, " \n")


def read_line(stream: TextIO) -> DynString:
    """Read characters up to the next newline, which is consumed."""
    return _read_until(stream, "\n")