"""A character buffer with a small initial capacity that doubles as it fills."""

from __future__ import annotations

__all__ = ["CharBuffer"]

_INITIAL_CAPACITY = 4


def _single_char(ch: str) -> str:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch


class CharBuffer:
    """A mutable run of characters with positional insert, delete and search.

    A new buffer has room for four characters. Whenever the contents reach
    the capacity, the capacity doubles.
    """

    def __init__(self, text: str = "") -> None:
        self._text = ""
        self._capacity = _INITIAL_CAPACITY
        if text:
            self.push_back_str(text)

    @property
    def capacity(self) -> int:
        """How many characters the buffer holds before it has to grow."""
        return self._capacity

    def _grow_for(self, size: int) -> None:
        while size >= self._capacity:
            self._capacity *= 2

    def _check_insert_pos(self, pos: int) -> None:
        if not 0 <= pos <= len(self._text):
            raise IndexError(
                f"insert position {pos} out of range for length {len(self._text)}"
            )

    def insert_str(self, text: str, pos: int) -> None:
        """Insert ``text`` before position ``pos``; ``pos`` may equal the length."""
        self._check_insert_pos(pos)
        self._grow_for(len(self._text) + len(text))
        self._text = self._text[:pos] + text + self._text[pos:]

    def insert_chars(self, ch: str, pos: int, n: int) -> None:
        """Insert ``n`` copies of the character ``ch`` before position ``pos``."""
        ch = _single_char(ch)
        if n < 0:
            raise ValueError(f"count must not be negative, got {n}")
        self._check_insert_pos(pos)
        self._grow_for(len(self._text) + n)
        self._text = self._text[:pos] + ch * n + self._text[pos:]

    def insert_char(self, ch: str, pos: int) -> None:
        """Insert one character before position ``pos``."""
        self.insert_chars(ch, pos, 1)

    def push_back_char(self, ch: str) -> None:
        """Append one character."""
        self.insert_char(ch, len(self._text))

    def push_back_str(self, text: str) -> None:
        """Append ``text``."""
        self.insert_str(text, len(self._text))

    def delete_at(self, pos: int) -> str:
        """Remove and return the character at ``pos``."""
        if not 0 <= pos < len(self._text):
            raise IndexError(
                f"delete position {pos} out of range for length {len(self._text)}"
            )
        removed = self._text[pos]
        self._text = self._text[:pos] + self._text[pos + 1 :]
        return removed

    def delete_range(self, start: int, end: int) -> str:
        """Remove and return the characters from ``start`` up to, not including, ``end``."""
        if not 0 <= start <= end <= len(self._text):
            raise IndexError(
                f"range [{start}, {end}) out of range for length {len(self._text)}"
            )
        removed = self._text[start:end]
        self._text = self._text[:start] + self._text[end:]
        return removed

    def pop_back(self) -> str:
        """Remove and return the last character; raise IndexError when empty."""
        if not self._text:
            raise IndexError("pop from an empty buffer")
        return self.delete_at(len(self._text) - 1)

    def find_char(self, ch: str) -> int:
        """Return the index of the first ``ch``, or -1 if absent."""
        return self._text.find(_single_char(ch))

    def find_str(self, text: str) -> int:
        """Return the index where ``text`` first occurs, or -1 if absent or empty."""
        if not text:
            return -1
        return self._text.find(text)

    def resize(self, n: int) -> None:
        """Set the capacity to ``n``, cutting the contents if they no longer fit.

        A size of zero leaves the buffer untouched.
        """
        if n < 0:
            raise ValueError(f"size must not be negative, got {n}")
        if n > 0:
            self._capacity = n
            self._text = self._text[:n]

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._text!r})"