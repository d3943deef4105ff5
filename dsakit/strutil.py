"""Small string and integer helpers in the style of the C library."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["atoi", "strncat", "strncpy", "reverse_words", "find_single_pair"]

_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping it to a 32-bit signed int.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Text with no digits gives 0.
    """
    i, n = 0, len(text)
    while i < n and text[i] in _SPACE:
        i += 1
    sign = 1
    if i < n and text[i] in "+-":
        sign = -1 if text[i] == "-" else 1
        i += 1
    result = 0
    while i < n and text[i] in _DIGITS:
        result = result * 10 + ord(text[i]) - ord("0")
        i += 1
    return _to_int32(sign * result)


def strncat(dest: str, src: str, n: int) -> str:
    """Return ``dest`` followed by at most ``n`` characters of ``src``."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return dest + src[:n]


def strncpy(dest: str, src: str, n: int) -> str:
    """Overwrite the start of ``dest`` with at most ``n`` characters of ``src``.

    Characters of ``dest`` past the copied ones are kept.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    copied = src[:n]
    return copied + dest[len(copied) :]


def reverse_words(text: str) -> str:
    """Reverse the order of the space-separated words, keeping each word intact."""
    return " ".join(reversed(text.split(" ")))


def find_single_pair(values: Iterable[int]) -> tuple[int, int]:
    """Find the two values that appear once when every other value appears twice.

    The first value returned is the one with a clear bit where the two
    differ lowest; the second has that bit set.
    """
    values = list(values)
    combined = 0
    for value in values:
        combined ^= value
    if combined == 0:
        raise ValueError("no pair of distinct single values found")
    bit = combined & -combined
    clear, set_ = 0, 0
    for value in values:
        if value & bit:
            set_ ^= value
        else:
            clear ^= value
    return clear, set_