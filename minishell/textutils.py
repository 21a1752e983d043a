"""String helpers with the semantics of the classic C string routines."""

from __future__ import annotations

from itertools import zip_longest

_INT_BITS = 32
_LONG_BITS = 64
_SPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement integer of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus // 2 else value


def _parse_signed(text: str) -> int:
    """Parse an optional sign and leading digits; stop at the first non-digit."""
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    value = 0
    for char in text:
        if char not in _DIGITS:
            break
        value = value * 10 + int(char)
    return sign * value


def atoi(text: str) -> int:
    """Convert the leading integer of ``text`` to a 32-bit int.

    Leading whitespace is skipped, one sign is accepted, and parsing stops at
    the first character that is not a digit. Values that do not fit wrap
    around as a 32-bit int would.
    """
    return _wrap(_parse_signed(text.lstrip("".join(_SPACE))), _INT_BITS)


def atol(text: str | None) -> int:
    """Convert the leading integer of ``text`` to a 64-bit long.

    Unlike :func:`atoi`, whitespace is not skipped. None gives 0.
    """
    if text is None:
        return 0
    return _wrap(_parse_signed(text), _LONG_BITS)


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(int(number))


def _check_char(sep: str) -> None:
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    _check_char(sep)
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every character of ``charset`` from both ends of ``text``."""
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from index ``start``.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    Returns the index where it starts, or None. An empty needle is found at 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def _as_bytes(value: str | bytes | bytearray | memoryview) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def strncmp(first: str | bytes, second: str | bytes, n: int) -> int:
    """Compare at most ``n`` bytes of two strings, stopping at a NUL byte.

    Returns the difference of the first differing bytes (as unsigned
    values), or 0 when the compared parts are equal.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    left = _as_bytes(first)[:n]
    right = _as_bytes(second)[:n]
    for a, b in zip_longest(left, right, fillvalue=0):
        if a != b or a == 0:
            return a - b
    return 0


def memcmp(first: bytes | str, second: bytes | str, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers, NUL bytes included.

    Returns the difference of the first differing bytes, or 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    left = _as_bytes(first)
    right = _as_bytes(second)
    if len(left) < n or len(right) < n:
        raise ValueError(f"both buffers must hold at least {n} bytes")
    for a, b in zip(left[:n], right[:n]):
        if a != b:
            return a - b
    return 0