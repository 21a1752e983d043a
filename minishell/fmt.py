"""A small printf: conversions c, s, p, d, i, u, x, X, % and @ (a long)."""

from __future__ import annotations

import sys
from typing import Any, Iterator

_INT_BITS = 32
_POINTER_MASK = (1 << 64) - 1
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _signed(value: int, bits: int) -> int:
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus // 2 else value


def _unsigned(value: int, bits: int) -> int:
    return value % (1 << bits)


def _char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError(f"%c expects a single character, got {arg!r}")
        return arg
    return chr(int(arg) & 0xFF)


def _string(arg: Any) -> str:
    if arg is None:
        return _NULL_STRING
    if not isinstance(arg, str):
        raise TypeError(f"%s expects a string, got {type(arg).__name__}")
    return arg


def _pointer(arg: Any) -> str:
    address = 0 if arg is None else int(arg) & _POINTER_MASK
    if not address:
        return _NULL_POINTER
    return f"0x{address:x}"


def _long(arg: Any) -> str:
    value = int(arg)
    if value >= 0:
        return str(value)
    # Negative values print a single character: the remainder, truncated
    # toward zero, added to '0'.
    return chr(ord("0") - (-value % 10))


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX@":
        return ""
    try:
        arg = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _char(arg)
    if spec == "s":
        return _string(arg)
    if spec == "p":
        return _pointer(arg)
    if spec in "di":
        return str(_signed(int(arg), _INT_BITS))
    if spec == "u":
        return str(_unsigned(int(arg), _INT_BITS))
    if spec == "x":
        return f"{_unsigned(int(arg), _INT_BITS):x}"
    if spec == "X":
        return f"{_unsigned(int(arg), _INT_BITS):X}"
    return _long(arg)


def cformat(fmt: str, *args: Any) -> str:
    """Expand the conversions in ``fmt`` with ``args`` and return the text.

    Unknown conversions, and a lone '%' at the end, produce nothing.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, "")
        if spec:
            pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the expanded format to standard output; return the characters written."""
    text = cformat(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)