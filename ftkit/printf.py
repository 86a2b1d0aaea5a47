"""A small formatter supporting the %s %c %d %i %p %x %X %u and %% conversions."""

from __future__ import annotations

import sys
from typing import Any, Callable

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")
    return value


def _int32(value: Any) -> int:
    return ((_integer(value) + 2**31) % 2**32) - 2**31


def _uint32(value: Any) -> int:
    return _integer(value) & _UINT32


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects str, got {type(value).__name__}")
    return value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_integer(value) & 0xFF)


def _pointer(value: Any) -> str:
    if value is None or (isinstance(value, int) and not isinstance(value, bool) and value == 0):
        return "(nil)"
    address = value if isinstance(value, int) and not isinstance(value, bool) else id(value)
    return "0x" + format(address & _UINT64, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "s": _string,
    "c": _char,
    "d": lambda v: str(_int32(v)),
    "i": lambda v: str(_int32(v)),
    "p": _pointer,
    "x": lambda v: format(_uint32(v), "x"),
    "X": lambda v: format(_uint32(v), "X"),
    "u": lambda v: str(_uint32(v)),
}


def render(fmt: str, *args: Any) -> str:
    """Format *args* according to *fmt* and return the text.

    An unknown conversion renders as a single space and takes no argument.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format must be str, got {type(fmt).__name__}")
    pending = iter(args)
    parts = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, "")
        if spec == "%":
            parts.append("%")
        elif spec in _CONVERSIONS:
            try:
                value = next(pending)
            except StopIteration:
                raise TypeError("not enough arguments for format string") from None
            parts.append(_CONVERSIONS[spec](value))
        else:
            parts.append(" ")
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return the number of characters."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    return len(text)