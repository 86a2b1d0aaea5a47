"""Conversions between decimal text and integers."""

from __future__ import annotations

from itertools import takewhile

_SPACES = " \t\n\v\f\r"
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _wrap(value: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half


def _parse(text: str) -> int:
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: "0" <= ch <= "9", rest))
    return sign * int(digits or "0")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a signed 32-bit value.

    Leading whitespace and a single sign are accepted; parsing stops at the
    first non-digit. Text without digits yields 0.
    """
    return _wrap(_parse(text), 32)


def atol(text: str) -> int:
    """Parse like :func:`atoi`, wrapping to a signed 64-bit value."""
    return _wrap(_parse(text), 64)


def itoa(n: int) -> str:
    """Render a signed 32-bit integer as decimal text."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)