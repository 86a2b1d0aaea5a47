"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from .convert import itoa


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar_fd(c: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write the single character *c* (or character code) to *stream*."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    elif isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    else:
        ch = chr(c)
    _target(stream).write(ch)


def putstr_fd(s: str, stream: Optional[TextIO] = None) -> None:
    """Write *s* to *stream*."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    _target(stream).write(s)


def putendl_fd(s: str, stream: Optional[TextIO] = None) -> None:
    """Write *s* followed by a newline to *stream*."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    _target(stream).write(f"{s}\n")


def putnbr_fd(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the signed 32-bit integer *n* in decimal to *stream*."""
    _target(stream).write(itoa(n))