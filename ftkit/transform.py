"""Splitting strings and applying per-character functions."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, TypeVar, Union

T = TypeVar("T")


def _separator(sep: Union[str, int]) -> str:
    if isinstance(sep, str):
        if len(sep) != 1:
            raise ValueError(f"separator must be a single character, got {sep!r}")
        return sep
    if isinstance(sep, bool) or not isinstance(sep, int):
        raise TypeError(f"separator must be a character or an integer code, got {type(sep).__name__}")
    return chr(sep)


def split(s: str, sep: Union[str, int]) -> List[str]:
    """Split *s* on the single character *sep*, dropping empty words."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    ch = _separator(sep)
    return [word for word in s.split(ch) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string built from ``f(index, char)`` for every character of *s*."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[T], f: Callable[[int, T], Optional[T]]) -> None:
    """Call ``f(index, item)`` on each item of the mutable sequence *s*, in place.

    A value returned by *f* replaces the item; ``None`` leaves it as it is.
    """
    if isinstance(s, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence such as a list or bytearray")
    for index, item in enumerate(s):
        replacement = f(index, item)
        if replacement is not None:
            s[index] = replacement