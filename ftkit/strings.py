"""String helpers with bounded copy, compare, search and trim semantics.

Searches return an index into the searched string, or None when there is
no match. Bounded copies return the resulting string together with the
length they tried to create, so callers can detect truncation.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

Char = Union[str, int]


def _check_str(name: str, value: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")


def _check_count(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def _char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return chr(c)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most ``size - 1`` characters of *src*.

    Returns the copy and the full length of *src*; a returned length at
    least *size* means the copy was truncated. A *size* of 0 copies nothing.
    """
    _check_str("src", src)
    _check_count("size", size)
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append *src* to *dest* so the result stays under *size* characters.

    Returns the new string and the length it tried to create: the sum of
    both lengths when *size* exceeds ``len(dest)``, otherwise
    ``len(src) + size``.
    """
    _check_str("dest", dest)
    _check_str("src", src)
    _check_count("size", size)
    room = max(0, size - len(dest) - 1)
    total = len(src) + (len(dest) if size > len(dest) else size)
    return dest + src[:room], total


def strndup(s: str, n: int) -> str:
    """Copy of the first *n* characters of *s*."""
    _check_str("s", s)
    _check_count("n", n)
    return s[:n]


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters.

    Returns the code-point difference at the first mismatch, treating the
    end of a string as code 0, or 0 when the compared parts are equal.
    """
    _check_str("s1", s1)
    _check_str("s2", s2)
    _check_count("n", n)
    a, b = s1[:n], s2[:n]
    for i in range(max(len(a), len(b))):
        x = ord(a[i]) if i < len(a) else 0
        y = ord(b[i]) if i < len(b) else 0
        if x != y:
            return x - y
    return 0


def substr(s: str, start: int, length: int) -> str:
    """At most *length* characters of *s* beginning at *start*.

    A *start* past the end yields an empty string.
    """
    _check_str("s", s)
    _check_count("start", start)
    _check_count("length", length)
    if start > len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """A new string holding *s1* followed by *s2*."""
    _check_str("s1", s1)
    _check_str("s2", s2)
    return f"{s1}{s2}"


def strtrim(s: str, charset: str) -> str:
    """*s* with every character of *charset* removed from both ends."""
    _check_str("s", s)
    _check_str("charset", charset)
    if not charset:
        return s
    return s.strip(charset)


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first *c* in *s*.

    Searching for the NUL character finds the end of the string.
    """
    _check_str("s", s)
    ch = _char(c)
    if ch == "\0":
        index = s.find(ch)
        return len(s) if index < 0 else index
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last *c* in *s*.

    Searching for the NUL character finds the end of the string.
    """
    _check_str("s", s)
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of *needle* lying wholly within the first *length* characters.

    An empty *needle* matches at index 0.
    """
    _check_str("haystack", haystack)
    _check_str("needle", needle)
    _check_count("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index