"""Classification and case mapping of single ASCII characters.

Every function accepts either a one-character string or an integer
character code. Predicates return a bool; the case mappers return a
value of the same kind they were given.
"""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return c


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _is_lower(code) or _is_upper(code)


def is_digit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for a code in the range 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def is_whitespace(c: int | str) -> bool:
    """True for space, tab, newline, vertical tab, form feed or carriage return."""
    code = _code(c)
    return 0 <= code <= 127 and chr(code) in _WHITESPACE


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    if _is_lower(code):
        code -= ord("a") - ord("A")
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if _is_upper(code):
        code += ord("a") - ord("A")
    return chr(code) if isinstance(c, str) else code