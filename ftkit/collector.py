"""Tracking of allocated objects so they can all be released together."""

from __future__ import annotations

from types import TracebackType
from typing import Any, List, Optional, Type, TypeVar, Union

from . import memory, strings
from .convert import itoa as _itoa
from .transform import split as _split

T = TypeVar("T")


class Collector:
    """Keeps every object it creates or is handed until :meth:`free_all`.

    Used as a context manager, it releases everything on exit, whether or
    not an exception was raised.
    """

    def __init__(self) -> None:
        self._tracked: List[Any] = []

    def track(self, obj: T) -> T:
        """Add *obj* to the tracked objects and return it."""
        self._tracked.append(obj)
        return obj

    def calloc(self, count: int, size: int) -> bytearray:
        """A tracked zero-filled buffer of *count* elements of *size* bytes."""
        return self.track(memory.calloc(count, size))

    def strdup(self, s: str) -> str:
        """A tracked copy of *s*."""
        copied, _ = strings.strlcpy(s, len(s) + 1)
        return self.track(copied)

    def strjoin(self, s1: str, s2: str) -> str:
        """A tracked string holding *s1* followed by *s2*."""
        return self.track(strings.strjoin(s1, s2))

    def substr(self, s: str, start: int, length: int) -> str:
        """A tracked slice of at most *length* characters of *s* from *start*.

        A *start* at or past the end yields a tracked empty string.
        """
        return self.track(strings.substr(s, start, length))

    def split(self, s: str, sep: Union[str, int]) -> List[str]:
        """Split *s* on *sep*, dropping empty words.

        The returned list and each word in it are tracked.
        """
        words = _split(s, sep)
        self.track(words)
        for word in words:
            self.track(word)
        return words

    def itoa(self, n: int) -> str:
        """Tracked decimal text of the signed 32-bit integer *n*."""
        return self.track(_itoa(n))

    def strtrim(self, s: str, charset: str) -> str:
        """Tracked copy of *s* with characters of *charset* removed from both ends."""
        return self.track(strings.strtrim(s, charset))

    def free_all(self) -> None:
        """Release every tracked object."""
        self._tracked.clear()

    def __len__(self) -> int:
        return len(self._tracked)

    def __enter__(self) -> "Collector":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.free_all()