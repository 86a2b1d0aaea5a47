"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

import io
from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = io.DEFAULT_BUFFER_SIZE


class LineReader(Generic[AnyStr]):
    """Yield the lines of a text or binary stream, newline included.

    The stream is read in chunks of at most *buffer_size*; characters past
    the end of a returned line are kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError(f"buffer_size must be int, got {type(buffer_size).__name__}")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    @staticmethod
    def _newline(data: AnyStr) -> AnyStr:
        return b"\n" if isinstance(data, (bytes, bytearray)) else "\n"  # type: ignore[return-value]

    def read_line(self) -> Optional[AnyStr]:
        """The next line, ending in a newline unless it is the last; None at end of stream.

        A read error discards any buffered characters and propagates.
        """
        pending = self._pending
        self._pending = None
        try:
            while pending is None or pending.find(self._newline(pending)) < 0:
                chunk = self._stream.read(self._buffer_size)
                if not chunk:
                    break
                pending = chunk if pending is None else pending + chunk
        except BaseException:
            self._pending = None
            raise
        if not pending:
            return None
        end = pending.find(self._newline(pending))
        if end < 0:
            return pending
        rest = pending[end + 1 :]
        self._pending = rest or None
        return pending[: end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[AnyStr]:
    """Iterate over the lines of *stream*, read *buffer_size* at a time."""
    return iter(LineReader(stream, buffer_size))