"""Reporting errors on the error stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def print_error(message: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """Write an ``Error`` header and, if given, *message* on its own line.

    Output goes to standard error unless *stream* is given.
    """
    target = sys.stderr if stream is None else stream
    target.write("Error\n")
    if message is not None:
        target.write(f"{message}\n")