"""Byte-buffer helpers working on bytearray, bytes and memoryview objects."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_count(n: int, *buffers: Buffer) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"byte count must be int, got {type(n).__name__}")
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buf in buffers:
        if len(buf) < n:
            raise ValueError(f"buffer of {len(buf)} bytes is shorter than {n}")


def memset(buf: WritableBuffer, c: int, n: int) -> WritableBuffer:
    """Fill the first *n* bytes of *buf* with the low byte of *c*; return *buf*."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: WritableBuffer, n: int) -> None:
    """Set the first *n* bytes of *buf* to zero."""
    memset(buf, 0, n)


def memcpy(dst: WritableBuffer, src: Buffer, n: int) -> WritableBuffer:
    """Copy *n* bytes from *src* to the start of *dst*; return *dst*."""
    _check_count(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(dst: WritableBuffer, src: Buffer, n: int) -> WritableBuffer:
    """Copy *n* bytes from *src* to *dst*, correct even when they overlap."""
    _check_count(n, dst, src)
    # Take a snapshot first so overlapping views of one buffer copy correctly.
    dst[:n] = bytes(src[:n])
    return dst


def memchr(buf: Buffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of *c* within *n* bytes, or None."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Difference of the first unequal bytes among the first *n*, or 0."""
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of *count* elements of *size* bytes."""
    for value in (count, size):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("count and size must be int")
        if value < 0:
            raise ValueError("count and size must not be negative")
    return bytearray(count * size)