"""Byte-buffer primitives working on bytes-like objects.

Mutating functions take a writable buffer (a bytearray or a writable
memoryview) and change it in place.
"""

from __future__ import annotations

from typing import Optional, Union

INT_MAX = 2**31 - 1

Writable = Union[bytearray, memoryview]
Readable = Union[bytes, bytearray, memoryview]


def _check_length(n: int, *buffers: Readable) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of size {len(buf)}")


def memset(buf: Writable, value: int, length: int) -> Writable:
    """Fill the first *length* bytes of *buf* with the low byte of *value*."""
    _check_length(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: Writable, n: int) -> None:
    """Set the first *n* bytes of *buf* to zero."""
    memset(buf, 0, n)


def memmove(dst: Writable, src: Readable, length: int) -> Writable:
    """Copy *length* bytes from *src* to *dst*; overlapping views are safe."""
    _check_length(length, dst, src)
    if length:
        dst[:length] = bytes(src[:length])
    return dst


def memcpy(dst: Writable, src: Readable, n: int) -> Writable:
    """Copy *n* bytes from *src* to *dst*."""
    if dst is src:
        return dst
    return memmove(dst, src, n)


def memchr(data: Readable, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to *value* within *n* bytes, or None."""
    _check_length(n, data)
    target = value & 0xFF
    return next((i for i, byte in enumerate(bytes(data[:n])) if byte == target), None)


def memcmp(a: Readable, b: Readable, n: int) -> int:
    """Compare *n* bytes; return the difference of the first unequal pair, or 0."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of *count* elements of *size* bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count > INT_MAX // size:
        raise OverflowError("requested allocation is too large")
    return bytearray(count * size)