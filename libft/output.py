"""Write characters, strings and numbers to a file descriptor."""

from __future__ import annotations

import os
from typing import Optional, Union


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: Union[str, int], fd: int) -> None:
    """Write one character to *fd*.

    An integer is written as the single byte of its low eight bits; a
    one-character string is written in UTF-8.
    """
    if isinstance(c, int):
        data = bytes([c & 0xFF])
    elif isinstance(c, str) and len(c) == 1:
        data = c.encode("utf-8")
    else:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, data)


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write *s* to *fd*; None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8"))


def putendl_fd(s: Optional[str], fd: int) -> None:
    """Write *s* followed by a newline to *fd*; None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8") + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal representation of *n* to *fd*."""
    _write_all(fd, str(int(n)).encode("ascii"))