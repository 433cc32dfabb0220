"""Read a file descriptor one line at a time.

Bytes read past the end of a line are kept per descriptor and handed out
by later calls, so several descriptors can be read in turn.
"""

from __future__ import annotations

import os
from typing import Dict, Optional

BUFFER_SIZE = 42


class LineReader:
    """Line reader that keeps unread bytes for each file descriptor.

    Each call reads chunks of *buffer_size* bytes. A line ends at a
    newline (which is kept), at a short read, or at a NUL byte, which
    also discards the rest of its chunk.
    """

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self.buffer_size = buffer_size
        self._pending: Dict[int, bytes] = {}

    def _keep(self, fd: int, rest: bytes) -> None:
        if rest:
            self._pending[fd] = rest

    def read_line(self, fd: int) -> Optional[bytes]:
        """Return the next line from *fd*, or None when nothing is left.

        Read errors from the operating system propagate as OSError.
        """
        if fd < 0:
            raise ValueError("file descriptor must not be negative")

        head, newline, rest = self._pending.pop(fd, b"").partition(b"\n")
        if newline:
            self._keep(fd, rest)
            return head + newline

        line = bytearray(head)
        while True:
            chunk = os.read(fd, self.buffer_size)
            data = chunk.split(b"\0", 1)[0]
            head, newline, rest = data.partition(b"\n")
            line += head + newline
            if newline:
                self._keep(fd, rest)
                break
            if len(chunk) < self.buffer_size or len(data) < len(chunk):
                break
        return bytes(line) or None


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line from *fd* using a shared reader, or None at the end."""
    return _default_reader.read_line(fd)