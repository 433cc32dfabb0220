"""String utilities with C-string semantics where they matter.

The search and comparison functions treat a NUL character as the end of
the string. Searches return an index, or None when nothing is found.
``strlcpy`` and ``strlcat`` work on NUL-terminated byte buffers held in a
bytearray.
"""

from __future__ import annotations

from itertools import islice
from typing import Callable, Iterator, MutableSequence, Optional, Union

Text = Union[str, bytes, bytearray]


def _c_length(buf: Union[bytes, bytearray, memoryview]) -> int:
    """Length of a buffer up to its first NUL byte."""
    index = bytes(buf).find(b"\0")
    return len(buf) if index == -1 else index


def _c_str(s: str) -> str:
    return s.split("\0", 1)[0]


def _char(c: Union[str, int]) -> str:
    if isinstance(c, int):
        return chr(c & 0xFF)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _codes(s: Text) -> Iterator[int]:
    """Yield character codes up to the first NUL, then a terminating 0."""
    codes = (ord(ch) for ch in s) if isinstance(s, str) else iter(s)
    for code in codes:
        if code == 0:
            break
        yield code
    yield 0


def strlcpy(dst: bytearray, src: Union[bytes, bytearray], size: int) -> int:
    """Copy *src* into *dst* using at most *size* bytes, NUL-terminating.

    Returns the length of *src*, so truncation happened if the result is
    not smaller than *size*.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size > len(dst):
        raise ValueError(f"size {size} exceeds buffer of size {len(dst)}")
    src_len = _c_length(src)
    if size:
        count = min(src_len, size - 1)
        dst[:count] = bytes(src[:count])
        dst[count] = 0
    return src_len


def strlcat(dst: bytearray, src: Union[bytes, bytearray], size: int) -> int:
    """Append *src* to the NUL-terminated string in *dst* within *size* bytes.

    Returns the length of the string it tried to create.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    src_len = _c_length(src)
    if size < 1:
        return size + src_len
    if size > len(dst):
        raise ValueError(f"size {size} exceeds buffer of size {len(dst)}")
    dst_len = _c_length(dst)
    if dst_len >= size:
        return size + src_len
    count = min(src_len, size - 1 - dst_len)
    dst[dst_len:dst_len + count] = bytes(src[:count])
    dst[dst_len + count] = 0
    return dst_len + src_len


def strchr(s: str, c: Union[str, int]) -> Optional[int]:
    """Return the index of the first *c* in *s*, or None.

    Searching for NUL finds the end of the string.
    """
    s = _c_str(s)
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index == -1 else index


def strrchr(s: str, c: Union[str, int]) -> Optional[int]:
    """Return the index of the last *c* in *s*, or None.

    Searching for NUL finds the end of the string.
    """
    s = _c_str(s)
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index == -1 else index


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most *n* characters; return the difference at the first mismatch."""
    if n < 0:
        raise ValueError("n must not be negative")
    for x, y in islice(zip(_codes(s1), _codes(s2)), n):
        if x != y or x == 0:
            return x - y
    return 0


def strcmp(s1: Text, s2: Text) -> int:
    """Compare two strings; return the difference at the first mismatch, or 0."""
    for x, y in zip(_codes(s1), _codes(s2)):
        if x != y or x == 0:
            return x - y
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find *needle* wholly within the first *length* characters of *haystack*.

    An empty needle matches at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    haystack = _c_str(haystack)
    needle = _c_str(needle)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index == -1 else index


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most *length* characters of *s* beginning at *start*.

    A start past the end gives an empty string; a None string gives None.
    """
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    s = _c_str(s)
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one counts as absent, both missing gives None."""
    if s1 is None and s2 is None:
        return None
    return (s1 or "") + (s2 or "")


def strtrim(s: Optional[str], charset: str) -> Optional[str]:
    """Remove characters found in *charset* from both ends of *s*."""
    if s is None:
        return None
    return s.strip(charset)


def split(s: Optional[str], sep: str) -> Optional[list[str]]:
    """Split *s* on runs of the character *sep*, dropping empty pieces."""
    if s is None:
        return None
    sep = _char(sep)
    return [word for word in _c_str(s).split(sep) if word]


def strmapi(s: Optional[str], f: Callable[[int, str], str]) -> Optional[str]:
    """Build a new string from ``f(index, char)`` for each character of *s*."""
    if s is None:
        return None
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    chars: Optional[MutableSequence[str]],
    f: Callable[[int, str], Optional[str]],
) -> None:
    """Call ``f(index, char)`` on each element of *chars* in place.

    A non-None return value replaces the element.
    """
    if chars is None:
        return
    for index, ch in enumerate(chars):
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement