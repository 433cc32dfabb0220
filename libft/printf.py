"""Formatted output with a printf-style directive language.

Supported conversions are ``c d i u x X p s`` and ``%%``. Directives may
carry the ``-`` and ``0`` flags, a field width and a precision. The
``#`` flag adds a ``0x``/``0X`` prefix to non-zero hexadecimal values.
The ``+`` and space flags put a sign or space before non-negative
``d``/``i`` values. Flags are not combined with each other the way C's
printf combines them:

* A directive that starts with ``-``, ``0``, ``.`` or a digit takes only
  the flags ``-`` and ``0``, then width, precision and the conversion.
* ``#`` followed by anything but ``x``/``X`` is ignored. The conversion
  character that follows is then also written again as ordinary text.
* ``+`` or space followed by anything but ``d``/``i`` is ignored.
* An unknown conversion character is dropped from the output.

Every directive except ``%%`` takes up one argument. Integers are
reduced to 32 bits as C's ``int`` and ``unsigned int`` are. ``%p``
takes an integer address, None for a null pointer, or any other object,
whose ``id`` is used. Strings stop at their first NUL character, and so
does the format.
"""

from __future__ import annotations

import operator
import re
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional, TextIO, Tuple

_CONVERSIONS = frozenset("cdiuxXps")
_ALIGN_START = frozenset("-0.123456789")
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_SPEC = re.compile(r"([-0]*)([0-9]*)(?:\.([0-9]*))?(.?)", re.DOTALL)
_MISSING = object()


class FormatError(ValueError):
    """Raised for a malformed directive or a missing argument."""


class _Justify(Enum):
    RIGHT = "right"
    LEFT = "left"
    ZERO = "zero"


@dataclass(frozen=True)
class _Spec:
    justify: _Justify
    width: Optional[int]
    precision: Optional[int]
    letter: str


def _require(arg: Any, letter: str) -> Any:
    if arg is _MISSING:
        raise FormatError(f"missing argument for %{letter}")
    return arg


def _as_int(arg: Any, letter: str) -> int:
    value = _require(arg, letter)
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"%{letter} expects an integer, got {type(value).__name__}"
        ) from None


def _int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value >= 1 << 31 else value


def _hex(value: int, letter: str) -> str:
    return format(value & _MASK32, "x" if letter == "x" else "X")


def _address(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, int):
        return value
    return id(value)


def _char(value: Any) -> str:
    if isinstance(value, str) and len(value) == 1:
        return value
    if isinstance(value, int):
        return chr(value & 0xFF)
    raise TypeError(f"%c expects a single character or an integer, got {value!r}")


def _convert(letter: str, arg: Any) -> str:
    """Render one argument for a bare conversion character."""
    if letter in "di":
        return str(_int32(_as_int(arg, letter)))
    if letter == "u":
        return str(_as_int(arg, letter) & _MASK32)
    if letter in "xX":
        return _hex(_as_int(arg, letter), letter)
    if letter == "p":
        return "0x" + format(_address(_require(arg, letter)) & _MASK64, "x")
    if letter == "s":
        value = _require(arg, letter)
        if value is None:
            return "(null)"
        if not isinstance(value, str):
            raise TypeError(f"%s expects a string, got {type(value).__name__}")
        return value.split("\0", 1)[0]
    return _char(_require(arg, letter))


def _pad(text: str, width: Optional[int], justify: _Justify) -> str:
    if width is None or len(text) >= width:
        return text
    if justify is _Justify.LEFT:
        return text.ljust(width)
    if justify is _Justify.RIGHT:
        return text.rjust(width)
    if text.startswith("-"):
        return "-" + text[1:].rjust(width - 1, "0")
    return text.rjust(width, "0")


def _parse_spec(fmt: str, pos: int) -> Tuple[_Spec, int]:
    match = _SPEC.match(fmt, pos)
    flags, width, precision, letter = match.groups()
    if not letter:
        raise FormatError("incomplete directive at end of format")
    if letter not in _CONVERSIONS:
        raise FormatError(f"unsupported conversion {letter!r} after width or precision")
    justify = _Justify.RIGHT
    for flag in flags:
        if flag == "-":
            justify = _Justify.LEFT
        elif justify is not _Justify.LEFT:
            justify = _Justify.ZERO
    spec = _Spec(
        justify=justify,
        width=int(width) if width else None,
        precision=None if precision is None else int(precision or "0"),
        letter=letter,
    )
    return spec, match.end()


def _aligned(spec: _Spec, arg: Any) -> str:
    text = _convert(spec.letter, arg)
    precision = spec.precision
    justify = spec.justify
    blank = precision == 0 and text.startswith("0")
    if precision is not None and justify is _Justify.ZERO:
        justify = _Justify.RIGHT
    if blank:
        text = ""
    if precision is None or blank:
        return _pad(text, spec.width, justify)
    if spec.letter in "sc":
        text = text[:precision]
    else:
        sign = "-" if text.startswith("-") else ""
        text = sign + text[len(sign):].rjust(precision, "0")
    return _pad(text, spec.width, justify)


def _alternate(fmt: str, pos: int, arg: Any) -> Tuple[str, int]:
    following = pos + 1
    if following >= len(fmt):
        return "", following
    letter = fmt[following]
    if letter in "xX":
        digits = _hex(_as_int(arg, letter), letter)
        prefix = "0" + letter if digits != "0" else ""
        return prefix + digits, following + 1
    text, end = _directive(fmt, following, arg)
    # The '#' itself is not counted, so scanning resumes one character early.
    return text, end - 1


def _signed(fmt: str, pos: int, arg: Any) -> Tuple[str, int]:
    following = pos + 1
    if following < len(fmt) and fmt[following] in "di":
        value = _int32(_as_int(arg, fmt[following]))
        prefix = "" if value < 0 else fmt[pos]
        return prefix + str(value), following + 1
    return _directive(fmt, following, arg)


def _directive(fmt: str, pos: int, arg: Any) -> Tuple[str, int]:
    """Render the directive whose text starts at *pos*; return it and where it ends."""
    if pos >= len(fmt):
        raise FormatError("incomplete directive at end of format")
    ch = fmt[pos]
    if ch in _CONVERSIONS:
        return _convert(ch, arg), pos + 1
    if ch == "#":
        return _alternate(fmt, pos, arg)
    if ch in " +":
        return _signed(fmt, pos, arg)
    if ch in _ALIGN_START:
        spec, end = _parse_spec(fmt, pos)
        return _aligned(spec, arg), end
    return "", pos + 1


def _render(fmt: str, args: Iterator[Any]) -> Iterator[str]:
    pos = 0
    while pos < len(fmt):
        start = fmt.find("%", pos)
        if start == -1:
            yield fmt[pos:]
            return
        yield fmt[pos:start]
        if fmt.startswith("%%", start):
            yield "%"
            pos = start + 2
            continue
        text, pos = _directive(fmt, start + 1, next(args, _MISSING))
        yield text


def format_string(fmt: Optional[str], *args: Any) -> str:
    """Return *fmt* with its directives replaced by the formatted *args*."""
    if fmt is None:
        raise FormatError("format must not be None")
    fmt = fmt.split("\0", 1)[0]
    return "".join(_render(fmt, iter(args)))


def printf(fmt: Optional[str], *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to *file* (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)