"""Conversions between decimal text and numbers."""

from __future__ import annotations

_WHITESPACE = "\t\n\r\v\f "


def _sign_and_digits(text: str) -> tuple[int, int]:
    """Skip leading whitespace and an optional sign; return (sign, index)."""
    i = 0
    while i < len(text) and text[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < len(text) and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    return sign, i


def _digit_run(text: str, start: int) -> str:
    end = start
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    return text[start:end]


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping like a 32-bit int.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit. Text without digits gives 0.
    """
    sign, i = _sign_and_digits(text)
    digits = _digit_run(text, i)
    if not digits:
        return 0
    return _wrap_int32(sign * int(digits))


def atof(text: str) -> float:
    """Parse a leading decimal number with an optional fractional part.

    At least one digit must come before any decimal point, otherwise 0.0.
    """
    sign, i = _sign_and_digits(text)
    whole = _digit_run(text, i)
    if not whole:
        return 0.0
    result = float(int(whole))
    i += len(whole)
    if i < len(text) and text[i] == ".":
        fraction = _digit_run(text, i + 1)
        for place, digit in enumerate(fraction, start=1):
            result += int(digit) / (10.0**place)
    return result * sign


def itoa(n: int) -> str:
    """Return the decimal representation of *n*."""
    return str(n)