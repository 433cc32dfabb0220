# libft

A small library of C-library style helpers that keep the classic
semantics: the same edge cases, return values and limits as the familiar
routines, expressed with Python types. It needs nothing beyond the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `libft.chars`: ASCII classification and case conversion: `is_alnum`,
  `is_alpha`, `is_ascii`, `is_digit`, `is_print`, `to_upper`, `to_lower`.
  Each accepts a one-character string or an integer code. The converters
  return the same type they were given.
- `libft.memory`: operations on byte buffers: `bzero`, `memset`, `memcpy`,
  `memmove` and `calloc`. The mutating functions change a `bytearray` or
  writable `memoryview` in place. `memchr` returns an index or `None`, and
  `memcmp` returns the difference of the first unequal bytes. A length
  larger than a buffer raises `ValueError`. `calloc` raises
  `OverflowError` when the request passes the 32-bit `int` limit.
- `libft.numbers`: `atoi` parses a leading integer and wraps like a 32-bit
  `int`. `atof` parses a leading decimal number. Both accept leading
  whitespace and one sign, and give 0 when no digit is found. `itoa`
  returns the decimal text.
- `libft.strings`: `strlcpy` and `strlcat` work on NUL-terminated byte
  strings in a `bytearray`. `strchr`, `strrchr` and `strnstr` return an
  index or `None`. `strncmp` and `strcmp` return the difference at the
  first mismatch. The module also has `substr`, `strjoin`, `strtrim`,
  `split` (which drops empty pieces), `strmapi` and `striteri`.
- `libft.output`: `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd`
  write to an operating-system file descriptor.
- `libft.lists`: `Node` and a singly linked `LinkedList`. The list has
  `push_front`, `push_back`, `last`, `clear`, `iterate` and `map`, and
  supports `len()` and iteration over the node contents.
- `libft.linereader`: `LineReader(buffer_size=42).read_line(fd)` returns the
  next line from a file descriptor as `bytes`, including its newline, or
  `None` when nothing is left. It keeps unread data separately for each
  descriptor. `get_next_line(fd)` does the same with a shared reader.
- `libft.printf`: `format_string(fmt, *args)` and
  `printf(fmt, *args, file=None)` handle the conversions
  `c s d i u x X p %`, the flags `- 0 # + space`, field width and
  precision. `printf` writes to a text stream (standard output by
  default) and returns the number of characters written. A malformed
  directive or a missing argument raises `FormatError`. See the module
  docstring for the exact rules on combining flags.

## Examples

```python
from libft.numbers import atoi, itoa
from libft.strings import split, strtrim, strchr
from libft.printf import format_string

atoi("   -42abc")              # -42
itoa(-2147483648)              # "-2147483648"
split("  hello  world ", " ")  # ["hello", "world"]
strtrim("xxhixx", "x")         # "hi"
strchr("hello", "l")           # 2
format_string("%05d|%-4s|%#x", 42, "ab", 255)  # "00042|ab  |0xff"
```

```python
import os
from libft.linereader import LineReader

reader = LineReader(buffer_size=42)
fd = os.open("notes.txt", os.O_RDONLY)
while (line := reader.read_line(fd)) is not None:
    print(line.decode(), end="")
os.close(fd)
```

## What it does not do

This is a library only. It has no command-line program. `printf` writes
to Python text streams, not to raw file descriptors.