"""C-library style helpers for characters, memory, numbers, strings, output, lists, line reading and printf formatting."""

__version__ = "1.0.0"

__all__ = ["chars", "memory", "numbers", "strings", "output", "lists", "linereader", "printf"]