"""Character, memory, string, output, linked-list and line-reading helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "output", "transform", "linkedlist", "line_reader"]