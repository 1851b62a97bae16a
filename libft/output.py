"""Write characters, strings and numbers to a file descriptor."""

from __future__ import annotations

import os
from typing import Optional, Union

from libft.strings import strdup

Text = Union[str, bytes, bytearray, memoryview]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _encode(s: Text) -> bytes:
    text = strdup(s)
    return text.encode("utf-8") if isinstance(text, str) else bytes(text)


def put_char_fd(c: Union[str, int], fd: int) -> None:
    """Write one character to ``fd``; an int is written as a single byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    else:
        data = bytes([c & 0xFF])
    _write_all(fd, data)


def put_str_fd(s: Optional[Text], fd: int) -> None:
    """Write ``s`` up to its first NUL to ``fd``; nothing for None."""
    if s is None:
        return
    _write_all(fd, _encode(s))


def put_endl_fd(s: Optional[Text], fd: int) -> None:
    """Write ``s`` (if any) followed by a newline to ``fd``."""
    if s is not None:
        _write_all(fd, _encode(s))
    _write_all(fd, b"\n")


def put_nbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of ``n`` to ``fd``."""
    _write_all(fd, str(int(n)).encode("ascii"))