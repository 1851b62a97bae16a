"""Read a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Optional

BUFFER_SIZE = 8
MAX_SIZE_FD = 1024


class LineReader:
    """Return successive lines from file descriptors.

    Bytes read past the end of a line are kept for the next call. As with
    a single static buffer, that leftover is shared by every descriptor
    the reader is asked about.
    """

    def __init__(self, buffer_size: int = BUFFER_SIZE, max_fd: int = MAX_SIZE_FD) -> None:
        self.buffer_size = buffer_size
        self.max_fd = max_fd
        self._pending: Optional[bytes] = None

    def _fill(self, fd: int) -> None:
        while self._pending is None or b"\n" not in self._pending:
            try:
                chunk = os.read(fd, self.buffer_size)
            except OSError:
                self._pending = None
                return
            if not chunk:
                return
            self._pending = (self._pending or b"") + chunk

    def next_line(self, fd: int) -> Optional[bytes]:
        """Return the next line from ``fd``, newline included, or None.

        None is returned at end of input, after a read error, and for a
        descriptor outside ``0..max_fd`` or a non-positive buffer size.
        """
        if self.buffer_size <= 0 or fd < 0 or fd > self.max_fd:
            return None
        self._fill(fd)
        if not self._pending:
            self._pending = None
            return None
        end = self._pending.find(b"\n")
        end = len(self._pending) if end < 0 else end + 1
        line, self._pending = self._pending[:end], self._pending[end:]
        return line


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line from ``fd`` using a shared default reader."""
    return _default_reader.next_line(fd)