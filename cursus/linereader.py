"""Line-by-line reading from file descriptors with per-descriptor carry-over."""

from __future__ import annotations

import os

DEFAULT_BUFFER_SIZE = 4096
MAX_FD = 4095


class LineReader:
    """Read one line at a time from raw file descriptors.

    Data read past the end of a line is kept per descriptor and handed out
    by later calls, so several descriptors can be read in turns.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        self.buffer_size = buffer_size
        self._pending: dict[int, bytes] = {}

    def read_line(self, fd: int) -> bytes | None:
        """Return the next line of ``fd``, newline included, or None at the end.

        The last line of a stream comes back without a newline when the
        stream does not end with one. None is also returned for a descriptor
        outside 0..4095, a non-positive buffer size or a failing read.
        """
        if fd < 0 or fd > MAX_FD or self.buffer_size <= 0:
            return None
        pending = self._pending.pop(fd, b"")
        while b"\n" not in pending:
            try:
                chunk = os.read(fd, self.buffer_size)
            except OSError:
                return None
            if not chunk:
                break
            pending += chunk
        if not pending:
            return None
        end = pending.find(b"\n")
        if end < 0:
            return pending
        line, rest = pending[: end + 1], pending[end + 1 :]
        if rest:
            self._pending[fd] = rest
        return line


_default_reader = LineReader()


def get_next_line(fd: int) -> bytes | None:
    """Return the next line of ``fd`` using a shared reader, or None at the end."""
    return _default_reader.read_line(fd)