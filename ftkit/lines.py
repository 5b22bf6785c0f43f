"""Line-by-line reading from raw file descriptors.

Lines are returned as ``bytes`` and keep their trailing newline; the last
line of the input is returned without one if the input does not end in a
newline.  ``None`` marks the end of the input.
"""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

BUFFER_SIZE = 4096


class LineReader:
    """Reads lines from a file descriptor, ``buffer_size`` bytes at a time.

    Bytes read past the end of a line are kept for the next call.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def read_line(self) -> Optional[bytes]:
        """Return the next line, or ``None`` at the end of the input.

        A read error discards any buffered bytes and is raised as ``OSError``.
        """
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        cut = len(self._pending) if end < 0 else end + 1
        line = bytes(self._pending[:cut])
        del self._pending[:cut]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line from ``fd``, keeping separate state for each descriptor.

    Returns ``None`` at the end of the input or for a negative descriptor;
    in both cases any state kept for that descriptor is dropped.
    """
    if fd < 0:
        _readers.pop(fd, None)
        return None
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line