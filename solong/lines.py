"""Line-by-line reading of a stream in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator, Optional

BUFFER_SIZE = 25


class LineReader:
    """Read lines from a stream, pulling buffer_size characters at a time.

    Each line keeps its trailing newline; the last line may lack one.
    Works with text and binary streams alike.
    """

    def __init__(self, stream: IO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._newline: Optional[AnyStr] = None

    def _fill(self) -> None:
        while self._pending is None or self._newline not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                return
            if self._pending is None:
                self._newline = "\n" if isinstance(chunk, str) else b"\n"
                self._pending = chunk
            else:
                self._pending += chunk

    def readline(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        if not self._pending:
            return None
        index = self._pending.find(self._newline)
        end = len(self._pending) if index < 0 else index + 1
        line, self._pending = self._pending[:end], self._pending[end:]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.readline()) is not None:
            yield line


def read_lines(stream: IO, buffer_size: int = BUFFER_SIZE) -> list:
    """Read every remaining line of stream into a list."""
    return list(LineReader(stream, buffer_size))