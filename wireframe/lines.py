"""Reading a stream one line at a time, and measuring map-like text files."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

from .strings import count_words

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream in fixed-size chunks.

    Each line keeps its trailing newline; the final line may lack one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None
        self._exhausted = False

    def read_line(self) -> AnyStr | None:
        """Return the next line, or ``None`` once the stream is used up."""
        while not self._exhausted:
            if self._pending is not None and self._newline_in_pending() >= 0:
                break
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._exhausted = True
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        if not self._pending:
            return None
        cut = self._newline_in_pending()
        end = len(self._pending) if cut < 0 else cut + 1
        line, self._pending = self._pending[:end], self._pending[end:]
        return line

    def _newline_in_pending(self) -> int:
        pending = self._pending
        newline = b"\n" if isinstance(pending, (bytes, bytearray)) else "\n"
        return pending.find(newline)

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def first_line_width(stream: IO[AnyStr]) -> int:
    """Count the space-separated words on the first line of ``stream``."""
    line = LineReader(stream).read_line()
    if line is None:
        return 0
    if isinstance(line, (bytes, bytearray)):
        line = line.decode("latin-1")
    return count_words(line, " ")


def count_lines(stream: IO[AnyStr]) -> int:
    """Count the lines of ``stream``, a final unterminated line included."""
    return sum(1 for _ in LineReader(stream))