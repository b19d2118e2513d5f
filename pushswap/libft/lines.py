"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator, Optional

DEFAULT_BUFFER_SIZE = 42


class LineReader:
    """Read lines from ``stream``, pulling ``buffer_size`` units per read.

    Works on text streams (yielding ``str``) and binary streams (yielding
    ``bytes``). Each line keeps its trailing newline; the final line of a
    stream may lack one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _newline_at(self) -> int:
        if self._pending is None:
            return -1
        newline = "\n" if isinstance(self._pending, str) else b"\n"
        return self._pending.find(newline)

    def readline(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        cut = self._newline_at()
        while cut < 0:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
            cut = self._newline_at()
        if not self._pending:
            self._pending = None
            return None
        end = cut + 1 if cut >= 0 else len(self._pending)
        line = self._pending[:end]
        self._pending = self._pending[end:]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line