"""Line-at-a-time reading from a stream through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 1024


class LineReader(Generic[AnyStr]):
    """Read lines, newline included, from a text or binary stream.

    Data past the returned line is kept for the next call. At end of input
    ``read_line`` returns None; a later call reads from the stream again.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._newline: Optional[AnyStr] = None

    def _fill(self, buf: Optional[AnyStr]) -> Optional[AnyStr]:
        """Read chunks onto ``buf`` until it holds a newline or input ends."""
        while buf is None or self._newline is None or self._newline not in buf:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            if self._newline is None:
                self._newline = b"\n" if isinstance(chunk, bytes) else "\n"  # type: ignore[assignment]
            buf = chunk if buf is None else buf + chunk
        return buf

    def read_line(self) -> Optional[AnyStr]:
        """Next line including its newline, the unterminated tail, or None at EOF."""
        buf = self._fill(self._pending)
        if not buf:
            self._pending = None
            return None
        assert self._newline is not None
        end = buf.find(self._newline)
        if end < 0:
            line, rest = buf, buf[:0]
        else:
            line, rest = buf[: end + 1], buf[end + 1 :]
        self._pending = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line