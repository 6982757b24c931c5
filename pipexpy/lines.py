"""Line-at-a-time reading from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Read lines, newline included, from a text or binary stream.

    Data is pulled ``buffer_size`` units at a time; whatever follows the
    returned line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: AnyStr | None = None
        self._newline: AnyStr | None = None
        # readline(n) stops at a newline, so interactive input is not held up.
        self._read = getattr(stream, "readline", None) or stream.read

    def _fill(self) -> None:
        while True:
            pending = self._pending
            if (
                pending is not None
                and self._newline is not None
                and self._newline in pending
            ):
                return
            try:
                chunk = self._read(self.buffer_size)
            except OSError:
                self._pending = None
                raise
            if not chunk:
                return
            if self._newline is None:
                self._newline = b"\n" if isinstance(chunk, bytes) else "\n"  # type: ignore[assignment]
            self._pending = chunk if pending is None else pending + chunk

    def read_line(self) -> AnyStr | None:
        """Return the next line, or ``None`` once the stream is exhausted."""
        self._fill()
        pending = self._pending
        if not pending or self._newline is None:
            self._pending = None
            return None
        end = pending.find(self._newline)
        if end == -1:
            self._pending = None
            return pending
        line, rest = pending[: end + 1], pending[end + 1 :]
        self._pending = rest or None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line