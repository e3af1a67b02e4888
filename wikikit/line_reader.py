"""Line readers over text or binary streams."""

from __future__ import annotations

import abc
import re
from collections.abc import Iterator
from typing import IO, AnyStr, Generic

__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "LineReader",
    "BufferedLineReader",
    "StreamLineReader",
]

DEFAULT_BUFFER_SIZE = 512 * 1024

_TEXT_EOL = re.compile(r"[\r\n]")
_BYTES_EOL = re.compile(rb"[\r\n]")


class LineReader(abc.ABC, Generic[AnyStr]):
    """Reads a source one line at a time."""

    @abc.abstractmethod
    def read_line(self) -> AnyStr | None:
        """Return the next line without its terminator, or None at the end."""

    @abc.abstractmethod
    def eof(self) -> bool:
        """True once the source has been read to the end."""

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


class BufferedLineReader(LineReader[AnyStr]):
    """Reads lines from a stream in large chunks.

    Lines may be terminated by ``\\n``, ``\\r\\n`` or ``\\r`` and may span any
    number of chunks, including a ``\\r\\n`` pair split between two chunks.
    A final line without a terminator is returned if it is not empty. Works
    with both text and binary streams; lines have the stream's type.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._buffer: AnyStr | None = None
        self._start = 0
        self._exhausted = False
        self._skip_lf = False

    def _next_chunk(self) -> bool:
        """Load the next chunk; False when the stream has nothing more."""
        chunk = self._stream.read(self._buffer_size)
        if not chunk:
            self._exhausted = True
            self._start = len(self._buffer) if self._buffer is not None else 0
            return False
        self._buffer = chunk
        self._start = 0
        return True

    def read_line(self) -> AnyStr | None:
        parts: list[AnyStr] = []
        while True:
            buffer = self._buffer
            if buffer is None or self._start >= len(buffer):
                if self._exhausted or not self._next_chunk():
                    break
                buffer = self._buffer
                assert buffer is not None
                if self._skip_lf:
                    self._skip_lf = False
                    if buffer[:1] in ("\n", b"\n"):
                        self._start = 1
                    continue

            pattern = _TEXT_EOL if isinstance(buffer, str) else _BYTES_EOL
            match = pattern.search(buffer, self._start)
            if match is None:
                parts.append(buffer[self._start :])
                self._start = len(buffer)
                continue

            end = match.start()
            parts.append(buffer[self._start : end])
            terminator = match.group()
            if terminator in ("\r", b"\r"):
                if end + 1 < len(buffer):
                    self._start = end + 2 if buffer[end + 1 : end + 2] in ("\n", b"\n") else end + 1
                else:
                    self._start = end + 1
                    self._skip_lf = True
            else:
                self._start = end + 1
            return parts[0][:0].join(parts)

        if parts:
            return parts[0][:0].join(parts)
        return None

    def eof(self) -> bool:
        buffered = len(self._buffer) if self._buffer is not None else 0
        return self._exhausted and self._start >= buffered


class StreamLineReader(LineReader[AnyStr]):
    """Reads lines with the stream's own ``readline``.

    Only ``\\n`` ends a line; a ``\\r`` before it is kept as part of the line.
    """

    def __init__(self, stream: IO[AnyStr]) -> None:
        self._stream = stream
        self._eof = False

    def read_line(self) -> AnyStr | None:
        if self._eof:
            return None
        raw = self._stream.readline()
        if not raw:
            self._eof = True
            return None
        if raw[-1:] in ("\n", b"\n"):
            return raw[:-1]
        self._eof = True
        return raw

    def eof(self) -> bool:
        return self._eof