from __future__ import annotations

from collections.abc import Iterator

from kvsettings.ports.allocator import Allocator
from kvsettings.ports.byte_stream import ByteSource

DEFAULT_CHUNK_SIZE = 1024


class LineReader:
    """Reads one line at a time, of any length, from a binary stream.

    The working buffer starts at ``chunk_size`` bytes and grows by another
    chunk whenever it fills up before a newline arrives. The terminator (``\\n``
    or ``\\r\\n``) is not part of the returned line. ``AllocationError`` from the
    allocator propagates to the caller.
    """

    def __init__(self, source: ByteSource, allocator: Allocator, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._source = source
        self._allocator = allocator
        self._chunk_size = chunk_size

    def read_line(self) -> bytes | None:
        # None only when end of input is reached before any byte of a new line.
        buffer = self._allocator.allocate(self._chunk_size)
        try:
            filled = 0
            while True:
                space = len(buffer) - filled
                if space == 0:
                    buffer = self._allocator.resize(buffer, len(buffer) + self._chunk_size)
                    space = self._chunk_size
                piece = self._source.readline(space)
                if not piece:
                    break
                buffer[filled : filled + len(piece)] = piece
                filled += len(piece)
                if piece.endswith(b"\n"):
                    break
            if filled == 0:
                return None
            return _strip_terminator(bytes(buffer[:filled]))
        finally:
            self._allocator.release(buffer)

    def __iter__(self) -> Iterator[bytes]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def _strip_terminator(line: bytes) -> bytes:
    if line.endswith(b"\r\n"):
        return line[:-2]
    if line.endswith(b"\n"):
        return line[:-1]
    return line
