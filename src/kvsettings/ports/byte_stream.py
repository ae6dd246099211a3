from __future__ import annotations

from typing import Protocol, runtime_checkable


# ByteSource is the read side handed to the loader: any binary stream with a bounded readline.
@runtime_checkable
class ByteSource(Protocol):
    def readline(self, size: int = -1, /) -> bytes:
        """Read up to ``size`` bytes, stopping after a newline; ``b""`` means end of input."""
        raise NotImplementedError("ByteSource is a port; use a concrete adapter.")


# ByteSink is the write side handed to the serializer.
@runtime_checkable
class ByteSink(Protocol):
    def write(self, data: bytes, /) -> int | None:
        """Write raw bytes."""
        raise NotImplementedError("ByteSink is a port; use a concrete adapter.")
