from .allocator import AllocationError, Allocator
from .byte_stream import ByteSink, ByteSource
from .log_sink import LogSink

# Public port exports keep wiring explicit at composition time.
__all__ = [
    "AllocationError",
    "Allocator",
    "ByteSink",
    "ByteSource",
    "LogSink",
]
