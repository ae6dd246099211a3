from .allocator import FaultInjectingAllocator, HeapAllocator
from .file_io import FileByteSink, FileByteSource
from .log_sinks import JsonlLogSink, MemoryLogSink, NullLogSink, StdoutLogSink

# Public adapter exports are optional but make wiring simpler.
__all__ = [
    "FaultInjectingAllocator",
    "FileByteSink",
    "FileByteSource",
    "HeapAllocator",
    "JsonlLogSink",
    "MemoryLogSink",
    "NullLogSink",
    "StdoutLogSink",
]
