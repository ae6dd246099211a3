from __future__ import annotations

import io

import pytest

# Ports define the seams the store talks through; adapters must conform.
from kvsettings.adapters.allocator import FaultInjectingAllocator, HeapAllocator
from kvsettings.adapters.log_sinks import MemoryLogSink, NullLogSink
from kvsettings.observability.logging import LogMessage
from kvsettings.ports import AllocationError, Allocator, ByteSink, ByteSource, LogSink


def test_allocator_adapters_conform_to_port() -> None:
    # Both allocators are interchangeable behind the Allocator port.
    assert isinstance(HeapAllocator(), Allocator)
    assert isinstance(FaultInjectingAllocator(), Allocator)


def test_binary_streams_conform_to_byte_ports() -> None:
    # Any binary stream is a valid source and sink.
    stream = io.BytesIO()
    assert isinstance(stream, ByteSource)
    assert isinstance(stream, ByteSink)


def test_log_sinks_conform_to_port() -> None:
    assert isinstance(NullLogSink(), LogSink)
    assert isinstance(MemoryLogSink(), LogSink)


def test_allocation_error_is_memory_error() -> None:
    # Callers that only know MemoryError still catch allocator refusals.
    err = AllocationError(16)
    assert isinstance(err, MemoryError)
    assert err.size == 16


def test_port_defaults_raise() -> None:
    # Direct port calls without adapter wiring should raise.
    class _PortOnly(Allocator, ByteSource, ByteSink, LogSink):
        pass

    port = _PortOnly()  # type: ignore[misc]
    with pytest.raises(NotImplementedError):
        port.allocate(1)
    with pytest.raises(NotImplementedError):
        port.resize(bytearray(1), 2)
    with pytest.raises(NotImplementedError):
        port.release(bytearray(1))
    with pytest.raises(NotImplementedError):
        port.readline(1)
    with pytest.raises(NotImplementedError):
        port.write(b"x")
    with pytest.raises(NotImplementedError):
        port.emit(LogMessage(level="info", message="x"))
