from __future__ import annotations

from dataclasses import dataclass, field

from kvsettings.ports.allocator import AllocationError, Allocator


@dataclass
class HeapAllocator(Allocator):
    # Default allocator: plain bytearrays, with live counters so teardown can be verified.
    live_buffers: int = 0
    live_bytes: int = 0
    peak_bytes: int = 0

    def allocate(self, size: int) -> bytearray:
        if size < 0:
            raise ValueError("size must be non-negative")
        buffer = bytearray(size)
        self._track(1, size)
        return buffer

    def resize(self, buffer: bytearray, size: int) -> bytearray:
        if size < 0:
            raise ValueError("size must be non-negative")
        old_size = len(buffer)
        if size < old_size:
            del buffer[size:]
        else:
            buffer.extend(bytes(size - old_size))
        self._track(0, size - old_size)
        return buffer

    def release(self, buffer: bytearray) -> None:
        self._track(-1, -len(buffer))
        buffer.clear()

    def _track(self, buffers: int, nbytes: int) -> None:
        self.live_buffers += buffers
        self.live_bytes += nbytes
        self.peak_bytes = max(self.peak_bytes, self.live_bytes)


@dataclass
class FaultInjectingAllocator(Allocator):
    # Wraps another allocator and refuses requests on demand (disabled, or after N successes).
    inner: Allocator = field(default_factory=HeapAllocator)
    fail_after: int | None = None
    enabled: bool = True
    granted: int = 0
    refused: int = 0

    def disable(self) -> None:
        self.enabled = False

    def enable(self) -> None:
        self.enabled = True

    def allocate(self, size: int) -> bytearray:
        self._check(size)
        return self.inner.allocate(size)

    def resize(self, buffer: bytearray, size: int) -> bytearray:
        self._check(size)
        return self.inner.resize(buffer, size)

    def release(self, buffer: bytearray) -> None:
        # Releasing never fails; teardown must always be able to run.
        self.inner.release(buffer)

    def _check(self, size: int) -> None:
        exhausted = self.fail_after is not None and self.granted >= self.fail_after
        if not self.enabled or exhausted:
            self.refused += 1
            raise AllocationError(size)
        self.granted += 1
