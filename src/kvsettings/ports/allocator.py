from __future__ import annotations

from typing import Protocol, runtime_checkable


class AllocationError(MemoryError):
    # Raised by allocators when a buffer cannot be provided; callers translate it into a False result.
    def __init__(self, size: int) -> None:
        super().__init__(f"cannot allocate {size} bytes")
        self.size = size


# Allocator port lets the store's buffer handling be swapped (e.g. fault injection in tests).
@runtime_checkable
class Allocator(Protocol):
    def allocate(self, size: int) -> bytearray:
        """Return a zero-filled buffer of exactly ``size`` bytes."""
        raise NotImplementedError("Allocator is a port; use a concrete adapter.")

    def resize(self, buffer: bytearray, size: int) -> bytearray:
        """Return a buffer of ``size`` bytes holding the old contents (truncated or zero-padded)."""
        raise NotImplementedError("Allocator is a port; use a concrete adapter.")

    def release(self, buffer: bytearray) -> None:
        """Give a buffer back; it must not be used afterwards."""
        raise NotImplementedError("Allocator is a port; use a concrete adapter.")
