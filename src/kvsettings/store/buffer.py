from __future__ import annotations

from kvsettings.ports.allocator import Allocator


class OwnedText:
    """Exact-size byte buffer owned by a single entry.

    Buffers are never shared: ``copy_of`` always copies the caller's bytes into
    fresh storage obtained from the allocator. Replacing content is done by
    building a complete new ``OwnedText`` first and releasing the old one only
    after the swap, so a failed allocation leaves the previous text intact.
    """

    __slots__ = ("_allocator", "_data")

    def __init__(self, allocator: Allocator, data: bytearray) -> None:
        self._allocator = allocator
        self._data: bytearray | None = data

    @classmethod
    def copy_of(cls, allocator: Allocator, text: bytes) -> OwnedText:
        # May raise AllocationError; nothing is held in that case.
        data = allocator.allocate(len(text))
        data[:] = text
        return cls(allocator, data)

    @property
    def released(self) -> bool:
        return self._data is None

    def view(self) -> bytes:
        return bytes(self._require())

    def matches(self, text: bytes) -> bool:
        return self._require() == text

    def release(self) -> None:
        if self._data is None:
            return
        self._allocator.release(self._data)
        self._data = None

    def __len__(self) -> int:
        return len(self._require())

    def __repr__(self) -> str:
        if self._data is None:
            return "OwnedText(<released>)"
        return f"OwnedText({bytes(self._data)!r})"

    def _require(self) -> bytearray:
        if self._data is None:
            raise RuntimeError("OwnedText used after release")
        return self._data
