from __future__ import annotations

from collections.abc import Iterator

from kvsettings.ports.allocator import AllocationError, Allocator
from kvsettings.store.buffer import OwnedText
from kvsettings.store.entry import Entry


class OrderedMap:
    """Insertion-ordered map of unique byte keys to byte values.

    Entries live in an arena of slots and are chained through ``prev``/``next``
    slot indices, so unlinking an entry never leaves a dangling reference.
    Freed slots are recycled for later inserts; recycling does not affect
    iteration order, which is defined by the links alone.

    Lookup is a linear scan over the chain. The intended workload is a few
    dozen to a few hundred settings.
    """

    def __init__(self, allocator: Allocator) -> None:
        self._allocator = allocator
        self._slots: list[Entry | None] = []
        self._free: list[int] = []
        self._first: int | None = None
        self._last: int | None = None
        self._size = 0

    @property
    def allocator(self) -> Allocator:
        return self._allocator

    @property
    def first(self) -> int | None:
        return self._first

    @property
    def last(self) -> int | None:
        return self._last

    def entry_at(self, index: int) -> Entry:
        entry = self._slots[index]
        if entry is None:
            raise KeyError(index)
        return entry

    def find(self, key: bytes | None) -> int | None:
        # Slot index of the entry holding key, or None.
        if key is None:
            return None
        index = self._first
        while index is not None:
            entry = self._slots[index]
            assert entry is not None
            if entry.key.matches(key):
                return index
            index = entry.next
        return None

    def get(self, key: bytes | None) -> bytes | None:
        index = self.find(key)
        if index is None:
            return None
        return self.entry_at(index).value_bytes()

    def set(self, key: bytes | None, value: bytes | None) -> bool:
        if key is None or value is None:
            return False
        index = self.find(key)
        if index is not None:
            return self._update(self.entry_at(index), key, value)
        return self._append(key, value)

    def remove(self, key: bytes | None) -> bool:
        index = self.find(key)
        if index is None:
            return False
        entry = self.entry_at(index)

        if entry.next is not None:
            self.entry_at(entry.next).prev = entry.prev
        else:
            self._last = entry.prev
        if entry.prev is not None:
            self.entry_at(entry.prev).next = entry.next
        else:
            self._first = entry.next

        entry.release()
        self._slots[index] = None
        self._free.append(index)
        self._size -= 1
        return True

    def destroy(self) -> None:
        # Release every entry's buffers; the map is empty (and reusable) afterwards.
        index = self._first
        while index is not None:
            entry = self.entry_at(index)
            next_index = entry.next
            entry.release()
            index = next_index
        self._slots.clear()
        self._free.clear()
        self._first = None
        self._last = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[tuple[bytes, bytes]]:
        index = self._first
        while index is not None:
            entry = self.entry_at(index)
            yield entry.key_bytes(), entry.value_bytes()
            index = entry.next

    def _update(self, entry: Entry, key: bytes, value: bytes) -> bool:
        # Stage both replacements before touching the entry so a refusal leaves it as it was.
        try:
            new_key = OwnedText.copy_of(self._allocator, key)
        except AllocationError:
            return False
        try:
            new_value = OwnedText.copy_of(self._allocator, value)
        except AllocationError:
            new_key.release()
            return False

        old_key, old_value = entry.key, entry.value
        entry.key, entry.value = new_key, new_value
        old_key.release()
        old_value.release()
        return True

    def _append(self, key: bytes, value: bytes) -> bool:
        try:
            owned_key = OwnedText.copy_of(self._allocator, key)
        except AllocationError:
            return False
        try:
            owned_value = OwnedText.copy_of(self._allocator, value)
        except AllocationError:
            owned_key.release()
            return False

        entry = Entry(key=owned_key, value=owned_value, prev=self._last)
        index = self._take_slot(entry)
        if self._last is None:
            self._first = index
        else:
            self.entry_at(self._last).next = index
        self._last = index
        self._size += 1
        return True

    def _take_slot(self, entry: Entry) -> int:
        if self._free:
            index = self._free.pop()
            self._slots[index] = entry
            return index
        self._slots.append(entry)
        return len(self._slots) - 1
