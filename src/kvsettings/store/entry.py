from __future__ import annotations

from dataclasses import dataclass

from kvsettings.store.buffer import OwnedText


@dataclass(slots=True)
class Entry:
    # One key/value pair plus its links in the store's iteration order (slot indices, not references).
    key: OwnedText
    value: OwnedText
    prev: int | None = None
    next: int | None = None

    def key_bytes(self) -> bytes:
        return self.key.view()

    def value_bytes(self) -> bytes:
        return self.value.view()

    def release(self) -> None:
        self.key.release()
        self.value.release()
