from __future__ import annotations


class StoreClosedError(RuntimeError):
    # Raised when a store handle is used after destroy(); this is a caller bug, not a runtime result.
    def __init__(self) -> None:
        super().__init__("settings store has been destroyed")
