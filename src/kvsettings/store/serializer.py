from __future__ import annotations

from kvsettings.ports.byte_stream import ByteSink
from kvsettings.store.ordered_map import OrderedMap

SEPARATOR = b" = "
TERMINATOR = b"\n"


def format_entry(key: bytes, value: bytes) -> bytes:
    # No escaping: a value holding a newline cannot be told apart from the next line on reload.
    return key + SEPARATOR + value + TERMINATOR


def save_stream(store: OrderedMap, sink: ByteSink) -> int:
    # One line per entry in iteration order; returns the number of entries written.
    written = 0
    for key, value in store:
        sink.write(format_entry(key, value))
        written += 1
    return written
