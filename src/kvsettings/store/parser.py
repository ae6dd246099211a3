from __future__ import annotations

from dataclasses import dataclass

from kvsettings.ports.allocator import Allocator
from kvsettings.ports.byte_stream import ByteSource
from kvsettings.store.line_reader import DEFAULT_CHUNK_SIZE, LineReader
from kvsettings.store.ordered_map import OrderedMap

DELIMITER = b"="


@dataclass(frozen=True, slots=True)
class LoadReport:
    # Per-load counters; skipped lines are not errors.
    lines_read: int = 0
    entries_set: int = 0
    lines_skipped: int = 0
    entries_rejected: int = 0


def parse_line(line: bytes) -> tuple[bytes, bytes] | None:
    # First "=" splits key from value; later "=" stay in the value. bytes.strip() trims ASCII whitespace only.
    key, sep, value = line.partition(DELIMITER)
    if not sep:
        return None
    return key.strip(), value.strip()


def load_stream(
    store: OrderedMap,
    source: ByteSource,
    allocator: Allocator,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> LoadReport:
    # Merge every key/value line of source into store; a repeated key keeps its first position and last value.
    lines_read = entries_set = lines_skipped = entries_rejected = 0
    for line in LineReader(source, allocator, chunk_size=chunk_size):
        lines_read += 1
        pair = parse_line(line)
        if pair is None:
            lines_skipped += 1
            continue
        if store.set(*pair):
            entries_set += 1
        else:
            entries_rejected += 1
    return LoadReport(
        lines_read=lines_read,
        entries_set=entries_set,
        lines_skipped=lines_skipped,
        entries_rejected=entries_rejected,
    )
