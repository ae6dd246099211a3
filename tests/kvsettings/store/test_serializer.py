from __future__ import annotations

import io

# Serializer writes "key = value" lines in iteration order.
from kvsettings.adapters.allocator import HeapAllocator
from kvsettings.store.ordered_map import OrderedMap
from kvsettings.store.serializer import format_entry, save_stream


def test_format_entry() -> None:
    assert format_entry(b"foo", b"abc def ghi") == b"foo = abc def ghi\n"
    assert format_entry(b"", b"") == b" = \n"


def test_save_stream_writes_in_order() -> None:
    store = OrderedMap(HeapAllocator())
    store.set(b"foo", b"abc def ghi")
    store.set(b"bar", b"54321")
    store.set(b"baz", b"123.1")
    sink = io.BytesIO()
    assert save_stream(store, sink) == 3
    assert sink.getvalue() == b"foo = abc def ghi\nbar = 54321\nbaz = 123.1\n"


def test_save_stream_empty_map_writes_nothing() -> None:
    sink = io.BytesIO()
    assert save_stream(OrderedMap(HeapAllocator()), sink) == 0
    assert sink.getvalue() == b""


def test_values_are_not_escaped() -> None:
    # Embedded delimiters are written verbatim.
    store = OrderedMap(HeapAllocator())
    store.set(b"k", b"a = b")
    sink = io.BytesIO()
    save_stream(store, sink)
    assert sink.getvalue() == b"k = a = b\n"
