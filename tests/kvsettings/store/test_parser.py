from __future__ import annotations

import io

# Each line splits at its first "=" and both halves are trimmed.
from kvsettings.adapters.allocator import HeapAllocator
from kvsettings.store.ordered_map import OrderedMap
from kvsettings.store.parser import LoadReport, load_stream, parse_line


def test_parse_line_splits_at_first_equals() -> None:
    # Later "=" characters and interior whitespace stay in the value.
    assert parse_line(b"foo  bar  = abc def =   ghi   ") == (b"foo  bar", b"abc def =   ghi")


def test_parse_line_trims_ascii_whitespace() -> None:
    assert parse_line(b"\t bar \x0b=   54321 \x0c\r") == (b"bar", b"54321")


def test_parse_line_keeps_non_ascii_whitespace() -> None:
    # U+00A0 (no-break space) is not treated as whitespace.
    nbsp = "\u00a0".encode("utf-8")
    assert parse_line(nbsp + b"k = v" + nbsp) == (nbsp + b"k", b"v" + nbsp)


def test_parse_line_without_delimiter_is_skipped() -> None:
    assert parse_line(b"") is None
    assert parse_line(b"# just a comment") is None
    assert parse_line(b"   ") is None


def test_parse_line_edge_delimiters() -> None:
    # Delimiter at either end gives an empty key or value.
    assert parse_line(b"= value") == (b"", b"value")
    assert parse_line(b"key =") == (b"key", b"")
    assert parse_line(b"=") == (b"", b"")
    assert parse_line(b"a==b") == (b"a", b"=b")


def test_load_stream_reports_counters() -> None:
    store = OrderedMap(HeapAllocator())
    source = io.BytesIO(b"a = 1\n\nnot a pair\nb = 2\n")
    report = load_stream(store, source, HeapAllocator())
    assert report == LoadReport(lines_read=4, entries_set=2, lines_skipped=2, entries_rejected=0)
    assert list(store) == [(b"a", b"1"), (b"b", b"2")]


def test_repeated_key_keeps_first_position_and_last_value() -> None:
    store = OrderedMap(HeapAllocator())
    load_stream(store, io.BytesIO(b"x = 1\ny = 2\nx = 3\n"), HeapAllocator())
    assert list(store) == [(b"x", b"3"), (b"y", b"2")]


def test_load_stream_merges_into_existing_entries() -> None:
    # Existing keys keep their position and take the file's value.
    store = OrderedMap(HeapAllocator())
    store.set(b"b", b"old")
    store.set(b"keep", b"me")
    load_stream(store, io.BytesIO(b"a = 1\nb = new\n"), HeapAllocator())
    assert list(store) == [(b"b", b"new"), (b"keep", b"me"), (b"a", b"1")]
