from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Log sinks receive structured store diagnostics.
from kvsettings.adapters.log_sinks import JsonlLogSink, MemoryLogSink, NullLogSink, StdoutLogSink
from kvsettings.observability.logging import LogMessage


def test_stdout_log_sink_prints_compact_json(capsys: pytest.CaptureFixture[str]) -> None:
    # One compact JSON object per message.
    StdoutLogSink().emit(LogMessage(level="warning", message="file missing", fields={"path": "a.cfg"}))
    out = capsys.readouterr().out.strip()
    payload = json.loads(out)
    assert payload["level"] == "warning"
    assert payload["message"] == "file missing"
    assert payload["fields"] == {"path": "a.cfg"}
    assert payload["timestamp"].endswith("Z")


def test_jsonl_log_sink_appends_lines(tmp_path: Path) -> None:
    # Each emit appends a line; parent directories are created.
    path = tmp_path / "logs" / "store.jsonl"
    sink = JsonlLogSink(path)
    sink.emit(LogMessage(level="info", message="one"))
    sink.emit(LogMessage(level="info", message="two"))
    sink.close()
    sink.close()
    lines = path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["message"] for line in lines] == ["one", "two"]


def test_memory_log_sink_keeps_order_and_filters_by_level() -> None:
    sink = MemoryLogSink()
    sink.emit(LogMessage(level="debug", message="a"))
    sink.emit(LogMessage(level="warning", message="b"))
    assert [m.message for m in sink.messages] == ["a", "b"]
    assert [m.message for m in sink.by_level("warning")] == ["b"]


def test_null_log_sink_discards() -> None:
    assert NullLogSink().emit(LogMessage(level="error", message="x")) is None


def test_jsonl_log_sink_writes_timestamps_in_utc(tmp_path: Path) -> None:
    # A message stamped in another zone is still written with a Z suffix in UTC.
    path = tmp_path / "store.jsonl"
    stamp = datetime(2024, 5, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
    sink = JsonlLogSink(path)
    sink.emit(LogMessage(level="info", message="loaded", timestamp=stamp))
    sink.close()
    assert sink.path == path
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["timestamp"] == "2024-05-01T10:00:00.000000Z"
