from __future__ import annotations

import json
from datetime import UTC
from pathlib import Path

from kvsettings.observability.logging import LogMessage
from kvsettings.ports.log_sink import LogSink


class NullLogSink(LogSink):
    def emit(self, message: LogMessage) -> None:
        return None


class StdoutLogSink(LogSink):
    # One JSON object per line.
    def emit(self, message: LogMessage) -> None:
        print(_json_line(message))


class JsonlLogSink(LogSink):
    """Appends store diagnostics to a JSON-lines file.

    The parent directory is created on construction; an unusable path raises
    ``OSError`` there rather than on the first message.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        path.parent.mkdir(parents=True, exist_ok=True)
        self._file = path.open("a", encoding="utf-8")

    @property
    def path(self) -> Path:
        return self._path

    def emit(self, message: LogMessage) -> None:
        self._file.write(_json_line(message) + "\n")
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()


class MemoryLogSink(LogSink):
    # Collects messages for hosts that forward them elsewhere, and for tests.
    def __init__(self) -> None:
        self.messages: list[LogMessage] = []

    def emit(self, message: LogMessage) -> None:
        self.messages.append(message)

    def by_level(self, level: str) -> list[LogMessage]:
        return [m for m in self.messages if m.level == level]


def _json_line(message: LogMessage) -> str:
    record = {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%S.%fZ"),
        "fields": message.fields,
    }
    return json.dumps(record, separators=(",", ":"), ensure_ascii=False, default=str)
