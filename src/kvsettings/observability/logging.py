from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kvsettings.ports.log_sink import LogSink

LEVELS: dict[str, int] = {"debug": 10, "info": 20, "warning": 30, "error": 40}


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass(frozen=True, slots=True)
class LogMessage:
    level: str
    message: str
    timestamp: datetime = field(default_factory=_utc_now)
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.level not in LEVELS:
            raise ValueError(f"log level must be one of {sorted(LEVELS)}, got {self.level!r}")
        if not self.message:
            raise ValueError("log message text is empty")


class StoreLogger:
    # Messages under min_level never reach the sink.
    def __init__(self, sink: LogSink, *, min_level: str = "warning") -> None:
        if min_level not in LEVELS:
            raise ValueError(f"log level must be one of {sorted(LEVELS)}, got {min_level!r}")
        self._sink = sink
        self._threshold = LEVELS[min_level]

    @property
    def sink(self) -> LogSink:
        return self._sink

    def enabled_for(self, level: str) -> bool:
        return LEVELS[level] >= self._threshold

    def log(self, level: str, message: str, **fields: object) -> None:
        if not self.enabled_for(level):
            return
        self._sink.emit(LogMessage(level=level, message=message, fields=fields))

    def debug(self, message: str, **fields: object) -> None:
        self.log("debug", message, **fields)

    def info(self, message: str, **fields: object) -> None:
        self.log("info", message, **fields)

    def warning(self, message: str, **fields: object) -> None:
        self.log("warning", message, **fields)

    def error(self, message: str, **fields: object) -> None:
        self.log("error", message, **fields)
