from __future__ import annotations

from typing import Protocol, runtime_checkable

from kvsettings.observability.logging import LogMessage


# LogSink receives structured store diagnostics (load/save failures, skipped lines).
@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        """Consume one LogMessage."""
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")
