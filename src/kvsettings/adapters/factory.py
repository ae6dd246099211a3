from __future__ import annotations

from pathlib import Path

from kvsettings.adapters.log_sinks import JsonlLogSink, NullLogSink, StdoutLogSink
from kvsettings.config.models import LoggingConfig
from kvsettings.observability.logging import StoreLogger
from kvsettings.ports.log_sink import LogSink


def build_log_sink(config: LoggingConfig) -> LogSink:
    # Factory for the configured diagnostics sink.
    if config.sink == "stdout":
        return StdoutLogSink()
    if config.sink == "jsonl":
        assert config.path is not None
        return JsonlLogSink(Path(config.path))
    return NullLogSink()


def build_logger(config: LoggingConfig, sink: LogSink | None = None) -> StoreLogger:
    # An explicit sink wins over the configured one; the configured level still applies.
    return StoreLogger(sink if sink is not None else build_log_sink(config), min_level=config.level)
