from __future__ import annotations

from os import PathLike
from pathlib import Path

from kvsettings.adapters.allocator import HeapAllocator
from kvsettings.adapters.factory import build_logger
from kvsettings.adapters.file_io import FileByteSink, FileByteSource
from kvsettings.config.models import StoreConfig
from kvsettings.domain.errors import StoreClosedError
from kvsettings.domain.numeric import format_number, parse_float_prefix, parse_int_prefix
from kvsettings.ports.allocator import AllocationError, Allocator
from kvsettings.ports.byte_stream import ByteSink, ByteSource
from kvsettings.ports.log_sink import LogSink
from kvsettings.store.ordered_map import OrderedMap
from kvsettings.store.parser import load_stream
from kvsettings.store.serializer import save_stream

Key = str | bytes
PathArg = str | PathLike[str]


class Settings:
    """Ordered key/value settings with typed accessors and a ``key = value`` file format.

    Every operation reports failure through its return value: ``False`` for
    setters, ``load``, ``save`` and ``remove``, the caller's default for getters
    of absent keys. ``None`` arguments count as invalid and never mutate the
    store. The only exception raised on purpose is ``StoreClosedError`` when the
    store is used after ``destroy()``.

    Keys and values are held as bytes. ``str`` arguments are encoded with the
    configured encoding and text results are decoded with ``surrogateescape``
    so bytes that are not valid in that encoding survive a load/save cycle.
    """

    def __init__(
        self,
        *,
        config: StoreConfig | None = None,
        allocator: Allocator | None = None,
        log_sink: LogSink | None = None,
    ) -> None:
        self._config = config if config is not None else StoreConfig()
        self._allocator: Allocator = allocator if allocator is not None else HeapAllocator()
        self._owns_sink = log_sink is None
        self._log = build_logger(self._config.logging, log_sink)
        self._map: OrderedMap | None = OrderedMap(self._allocator)

    @classmethod
    def create(
        cls,
        *,
        config: StoreConfig | None = None,
        allocator: Allocator | None = None,
        log_sink: LogSink | None = None,
    ) -> Settings | None:
        # None when memory runs out or the configured log sink cannot be opened.
        try:
            return cls(config=config, allocator=allocator, log_sink=log_sink)
        except (MemoryError, OSError):
            return None

    @property
    def config(self) -> StoreConfig:
        return self._config

    @property
    def allocator(self) -> Allocator:
        return self._allocator

    @property
    def closed(self) -> bool:
        return self._map is None

    def destroy(self) -> None:
        store = self._require_open()
        store.destroy()
        self._map = None
        if self._owns_sink:
            close = getattr(self._log.sink, "close", None)
            if callable(close):
                close()

    # -- persistence -------------------------------------------------------

    def load(self, path: PathArg | None) -> bool:
        # Merge a settings file into the store; an unreadable file merges nothing.
        self._require_open()
        if path is None:
            return False
        source = FileByteSource(Path(path))
        try:
            handle = source.open()
        except (OSError, ValueError) as exc:
            self._log.warning("settings file could not be opened", path=str(source.path), error=str(exc))
            return False
        with handle:
            return self.load_from(handle, origin=str(source.path))

    def load_from(self, stream: ByteSource | None, *, origin: str = "<stream>") -> bool:
        store = self._require_open()
        if stream is None:
            return False
        try:
            report = load_stream(store, stream, self._allocator, chunk_size=self._config.chunk_size)
        except AllocationError as exc:
            self._log.error("out of memory while reading settings", origin=origin, error=str(exc))
            return False
        except OSError as exc:
            self._log.warning("settings stream could not be read", origin=origin, error=str(exc))
            return False
        if report.lines_skipped:
            self._log.debug("lines without '=' skipped", origin=origin, skipped=report.lines_skipped)
        if report.entries_rejected:
            self._log.warning("entries could not be stored", origin=origin, rejected=report.entries_rejected)
        self._log.info(
            "settings loaded",
            origin=origin,
            lines=report.lines_read,
            entries=report.entries_set,
        )
        return True

    def save(self, path: PathArg | None) -> bool:
        # Truncates the destination; a failed save may leave it empty.
        self._require_open()
        if path is None:
            return False
        sink = FileByteSink(Path(path))
        try:
            handle = sink.open()
        except (OSError, ValueError) as exc:
            self._log.warning("settings file could not be opened for writing", path=str(sink.path), error=str(exc))
            return False
        with handle:
            return self.save_to(handle, origin=str(sink.path))

    def save_to(self, stream: ByteSink | None, *, origin: str = "<stream>") -> bool:
        store = self._require_open()
        if stream is None:
            return False
        try:
            written = save_stream(store, stream)
        except OSError as exc:
            self._log.warning("settings could not be written", origin=origin, error=str(exc))
            return False
        self._log.info("settings saved", origin=origin, entries=written)
        return True

    # -- typed accessors ---------------------------------------------------

    def get_string(self, key: Key | None, default: str | None = None) -> str | None:
        raw = self._lookup(key)
        if raw is None:
            return default
        return self._decode(raw)

    def get_int(self, key: Key | None, default: int = 0) -> int:
        # A present but non-numeric value reads as 0, not as default.
        raw = self._lookup(key)
        if raw is None:
            return default
        return parse_int_prefix(self._decode(raw))

    def get_float(self, key: Key | None, default: float = 0.0) -> float:
        raw = self._lookup(key)
        if raw is None:
            return default
        return parse_float_prefix(self._decode(raw))

    def set_string(self, key: Key | None, value: Key | None) -> bool:
        store = self._require_open()
        raw_key = self._encode(key)
        raw_value = self._encode(value)
        if raw_key is None or raw_value is None:
            return False
        if not store.set(raw_key, raw_value):
            self._log.error("out of memory while storing setting", key=self._decode(raw_key))
            return False
        return True

    def set_int(self, key: Key | None, value: int | None) -> bool:
        return self._set_number(key, value, self._config.int_format)

    def set_float(self, key: Key | None, value: float | None) -> bool:
        return self._set_number(key, value, self._config.float_format)

    def remove(self, key: Key | None) -> bool:
        store = self._require_open()
        raw_key = self._encode(key)
        if raw_key is None:
            return False
        return store.remove(raw_key)

    # -- inspection --------------------------------------------------------

    def keys(self) -> list[str]:
        return [self._decode(key) for key, _ in self._require_open()]

    def items(self) -> list[tuple[str, str]]:
        return [(self._decode(key), self._decode(value)) for key, value in self._require_open()]

    def __len__(self) -> int:
        return len(self._require_open())

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (str, bytes)):
            return False
        return self._lookup(key) is not None

    def __repr__(self) -> str:
        if self._map is None:
            return "Settings(<destroyed>)"
        return f"Settings({len(self._map)} entries)"

    # -- internals ---------------------------------------------------------

    def _set_number(self, key: Key | None, value: int | float | None, fmt: str) -> bool:
        self._require_open()
        if value is None:
            return False
        try:
            text = format_number(value, fmt, self._config.numeric_width)
        except (TypeError, ValueError) as exc:
            self._log.warning("number could not be formatted", format=fmt, error=str(exc))
            return False
        return self.set_string(key, text)

    def _lookup(self, key: Key | None) -> bytes | None:
        store = self._require_open()
        raw_key = self._encode(key)
        if raw_key is None:
            return None
        return store.get(raw_key)

    def _encode(self, text: Key | None) -> bytes | None:
        if text is None:
            return None
        if isinstance(text, bytes):
            return text
        try:
            return text.encode(self._config.encoding, "surrogateescape")
        except UnicodeEncodeError as exc:
            self._log.warning("text cannot be encoded", encoding=self._config.encoding, error=str(exc))
            return None

    def _decode(self, raw: bytes) -> str:
        return raw.decode(self._config.encoding, "surrogateescape")

    def _require_open(self) -> OrderedMap:
        if self._map is None:
            raise StoreClosedError()
        return self._map
