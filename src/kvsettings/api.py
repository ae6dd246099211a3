"""Handle-style functions over :class:`~kvsettings.settings.Settings`.

Each function takes the store as its first argument and tolerates ``None``
there, answering with the same failure result the method would give for an
invalid argument: ``False`` for operations, the default for getters.
"""

from __future__ import annotations

from kvsettings.config.models import StoreConfig
from kvsettings.ports.allocator import Allocator
from kvsettings.ports.log_sink import LogSink
from kvsettings.settings import Key, PathArg, Settings


def create(
    *,
    config: StoreConfig | None = None,
    allocator: Allocator | None = None,
    log_sink: LogSink | None = None,
) -> Settings | None:
    return Settings.create(config=config, allocator=allocator, log_sink=log_sink)


def destroy(store: Settings | None) -> None:
    if store is not None:
        store.destroy()


def load(store: Settings | None, path: PathArg | None) -> bool:
    if store is None:
        return False
    return store.load(path)


def save(store: Settings | None, path: PathArg | None) -> bool:
    if store is None:
        return False
    return store.save(path)


def get_string(store: Settings | None, key: Key | None, default: str | None = None) -> str | None:
    if store is None:
        return default
    return store.get_string(key, default)


def get_int(store: Settings | None, key: Key | None, default: int = 0) -> int:
    if store is None:
        return default
    return store.get_int(key, default)


def get_float(store: Settings | None, key: Key | None, default: float = 0.0) -> float:
    if store is None:
        return default
    return store.get_float(key, default)


def set_string(store: Settings | None, key: Key | None, value: Key | None) -> bool:
    if store is None:
        return False
    return store.set_string(key, value)


def set_int(store: Settings | None, key: Key | None, value: int | None) -> bool:
    if store is None:
        return False
    return store.set_int(key, value)


def set_float(store: Settings | None, key: Key | None, value: float | None) -> bool:
    if store is None:
        return False
    return store.set_float(key, value)


def remove(store: Settings | None, key: Key | None) -> bool:
    if store is None:
        return False
    return store.remove(key)
