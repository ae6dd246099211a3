from __future__ import annotations

import codecs
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Config models map the optional YAML settings file to typed structures.


class LoggingConfig(BaseModel):
    # Selects where store diagnostics go and the minimum level that is emitted.
    model_config = ConfigDict(extra="forbid")
    sink: Literal["none", "stdout", "jsonl"] = "none"
    path: str | None = None
    level: Literal["debug", "info", "warning", "error"] = "warning"

    @model_validator(mode="after")
    def _require_path(self) -> LoggingConfig:
        # For jsonl sink, a path is required to avoid silent defaults.
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when sink is 'jsonl'")
        return self


class StoreConfig(BaseModel):
    # StoreConfig is the top-level typed view of configuration.
    model_config = ConfigDict(extra="forbid")
    chunk_size: int = Field(default=1024, gt=0)
    encoding: str = "utf-8"
    numeric_width: int = Field(default=128, gt=1)
    int_format: str = "%d"
    float_format: str = "%f"
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {value}") from exc
        return value

    @field_validator("int_format")
    @classmethod
    def _int_format_applies(cls, value: str) -> str:
        _check_format(value, 1)
        return value

    @field_validator("float_format")
    @classmethod
    def _float_format_applies(cls, value: str) -> str:
        _check_format(value, 1.5)
        return value


def _check_format(fmt: str, sample: int | float) -> None:
    # A format must take exactly one number; "%d items %s" and plain text are rejected up front.
    try:
        fmt % sample
    except (TypeError, ValueError) as exc:
        raise ValueError(f"format {fmt!r} does not accept a single number") from exc
