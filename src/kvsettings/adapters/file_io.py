from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO


@dataclass(frozen=True, slots=True)
class FileByteSource:
    # File-backed ByteSource provider; opening is deferred so construction never touches the filesystem.
    path: Path

    def open(self) -> BinaryIO:
        # Raises OSError (e.g. FileNotFoundError) when the file cannot be read.
        return self.path.open("rb")


@dataclass(frozen=True, slots=True)
class FileByteSink:
    # File-backed ByteSink provider; opening truncates existing content.
    path: Path

    def open(self) -> BinaryIO:
        return self.path.open("wb")
