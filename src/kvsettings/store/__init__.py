from .buffer import OwnedText
from .entry import Entry
from .line_reader import DEFAULT_CHUNK_SIZE, LineReader
from .ordered_map import OrderedMap
from .parser import LoadReport, load_stream, parse_line
from .serializer import format_entry, save_stream

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "Entry",
    "LineReader",
    "LoadReport",
    "OrderedMap",
    "OwnedText",
    "format_entry",
    "load_stream",
    "parse_line",
    "save_stream",
]
