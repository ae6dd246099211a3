from .errors import StoreClosedError
from .numeric import format_number, parse_float_prefix, parse_int_prefix

# Public domain exports keep imports explicit across layers.
__all__ = [
    "StoreClosedError",
    "format_number",
    "parse_float_prefix",
    "parse_int_prefix",
]
