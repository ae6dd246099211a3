from __future__ import annotations

import re

# Leading whitespace accepted by the numeric readers: ASCII only.
_SPACE = r"[ \t\n\r\f\v]*"

_INT_PREFIX = re.compile(_SPACE + r"([+-]?\d+)", re.ASCII)
_FLOAT_PREFIX = re.compile(
    _SPACE + r"([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.ASCII | re.IGNORECASE,
)


def parse_int_prefix(text: str) -> int:
    """Read the leading decimal integer of ``text``.

    Leading whitespace and one sign are accepted and anything after the digits
    is ignored. Text without a numeric prefix reads as ``0``.
    """
    match = _INT_PREFIX.match(text)
    if match is None:
        return 0
    return int(match.group(1))


def parse_float_prefix(text: str) -> float:
    """Read the leading decimal floating-point number of ``text`` (``atof`` convention)."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return 0.0
    # float() understands every form the pattern admits, including "1." and ".5".
    return float(match.group(1))


def format_number(value: int | float, fmt: str, width: int) -> str:
    # Printf-style formatting into a reserved width (width counts a terminator, so width-1 chars fit).
    if isinstance(value, bool):
        value = int(value)
    text = fmt % value
    if len(text) >= width:
        raise ValueError(f"formatted number needs {len(text)} characters, width is {width}")
    return text
