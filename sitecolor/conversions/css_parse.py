"""Recognizers for the CSS color notations a Color can be filled from."""
from __future__ import annotations
import re
from typing import Any, Optional, Tuple
from ..types.format_type import FormatType

HEX_PATTERN = re.compile(r"#([0-9a-f]{3}|[0-9a-f]{6})", re.IGNORECASE)
SHORT_HEX_PATTERN = re.compile(r"#?([0-9a-f])([0-9a-f])([0-9a-f])", re.IGNORECASE)
RGB_PATTERN = re.compile(
    r"rgb\(\s*([0-9]{1,3})\s*,\s*([0-9]{1,3})\s*,\s*([0-9]{1,3})\s*\)",
    re.IGNORECASE,
)
# The alpha token is loose on purpose: ".", ".." and "..." match too.
RGBA_PATTERN = re.compile(
    r"rgba\(\s*([0-9]{1,3})\s*,\s*([0-9]{1,3})\s*,\s*([0-9]{1,3})\s*,\s*([0-9.]{1,3})\s*\)",
    re.IGNORECASE,
)

# Insertion order is dispatch priority.
format_patterns = {
    FormatType.HEX: HEX_PATTERN,
    FormatType.RGB: RGB_PATTERN,
    FormatType.RGBA: RGBA_PATTERN,
}


def match_format(text: Any, format_type: FormatType) -> Optional[re.Match]:
    """Match the whole of ``text`` against one notation; non-strings never match."""
    if not isinstance(text, str):
        return None
    return format_patterns[format_type].fullmatch(text)


def detect_format(text: Any) -> Optional[FormatType]:
    """Return the first notation ``text`` is written in, or None."""
    for format_type in format_patterns:
        if match_format(text, format_type):
            return format_type
    return None


def expand_short_hex(digits: str) -> str:
    """
    Expand shorthand hex digits, e.g. ``"03F"`` -> ``"0033FF"``.

    A leading ``#`` is accepted and dropped. Anything that is not three hex
    digits is returned unchanged.
    """
    match = SHORT_HEX_PATTERN.fullmatch(digits)
    if match is None:
        return digits
    return "".join(d * 2 for d in match.groups())


def parse_hex(text: Any) -> Optional[Tuple[int, int, int]]:
    """``#rgb`` / ``#rrggbb`` -> (r, g, b) ints, or None."""
    match = match_format(text, FormatType.HEX)
    if match is None:
        return None
    digits = expand_short_hex(match.group(1))
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def parse_rgb(text: Any) -> Optional[Tuple[str, str, str]]:
    """``rgb(r, g, b)`` -> the three captured decimal strings, or None."""
    match = match_format(text, FormatType.RGB)
    return match.groups() if match else None  # type: ignore[return-value]


def parse_rgba(text: Any) -> Optional[Tuple[str, str, str, str]]:
    """``rgba(r, g, b, a)`` -> the four captured strings, or None."""
    match = match_format(text, FormatType.RGBA)
    return match.groups() if match else None  # type: ignore[return-value]
