"""
Sitecolor Conversions
=====================

Pure helpers behind :class:`sitecolor.Color`: reading CSS color notations,
writing them back, and the sRGB luminance math used for contrast checks.

Parsing
-------
detect_format(text)
    First notation (hex, rgb, rgba) that matches the whole string, or None
parse_hex(text) / parse_rgb(text) / parse_rgba(text)
    Captured channel values, or None on mismatch
expand_short_hex(digits)
    ``"03F"`` -> ``"0033FF"``

Formatting
----------
to_hex_string(r, g, b)
    ``#rrggbb``
to_rgb_string(r, g, b) / to_rgba_string(r, g, b, a)
    ``rgb(r, g, b)`` / ``rgba(r, g, b, a)``

Luminance
---------
linearize_channel(v) / np_linearize_channels(channels)
    sRGB -> linear light, scalar and vectorized
relative_luminance(r, g, b)
    Weighted linear-light sum in [0, 1]
contrast_ratio(rgb1, rgb2)
    Symmetric ratio in [1, 21]

Notes
-----
- Parsers never raise; a mismatch is reported as None.
- Unset (None) channels count as 0 in luminance and hex packing.
"""

from .css_parse import (
    detect_format,
    match_format,
    expand_short_hex,
    parse_hex,
    parse_rgb,
    parse_rgba,
)
from .css_format import format_number, to_hex_string, to_rgb_string, to_rgba_string
from .luminance import (
    linearize_channel,
    np_linearize_channels,
    relative_luminance,
    contrast_ratio,
)
from ..types.format_type import FormatType

__all__ = [
    "FormatType",
    "detect_format",
    "match_format",
    "expand_short_hex",
    "parse_hex",
    "parse_rgb",
    "parse_rgba",
    "format_number",
    "to_hex_string",
    "to_rgb_string",
    "to_rgba_string",
    "linearize_channel",
    "np_linearize_channels",
    "relative_luminance",
    "contrast_ratio",
]
