"""
Sitecolor - CSS Color Value Objects
===================================

A small library for the colors a site theme is built from: parse CSS color
strings, adjust them, check their contrast, and write them back out.

Key Features
------------
- ``#rgb``, ``#rrggbb``, ``rgb()`` and ``rgba()`` parsing
- Lighten, darken and blend with chainable in-place mutation
- sRGB relative luminance and WCAG contrast ratio
- Best-fit CSS output: hex when opaque, ``rgba()`` otherwise
- Never raises on malformed color input

Quick Start
-----------
>>> from sitecolor import Color
>>>
>>> brand = Color.from_string("#336699")
>>> hover = brand.copy().darken(0.25)
>>> str(hover)
'#264c72'
>>> round(brand.compare_contrast_to(Color.from_string("#fff")), 2)
6.0

Modules
-------
- colors: the Color class
- conversions: parsing, formatting and luminance helpers
- utils: lenient number coercion
"""
import logging

from .colors import Color
from .conversions import (
    FormatType,
    detect_format,
    expand_short_hex,
    relative_luminance,
    contrast_ratio,
    linearize_channel,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "Color",
    "FormatType",
    "detect_format",
    "expand_short_hex",
    "relative_luminance",
    "contrast_ratio",
    "linearize_channel",
    "__version__",
]
