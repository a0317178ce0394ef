"""
Sitecolor Color Class
=====================

This module provides :class:`Color`, a mutable RGB(A) value object for CSS
styling.

Features
--------
- Channels (0-255) and opacity (0-1) start unset (None), distinct from 0
- Lenient setters: ``"12px"`` reads as 12, ``"abc"`` leaves the field unset
- Parsing from ``#rgb``, ``#rrggbb``, ``rgb()`` and ``rgba()``
- Chainable transformations: darken, lighten, blend_with
- Relative luminance and WCAG contrast ratio
- Serialization to hex, ``rgb()``, ``rgba()`` and a best-fit string

Usage
-----
>>> from sitecolor.colors import Color
>>>
>>> accent = Color().fill("#fa1")
>>> accent.to_rgb_array()  # [255, 170, 17]
>>> str(accent.lighten(0.2))  # '#ffcc14'
>>>
>>> white, black = Color.from_string("#fff"), Color.from_string("#000")
>>> white.compare_contrast_to(black)  # 21.0
>>>
>>> Color().fill("rgb(255, 0, 170)").set_opacity(0.6).to_string()
'rgba(255, 0, 170, 0.6)'

Notes
-----
- Malformed input never raises; parsers leave the color as it was
- Every mutating method returns the same instance
- Integer truncation makes darken/lighten lossy
"""

from .site_color import Color

__all__ = ['Color']
