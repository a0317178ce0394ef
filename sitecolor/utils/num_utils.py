"""Lenient number coercion for color input.

Color values arrive as ints, floats or fragments of CSS text. These helpers
read them the way browsers read loose numbers: leading garbage is an error,
trailing garbage is ignored, and failure yields ``None`` instead of raising.
"""
import math
import re
from typing import Any, Optional

import numpy as np
from boundednumbers import clamp

from ..types.color_types import Scalar

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")
_HEX_INT_PREFIX = re.compile(r"\s*([+-]?)0[xX]([0-9a-fA-F]*)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)


def parse_int(value: Any) -> Optional[int]:
    """
    Coerce ``value`` to an int, truncating toward zero.

    Args:
        value: int, float or string such as ``"12"``, ``"12px"`` or ``"0x1A"``

    Returns:
        The integer, or None when nothing numeric can be read
        (non-numeric strings, NaN, infinities, other types).
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        hex_match = _HEX_INT_PREFIX.match(value)
        if hex_match:
            sign, digits = hex_match.groups()
            if not digits:
                return None
            number = int(digits, 16)
            return -number if sign == "-" else number
        match = _INT_PREFIX.match(value)
        return int(match.group(1)) if match else None
    return None


def parse_float(value: Any) -> Optional[float]:
    """
    Coerce ``value`` to a float.

    Infinities are kept (callers bound them); NaN and unreadable input
    return None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, np.integer, np.floating)):
        try:
            number = float(value)
        except OverflowError:
            number = math.inf if value > 0 else -math.inf
    elif isinstance(value, str):
        match = _FLOAT_PREFIX.match(value)
        if match is None:
            return None
        number = float(match.group(1).replace("Infinity", "inf"))
    else:
        return None
    return None if math.isnan(number) else number


def bound(value: Scalar, minimum: Scalar, maximum: Scalar) -> Scalar:
    """Clamp ``value`` into ``[minimum, maximum]``."""
    return clamp(value, minimum, maximum)


def bound_percent(value: Any) -> float:
    """
    Read a transformation percentage in ``[0, 1]``.

    Unreadable input becomes NaN so it poisons the channel arithmetic and the
    setters then mark the channels unset.
    """
    number = parse_float(value)
    if number is None:
        return math.nan
    return float(bound(number, 0.0, 1.0))
