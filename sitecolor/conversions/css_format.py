from __future__ import annotations
from decimal import Decimal
from typing import Optional
from ..types.color_types import Channel, Opacity, Scalar
from ..utils.default import channels_or_zero


def format_number(value: Optional[Scalar]) -> str:
    """
    Render a CSS number the way browsers print it.

    None renders empty and integral floats lose their ``.0``. Exponent form is
    used only below 1e-6 or from 1e21 up, written as ``1e-7`` / ``1e+21``.
    """
    if value is None:
        return ""
    if not isinstance(value, float):
        return str(value)
    if value == 0:
        return "0"
    text = repr(value)
    mantissa, _, exponent = text.partition("e")
    if exponent:
        power = int(exponent)
        if -7 < power < 21:
            return format(Decimal(text), "f")
        return f"{mantissa}e{power:+d}"
    return text[:-2] if text.endswith(".0") else text


def to_hex_string(red: Channel, green: Channel, blue: Channel) -> str:
    """
    Pack channels as ``#rrggbb``.

    The 1 << 24 term forces seven hex digits; dropping the first one leaves
    a zero-padded six. Unset channels pack as 0.
    """
    r, g, b = channels_or_zero(red, green, blue)
    return "#" + format((1 << 24) + (r << 16) + (g << 8) + b, "x")[1:]


def to_rgb_string(red: Channel, green: Channel, blue: Channel) -> str:
    return "rgb(" + ", ".join(format_number(v) for v in (red, green, blue)) + ")"


def to_rgba_string(red: Channel, green: Channel, blue: Channel, opacity: Opacity) -> str:
    return "rgba(" + ", ".join(format_number(v) for v in (red, green, blue, opacity)) + ")"
