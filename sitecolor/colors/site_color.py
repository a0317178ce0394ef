from __future__ import annotations
import logging
from typing import Any, ClassVar
from ..conversions.css_format import to_hex_string, to_rgb_string, to_rgba_string
from ..conversions.css_parse import detect_format, parse_hex, parse_rgb, parse_rgba
from ..conversions.luminance import contrast_ratio, relative_luminance
from ..types.color_types import Channel, ChannelName, Opacity, RGBList
from ..types.format_type import CHANNEL_MAX, CHANNEL_MIN, OPACITY_MAX, OPACITY_MIN
from ..utils.default import channels_or_zero
from ..utils.num_utils import bound, bound_percent, parse_float, parse_int

logger = logging.getLogger(__name__)


class Color:
    """
    Mutable RGB(A) color for CSS styling.

    Every field starts unset (None), which is distinct from 0. Setters,
    parsers and transformations mutate in place and return ``self`` so calls
    chain::

        Color().fill("#fa1").lighten(0.2).to_string()  # '#ffcc14'

    Malformed input never raises: a failed setter leaves its field unset,
    a failed parse leaves the whole color untouched.
    """
    __slots__ = ('_red', '_green', '_blue', '_opacity')

    channel_min: ClassVar[int] = CHANNEL_MIN
    channel_max: ClassVar[int] = CHANNEL_MAX
    opacity_min: ClassVar[float] = OPACITY_MIN
    opacity_max: ClassVar[float] = OPACITY_MAX

    def __init__(self, red: Any = None, green: Any = None, blue: Any = None, opacity: Any = None) -> None:
        self._red: Channel = None
        self._green: Channel = None
        self._blue: Channel = None
        self._opacity: Opacity = None

        if red is not None:
            self.set_red(red)
        if green is not None:
            self.set_green(green)
        if blue is not None:
            self.set_blue(blue)
        if opacity is not None:
            self.set_opacity(opacity)

    @classmethod
    def from_string(cls, text: Any) -> Color:
        """New color filled from ``text``; unset if nothing matches."""
        return cls().fill(text)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def red(self) -> Channel:
        return self._red

    @property
    def green(self) -> Channel:
        return self._green

    @property
    def blue(self) -> Channel:
        return self._blue

    @property
    def opacity(self) -> Opacity:
        return self._opacity

    @property
    def luminance(self) -> float:
        return self.get_luminance()

    # ------------------ SETTERS ------------------
    def _coerce_channel(self, name: ChannelName, value: Any) -> Channel:
        number = parse_int(value)
        if number is None:
            logger.debug("Cannot read %r as a %s channel; leaving it unset", value, name)
            return None
        return int(bound(number, self.channel_min, self.channel_max))

    def set_red(self, red: Any) -> Color:
        self._red = self._coerce_channel("red", red)
        return self

    def set_green(self, green: Any) -> Color:
        self._green = self._coerce_channel("green", green)
        return self

    def set_blue(self, blue: Any) -> Color:
        self._blue = self._coerce_channel("blue", blue)
        return self

    def set_opacity(self, opacity: Any) -> Color:
        number = parse_float(opacity)
        if number is None:
            logger.debug("Cannot read %r as an opacity; leaving it unset", opacity)
            self._opacity = None
        else:
            self._opacity = float(bound(number, self.opacity_min, self.opacity_max))
        return self

    def _set_channels(self, red: Any, green: Any, blue: Any) -> Color:
        return self.set_red(red).set_green(green).set_blue(blue)

    # ------------------ PARSERS ------------------
    def fill_hex(self, hex_string: Any) -> Color:
        """Fill from ``#rgb`` or ``#rrggbb``; opacity becomes 1."""
        channels = parse_hex(hex_string)
        if channels is None:
            logger.debug("Ignoring %r: not a #rgb or #rrggbb color", hex_string)
            return self
        return self._set_channels(*channels).set_opacity(1)

    def fill_rgb(self, rgb_string: Any) -> Color:
        """Fill from ``rgb(r, g, b)``; opacity becomes 1."""
        channels = parse_rgb(rgb_string)
        if channels is None:
            logger.debug("Ignoring %r: not an rgb() color", rgb_string)
            return self
        return self._set_channels(*channels).set_opacity(1)

    def fill_rgba(self, rgba_string: Any) -> Color:
        """Fill from ``rgba(r, g, b, a)``."""
        values = parse_rgba(rgba_string)
        if values is None:
            logger.debug("Ignoring %r: not an rgba() color", rgba_string)
            return self
        red, green, blue, opacity = values
        return self._set_channels(red, green, blue).set_opacity(opacity)

    def fill(self, color_string: Any) -> Color:
        """Fill from whichever of hex, rgb() or rgba() matches, in that order."""
        format_type = detect_format(color_string)
        if format_type is None:
            logger.debug("Ignoring %r: no supported color notation", color_string)
            return self
        return getattr(self, f"fill_{format_type.value}")(color_string)

    # ------------------ TRANSFORMATIONS ------------------
    def _scale(self, factor: float) -> Color:
        red, green, blue = channels_or_zero(self._red, self._green, self._blue)
        return self._set_channels(red * factor, green * factor, blue * factor)

    def darken(self, percent: Any) -> Color:
        """
        Scale every channel by ``1 - percent`` (percent bounded to [0, 1]).

        Results truncate toward zero, so ``darken(p).lighten(p)`` does not
        in general restore the original color.
        """
        return self._scale(1 - bound_percent(percent))

    def lighten(self, percent: Any) -> Color:
        """Scale every channel by ``1 + percent``; channels cap at 255."""
        return self._scale(1 + bound_percent(percent))

    def blend_with(self, color: Color, percent: Any) -> Color:
        """
        Move each channel ``percent`` of the way toward ``color``.

        Opacity is left as it is.
        """
        percent = bound_percent(percent)
        mine = channels_or_zero(*self.to_rgb_array())
        theirs = channels_or_zero(*color.to_rgb_array())
        red, green, blue = ((t - m) * percent + m for m, t in zip(mine, theirs))
        return self._set_channels(red, green, blue)

    # ------------------ COLOR SCIENCE ------------------
    def get_luminance(self) -> float:
        """Relative luminance in [0, 1]; unset channels count as 0."""
        return relative_luminance(self._red, self._green, self._blue)

    def compare_contrast_to(self, color: Color) -> float:
        """Contrast ratio against ``color`` in [1, 21], symmetric."""
        return contrast_ratio(self.to_rgb_array(), color.to_rgb_array())

    # ------------------ SERIALIZATION ------------------
    def to_rgb_array(self) -> RGBList:
        return [self._red, self._green, self._blue]

    def to_rgb(self) -> str:
        return to_rgb_string(self._red, self._green, self._blue)

    def to_rgba(self) -> str:
        return to_rgba_string(self._red, self._green, self._blue, self._opacity)

    def to_hex(self) -> str:
        return to_hex_string(self._red, self._green, self._blue)

    def to_string(self) -> str:
        """``#rrggbb`` when fully opaque, ``rgba(...)`` otherwise."""
        return self.to_hex() if self._opacity == 1 else self.to_rgba()

    # ------------------ PYTHON PROTOCOL ------------------
    def copy(self) -> Color:
        clone = self.__class__()
        clone._red, clone._green, clone._blue, clone._opacity = (
            self._red, self._green, self._blue, self._opacity
        )
        return clone

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(red={self._red!r}, green={self._green!r}, "
            f"blue={self._blue!r}, opacity={self._opacity!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            (self._red, self._green, self._blue, self._opacity)
            == (other._red, other._green, other._blue, other._opacity)
        )
