from __future__ import annotations
import numpy as np
from numpy import ndarray as NDArray
from ..types.color_types import Channel, RGBLike
from ..types.format_type import (
    CHANNEL_MAX,
    CONTRAST_OFFSET,
    LUMINANCE_WEIGHTS,
    SRGB_GAMMA,
    SRGB_LOW_DIVISOR,
    SRGB_OFFSET,
    SRGB_SCALE,
    SRGB_THRESHOLD,
)
from ..utils.default import channels_or_zero

## sRGB linearization

def linearize_channel(value: float) -> float:
    """
    Convert one sRGB channel to linear light.

    Args:
        value: Channel intensity in [0, 1]

    Returns:
        float: Linear-light intensity in [0, 1]
    """
    if value <= SRGB_THRESHOLD:
        return value / SRGB_LOW_DIVISOR
    return ((value + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA

def np_linearize_channels(channels: NDArray) -> NDArray:
    """
    Vectorized: convert 0-255 channel intensities to linear light.

    Args:
        channels: array-like of channel values in [0, 255]

    Returns:
        array of the same shape with values in [0, 1]
    """
    v = np.asarray(channels, dtype=float) / CHANNEL_MAX
    return np.where(
        v <= SRGB_THRESHOLD,
        v / SRGB_LOW_DIVISOR,
        ((v + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA,
    )

## Luminance and contrast

def relative_luminance(red: Channel, green: Channel, blue: Channel) -> float:
    """
    Relative luminance of an sRGB color given as 0-255 channels.

    Unset (None) channels count as 0.

    Returns:
        float: Luminance in [0, 1]
    """
    r, g, b = (float(v) for v in np_linearize_channels(channels_or_zero(red, green, blue)))
    # summed left to right so white lands on exactly 1.0
    return r * LUMINANCE_WEIGHTS["red"] + g * LUMINANCE_WEIGHTS["green"] + b * LUMINANCE_WEIGHTS["blue"]

def contrast_ratio(rgb1: RGBLike, rgb2: RGBLike) -> float:
    """
    Contrast ratio between two colors, independent of argument order.

    Returns:
        float: Ratio in [1, 21]
    """
    ratio = (relative_luminance(*rgb1) + CONTRAST_OFFSET) / (relative_luminance(*rgb2) + CONTRAST_OFFSET)
    return 1 / ratio if ratio < 1 else ratio
