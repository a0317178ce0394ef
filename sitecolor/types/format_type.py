# No dependencies
from enum import Enum


class FormatType(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"


CHANNEL_MIN = 0
CHANNEL_MAX = 255
OPACITY_MIN = 0.0
OPACITY_MAX = 1.0

# sRGB -> linear light
SRGB_THRESHOLD = 0.03928
SRGB_LOW_DIVISOR = 12.92
SRGB_OFFSET = 0.055
SRGB_SCALE = 1.055
SRGB_GAMMA = 2.4

LUMINANCE_WEIGHTS = {
    "red": 0.2126,
    "green": 0.7152,
    "blue": 0.0722,
}

CONTRAST_OFFSET = 0.05
