from .default import value_or_default, channels_or_zero
from .num_utils import parse_int, parse_float, bound, bound_percent

__all__ = [
    "value_or_default",
    "channels_or_zero",
    "parse_int",
    "parse_float",
    "bound",
    "bound_percent",
]
