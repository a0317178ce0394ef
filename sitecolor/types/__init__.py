from .format_type import FormatType
from .color_types import Channel, Opacity, RGBList, RGBLike, ChannelName

__all__ = ["FormatType", "Channel", "Opacity", "RGBList", "RGBLike", "ChannelName"]
