from __future__ import annotations
from typing import List, Literal, Optional, Sequence

Scalar = int | float
Channel = Optional[int]
Opacity = Optional[float]
RGBList = List[Channel]
RGBLike = Sequence[Channel]
ChannelName = Literal["red", "green", "blue"]
