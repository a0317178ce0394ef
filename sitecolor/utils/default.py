from typing import Optional, Tuple, TypeVar

T = TypeVar('T')

def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default

def channels_or_zero(*channels: Optional[int]) -> Tuple[int, ...]:
    """Read unset channels as 0, the way they enter arithmetic."""
    return tuple(value_or_default(channel, 0) for channel in channels)
