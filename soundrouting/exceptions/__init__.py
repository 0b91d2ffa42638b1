"""Exception hierarchy for Sound Routing."""
from soundrouting.exceptions.base import RoutingError
from soundrouting.exceptions.config import (
    ConfigValidationError,
    DuplicateDeviceError,
    YAMLConfigError,
    XMLConfigError,
)
from soundrouting.exceptions.routing import (
    ChannelClashError,
    DuplicateRouteError,
    ChannelCountError,
    ChannelOutOfRangeError,
)

__all__ = [
    "RoutingError",
    "ConfigValidationError",
    "DuplicateDeviceError",
    "YAMLConfigError",
    "XMLConfigError",
    "ChannelClashError",
    "DuplicateRouteError",
    "ChannelCountError",
    "ChannelOutOfRangeError",
]
