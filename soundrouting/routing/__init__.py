"""Routing model for Sound Routing: channel groups, route types and routes."""

# Re-export enums
from soundrouting.routing.enums import (
    BusPosition,
    Direction,
    RouteType,
    display_name,
    localized_name,
)

# Re-export models
from soundrouting.routing.channels import ChannelGroup
from soundrouting.routing.routes import (
    ROUTE_CLASSES,
    AudioInput,
    AudioOutput,
    AudioRoute,
    channels_clash,
    route_from_element,
)

# Re-export types
from soundrouting.routing.types import RecordNode, RouteRecord

__all__ = [
    # Enums
    "BusPosition",
    "Direction",
    "RouteType",
    "display_name",
    "localized_name",
    # Models
    "ChannelGroup",
    "AudioRoute",
    "AudioOutput",
    "AudioInput",
    "ROUTE_CLASSES",
    "channels_clash",
    "route_from_element",
    # Types
    "RecordNode",
    "RouteRecord",
]
