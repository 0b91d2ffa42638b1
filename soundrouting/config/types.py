"""Type aliases for routing configuration data."""
from typing import Any, TypeAlias, TypedDict

from soundrouting.routing.types import RouteRecord


class DeviceDict(TypedDict, total=False):
    """TypedDict for sound device configuration dictionaries."""
    name: str
    output_channels: int
    input_channels: int
    outputs: list[RouteRecord]
    inputs: list[RouteRecord]


DeviceData: TypeAlias = DeviceDict | dict[str, Any]
