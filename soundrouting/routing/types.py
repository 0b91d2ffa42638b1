"""Type aliases for Sound Routing."""
from typing import Any, Protocol, TypedDict


class RouteRecord(TypedDict, total=False):
    """TypedDict for a persisted route record."""
    type: str
    index: int
    channel: int
    channel_count: int


class RecordNode(Protocol):
    """Anything route records can be read from: ElementTree elements and mappings alike."""

    def get(self, key: str, default: Any = None) -> Any:
        ...
