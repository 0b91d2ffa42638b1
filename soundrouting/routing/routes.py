"""Audio routes: logical roles bound to hardware channels of a sound device."""

import xml.etree.ElementTree as ET
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from soundrouting import constants
from soundrouting.constants import MAX_CHANNEL
from soundrouting.routing.channels import ChannelGroup
from soundrouting.routing.enums import Direction, RouteType, localized_name
from soundrouting.routing.types import RecordNode, RouteRecord


class AudioRoute(BaseModel):
    """A route type and instance index bound to a group of hardware channels.

    Concrete routes are :class:`AudioOutput` and :class:`AudioInput`; the
    direction is fixed by the class. A route type the direction does not
    support turns into ``RouteType.INVALID`` instead of failing validation,
    and the index of a non-indexable type is always 0.

    Route identity is the direction, type and index. Two routes that differ
    only in their channels compare and hash equal.
    """

    model_config = ConfigDict(frozen=True)

    direction: ClassVar[Direction]

    route_type: RouteType = RouteType.INVALID
    index: int = Field(0, ge=0, le=MAX_CHANNEL, description="Instance index for indexable types")
    channels: ChannelGroup = Field(default_factory=ChannelGroup)

    @classmethod
    def supported_types(cls) -> list[RouteType]:
        """Return the route types this direction can carry, in display order."""
        raise NotImplementedError

    @model_validator(mode="before")
    @classmethod
    def collect_channels(cls, data: Any) -> Any:
        """Build the channel group from flat ``channel_base``/``channel_count`` keys."""
        if isinstance(data, dict) and ("channel_base" in data or "channel_count" in data):
            data = dict(data)
            data["channels"] = {
                "base": data.pop("channel_base", 0),
                "count": data.pop("channel_count", 0),
            }
        return data

    @field_validator("route_type", mode="before")
    @classmethod
    def restrict_route_type(cls, value: Any) -> RouteType:
        if isinstance(value, RouteType):
            route_type = value
        elif isinstance(value, str):
            route_type = RouteType.parse(value)
        else:
            route_type = RouteType.from_ordinal(value)
        if route_type not in cls.supported_types():
            return RouteType.INVALID
        return route_type

    @field_validator("index", mode="before")
    @classmethod
    def reset_unindexed(cls, value: Any, info: ValidationInfo) -> Any:
        # Runs ahead of the 0-255 bound; non-indexable types accept any index
        route_type = info.data.get("route_type", RouteType.INVALID)
        return value if route_type.is_indexable() else 0

    @property
    def is_valid(self) -> bool:
        """False for routes that must not be wired into the engine."""
        return self.route_type is not RouteType.INVALID

    @property
    def description(self) -> str:
        """Human-readable description, e.g. ``Deck 2``."""
        return localized_name(self.route_type, self.index)

    def channels_clash(self, other: "AudioRoute") -> bool:
        """Return True if this route and ``other`` share any hardware channel."""
        return self.channels.clashes_with(other.channels)

    def to_dict(self) -> RouteRecord:
        """Return the persisted fields of this route as a plain mapping."""
        return {
            "type": self.route_type.display_name(),
            "index": self.index,
            "channel": self.channels.base,
            "channel_count": self.channels.count,
        }

    def to_record(self, element: ET.Element | None = None) -> ET.Element:
        """Write this route into ``element`` (a new one when None) and return it.

        The element's tag is replaced by the route direction; its other
        attributes are left alone.
        """
        if element is None:
            element = ET.Element(self.direction.value)
        else:
            element.tag = self.direction.value
        for key, value in self.to_dict().items():
            element.set(key, str(value))
        return element

    @classmethod
    def from_record(cls, record: RecordNode) -> Self:
        """Build a route from a persisted record.

        Missing or unreadable numbers read as 0. Records written before the
        channel count was persisted have a count of 0; those are given one
        channel for microphones and two for everything else.
        """
        route_type = RouteType.parse(record.get("type", ""))
        index = _read_u8(record, "index")
        channel = _read_u8(record, "channel")
        channel_count = _read_u8(record, "channel_count")
        if channel_count == 0:
            channel_count = 1 if route_type is RouteType.MICROPHONE else 2
        return cls(
            route_type=route_type,
            index=index,
            channel_base=channel,
            channel_count=channel_count,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AudioRoute):
            return NotImplemented
        return (
            self.direction is other.direction
            and self.route_type is other.route_type
            and self.index == other.index
        )

    def __hash__(self) -> int:
        return (int(self.route_type) << 8) | self.index

    def __str__(self) -> str:
        return self.description


class AudioOutput(AudioRoute):
    """A route carrying audio from the engine to a sound device."""

    direction: ClassVar[Direction] = Direction.OUTPUT

    @classmethod
    def supported_types(cls) -> list[RouteType]:
        return [
            RouteType.MASTER,
            RouteType.HEADPHONES,
            RouteType.BUS,
            RouteType.DECK,
        ]


class AudioInput(AudioRoute):
    """A route carrying audio from a sound device into the engine."""

    direction: ClassVar[Direction] = Direction.INPUT

    @classmethod
    def supported_types(cls, vinyl_control: bool | None = None) -> list[RouteType]:
        """Return the supported input types.

        Args:
            vinyl_control: Include VINYLCONTROL; defaults to the
                ``SOUNDROUTING_VINYL_CONTROL`` setting
        """
        if vinyl_control is None:
            vinyl_control = constants.VINYL_CONTROL_ENABLED
        types = [RouteType.VINYLCONTROL] if vinyl_control else []
        types.extend([RouteType.AUXILIARY, RouteType.MICROPHONE])
        return types


ROUTE_CLASSES: dict[Direction, type[AudioRoute]] = {
    Direction.OUTPUT: AudioOutput,
    Direction.INPUT: AudioInput,
}


def channels_clash(first: AudioRoute, second: AudioRoute) -> bool:
    """Return True if two routes claim a common hardware channel."""
    return first.channels.clashes_with(second.channels)


def route_from_element(element: ET.Element) -> AudioRoute | None:
    """Build an output or input route from an element, chosen by its tag.

    Returns None for elements that are not route records.
    """
    try:
        route_cls = ROUTE_CLASSES[Direction(element.tag)]
    except ValueError:
        return None
    return route_cls.from_record(element)


def _read_u8(record: RecordNode, key: str) -> int:
    """Read an unsigned 8-bit attribute, treating anything unreadable as 0."""
    value = record.get(key, 0)
    if isinstance(value, bool):
        return 0
    if isinstance(value, str):
        value = value.strip()
        if not (value.isascii() and value.isdigit()):
            return 0
        value = int(value)
    if not isinstance(value, int) or not 0 <= value <= MAX_CHANNEL:
        return 0
    return value
