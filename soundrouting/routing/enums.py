"""Route enums for Sound Routing."""

from enum import Enum, IntEnum

from soundrouting.constants import BUS_CENTER, BUS_LEFT, BUS_RIGHT
from soundrouting.i18n import _


class Direction(str, Enum):
    """Signal direction of a route, relative to the audio engine."""

    OUTPUT = "output"
    INPUT = "input"

    def __str__(self) -> str:
        return self.value


class BusPosition(IntEnum):
    """Mixer bus positions, addressed by the index of a BUS route."""

    LEFT = BUS_LEFT
    CENTER = BUS_CENTER
    RIGHT = BUS_RIGHT


class RouteType(IntEnum):
    """Logical roles a route can play on a sound device.

    ``INVALID`` is the zero value and the result of any failed construction,
    parse or ordinal lookup.
    """

    INVALID = 0
    MASTER = 1
    HEADPHONES = 2
    BUS = 3
    DECK = 4
    VINYLCONTROL = 5
    MICROPHONE = 6
    AUXILIARY = 7

    def display_name(self) -> str:
        """Return the canonical (persisted) name of this type."""
        return display_name(self)

    def localized_name(self, index: int = 0) -> str:
        """Return the user-facing label of this type for the given instance index."""
        return localized_name(self, index)

    def is_indexable(self) -> bool:
        """Return whether several numbered instances of this type may exist."""
        return self in _INDEXABLE_TYPES

    def min_channels(self) -> int:
        return 2 if self is RouteType.VINYLCONTROL else 1

    def max_channels(self) -> int:
        return 2

    @classmethod
    def parse(cls, value: str) -> "RouteType":
        """Return the type whose display name matches ``value``, ignoring case.

        Whitespace is significant. Unknown names yield INVALID.
        """
        if not isinstance(value, str):
            return cls.INVALID
        return _TYPES_BY_NAME.get(value.lower(), cls.INVALID)

    @classmethod
    def from_ordinal(cls, value: int) -> "RouteType":
        """Return the type with ordinal ``value``, or INVALID when out of range."""
        if isinstance(value, bool) or not isinstance(value, int):
            return cls.INVALID
        if value < 0 or value > max(cls):
            return cls.INVALID
        return cls(value)


_INDEXABLE_TYPES = frozenset({
    RouteType.BUS,
    RouteType.DECK,
    RouteType.VINYLCONTROL,
    RouteType.AUXILIARY,
})

DISPLAY_NAMES: dict[RouteType, str] = {
    RouteType.INVALID: "Invalid",
    RouteType.MASTER: "Master",
    RouteType.HEADPHONES: "Headphones",
    RouteType.BUS: "Bus",
    RouteType.DECK: "Deck",
    RouteType.VINYLCONTROL: "Vinyl Control",
    RouteType.MICROPHONE: "Microphone",
    RouteType.AUXILIARY: "Auxiliary",
}

# Older configuration files spelled the auxiliary type "Auxilliary"
_LEGACY_NAMES: dict[str, RouteType] = {
    "auxilliary": RouteType.AUXILIARY,
}

_TYPES_BY_NAME: dict[str, RouteType] = {
    **{name.lower(): route_type for route_type, name in DISPLAY_NAMES.items()},
    **_LEGACY_NAMES,
}


def display_name(value: int) -> str:
    """Return the canonical name for a route type ordinal.

    Values outside the enumeration render a diagnostic string instead of
    raising.
    """
    try:
        return DISPLAY_NAMES[RouteType(value)]
    except ValueError:
        return f"Unknown path type {value}"


def localized_name(value: int, index: int = 0) -> str:
    """Return the translated label for a route type ordinal and instance index.

    BUS routes are labelled by their bus position. DECK, VINYLCONTROL and
    AUXILIARY routes are numbered from 1.
    """
    try:
        route_type = RouteType(value)
    except ValueError:
        return _("Unknown path type {value}").format(value=value)

    if route_type is RouteType.BUS:
        bus_labels = {
            BusPosition.LEFT: _("Left Bus"),
            BusPosition.CENTER: _("Center Bus"),
            BusPosition.RIGHT: _("Right Bus"),
        }
        return bus_labels.get(index, _("Invalid Bus"))

    labels = {
        RouteType.INVALID: _("Invalid"),
        RouteType.MASTER: _("Master"),
        RouteType.HEADPHONES: _("Headphones"),
        RouteType.DECK: _("Deck"),
        RouteType.VINYLCONTROL: _("Vinyl Control"),
        RouteType.MICROPHONE: _("Microphone"),
        RouteType.AUXILIARY: _("Auxiliary"),
    }
    label = labels[route_type]
    if route_type.is_indexable():
        return f"{label} {index + 1}"
    return label
