"""Route validation exceptions for Sound Routing."""

from typing import TYPE_CHECKING

from soundrouting.exceptions.base import RoutingError

if TYPE_CHECKING:
    from soundrouting.routing.routes import AudioRoute


def _on_device(device: str | None) -> str:
    return f" on device '{device}'" if device else ""


class ChannelClashError(RoutingError):
    """Raised when two routes of a device claim the same hardware channel.

    Audio written to (or read from) a shared channel would be mixed between
    both routes, so a configuration with clashing routes is never activated.
    """

    def __init__(self, first: "AudioRoute", second: "AudioRoute", device: str | None = None) -> None:
        super().__init__(
            f"{first} ({first.channels}) and {second} ({second.channels}) "
            f"share hardware channels{_on_device(device)}."
        )
        self.first = first
        self.second = second
        self.device = device


class DuplicateRouteError(RoutingError):
    """Raised when the same route is configured more than once for a device."""

    def __init__(self, route: "AudioRoute", device: str | None = None) -> None:
        super().__init__(
            f"{route.direction.value.capitalize()} '{route}' is defined multiple times{_on_device(device)}."
        )
        self.route = route
        self.device = device


class ChannelCountError(RoutingError):
    """Raised when a route uses fewer or more channels than its type allows."""

    def __init__(self, route: "AudioRoute", device: str | None = None) -> None:
        route_type = route.route_type
        super().__init__(
            f"{route} uses {route.channels.count} channel(s){_on_device(device)}; "
            f"{route_type.display_name()} routes need between {route_type.min_channels()} "
            f"and {route_type.max_channels()}."
        )
        self.route = route
        self.device = device


class ChannelOutOfRangeError(RoutingError):
    """Raised when a route reaches past the last channel of its device."""

    def __init__(self, route: "AudioRoute", available: int, device: str | None = None) -> None:
        super().__init__(
            f"{route} ({route.channels}) is out of range{_on_device(device)} "
            f"({available} {route.direction.value} channels available)."
        )
        self.route = route
        self.available = available
        self.device = device
