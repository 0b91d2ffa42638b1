"""Validation of the routes configured on a sound device."""

from itertools import combinations
from typing import Iterable

from soundrouting.routing import AudioRoute, Direction, channels_clash
from soundrouting.exceptions import (
    ChannelClashError,
    DuplicateRouteError,
    ChannelCountError,
    ChannelOutOfRangeError,
)


class RoutingValidator:
    """Validates a device's routes before they are handed to the audio engine.

    INVALID routes are ignored by every check; callers drop or report them
    separately.
    """

    def __init__(
            self,
            *,
            output_channels: int | None = None,
            input_channels: int | None = None,
            device_name: str | None = None,
    ) -> None:
        self._available = {
            Direction.OUTPUT: output_channels,
            Direction.INPUT: input_channels,
        }
        self._device_name = device_name

    def validate(self, routes: Iterable[AudioRoute]) -> None:
        """Run every check against ``routes``.

        Raises:
            DuplicateRouteError: If a route identity appears twice
            ChannelCountError: If a route's channel count is invalid for its type
            ChannelOutOfRangeError: If a route reaches past the device's channels
            ChannelClashError: If two routes share a hardware channel
        """
        active = [route for route in routes if route.is_valid]
        self.validate_unique(active)
        self.validate_channel_counts(active)
        self.validate_range(active)
        self.validate_no_clashes(active)

    def validate_unique(self, routes: Iterable[AudioRoute]) -> None:
        """Ensure no route identity (direction, type, index) is configured twice."""
        seen: set[AudioRoute] = set()
        for route in routes:
            if not route.is_valid:
                continue
            if route in seen:
                raise DuplicateRouteError(route, self._device_name)
            seen.add(route)

    def validate_channel_counts(self, routes: Iterable[AudioRoute]) -> None:
        """Ensure each route uses a channel count its type supports."""
        for route in routes:
            if not route.is_valid:
                continue
            route_type = route.route_type
            if not route_type.min_channels() <= route.channels.count <= route_type.max_channels():
                raise ChannelCountError(route, self._device_name)

    def validate_range(self, routes: Iterable[AudioRoute]) -> None:
        """Ensure routes stay within the device's channels, when the count is known."""
        for route in routes:
            available = self._available[route.direction]
            if not route.is_valid or available is None:
                continue
            if route.channels.end > available:
                raise ChannelOutOfRangeError(route, available, self._device_name)

    def validate_no_clashes(self, routes: Iterable[AudioRoute]) -> None:
        """Ensure no two routes of the same direction share a hardware channel.

        Outputs and inputs address separate channel spaces on a device.
        """
        routes = list(routes)
        for direction in Direction:
            same_direction = sorted(
                (route for route in routes if route.is_valid and route.direction is direction),
                key=lambda route: (route.channels.base, route.channels.count),
            )
            for first, second in combinations(same_direction, 2):
                if channels_clash(first, second):
                    raise ChannelClashError(first, second, self._device_name)
