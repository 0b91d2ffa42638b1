"""Console-based output handler for Sound Routing."""

from rich.console import Console
from rich.table import Table

from soundrouting.config.models import DeviceConfig
from soundrouting.routing import AudioInput, AudioOutput, AudioRoute, Direction


class ConsoleOutputHandler:
    """Rich Console-based output handler."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def print(self, message: str, **kwargs) -> None:
        """Print an informational message."""
        self.console.print(message, **kwargs)

    def info(self, message: str) -> None:
        """Print an informational message."""
        self.print(message)

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self.print(f"[yellow]Warning:[/yellow] {message}")

    def error(self, message: str) -> None:
        """Print an error message."""
        self.print(f"[red]Error:[/red] {message}")

    def print_device_summary(self, device: DeviceConfig) -> None:
        """Print the routes of a device as a table."""
        if not device.routes:
            self.warning(f"No routes configured on device '{device.name}'")
            return

        table = Table(title=device.name)
        table.add_column("Direction", style="cyan")
        table.add_column("Route", style="bold")
        table.add_column("Channels", justify="right")
        for route in sorted(device.routes, key=_route_order):
            table.add_row(route.direction.value, route.description, str(route.channels))

        self.console.print(table)
        self.console.print()

    def print_supported_types(self, vinyl_control: bool | None = None) -> None:
        """Print the route types each direction supports."""
        table = Table(title="Supported route types")
        table.add_column("Direction", style="cyan")
        table.add_column("Type", style="bold")
        table.add_column("Indexed")
        table.add_column("Channels", justify="right")

        supported = [
            (AudioOutput.direction, AudioOutput.supported_types()),
            (AudioInput.direction, AudioInput.supported_types(vinyl_control)),
        ]
        for direction, route_types in supported:
            for route_type in route_types:
                table.add_row(
                    direction.value,
                    route_type.display_name(),
                    "yes" if route_type.is_indexable() else "no",
                    f"{route_type.min_channels()}-{route_type.max_channels()}",
                )

        self.console.print(table)


def _route_order(route: AudioRoute) -> tuple[bool, int, int]:
    return route.direction is not Direction.OUTPUT, route.channels.base, int(route.route_type)
