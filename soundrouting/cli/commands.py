"""CLI command implementations for Sound Routing."""

import logging
from pathlib import Path

import typer
from rich.console import Console

from soundrouting.constants import VERSION
from soundrouting.config.generator import ConfigGenerator
from soundrouting.config.resolver import ConfigResolver, source_for_path
from soundrouting.exceptions import RoutingError
from soundrouting.output import ConsoleOutputHandler
from soundrouting.cli.utils import (
    _load_devices,
    _refuse_overwrite,
    _resolve_source,
    _sanitize_path,
    _write_devices,
)

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Default to WARNING level
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


def _configure_verbosity(verbose: bool) -> None:
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")
    else:
        logging.getLogger().setLevel(logging.WARNING)


def version_callback(value: bool) -> None:
    """Handle version flag callback for Typer CLI.

    Args:
        value: Whether the version flag was provided
    """
    if value:
        typer.echo(f"Sound Routing v{VERSION}")
        raise typer.Exit()


def main(
        version: bool = typer.Option(
            None, "--version", "-v",
            callback=version_callback,
            is_eager=True,
            is_flag=True,
            help="Show version and exit."
        ),
) -> None:
    """Assign engine roles to the hardware channels of sound devices."""


def validate_config(
        config: Path | None = typer.Option(
            None, "--config", "-c",
            dir_okay=False,
            help="Routing configuration file (.yaml/.yml, or legacy .xml)",
        ),
        verbose: bool = typer.Option(
            False, "--verbose",
            help="Enable verbose debug output"
        ),
) -> None:
    """Load a routing configuration, check it for clashes and print its routes."""

    _configure_verbosity(verbose)
    output = ConsoleOutputHandler(Console())

    devices = _load_devices(_resolve_source(config, output), output)
    for device in devices:
        output.print_device_summary(device)
    output.print("[green]Configuration is valid.[/green]")


def init_config(
        output_path: Path | None = typer.Argument(
            None,
            dir_okay=False,
            help="Where to write the configuration (default: ./sound_routing.yaml)",
        ),
        minimal: bool = typer.Option(False, "--minimal", help="Write a minimal single-output example"),
        force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Generate an example routing configuration file."""

    output = ConsoleOutputHandler(Console())
    target = _sanitize_path(output_path) if output_path else ConfigResolver.get_default_path()

    _refuse_overwrite(target, force, output)

    try:
        if minimal:
            ConfigGenerator.generate_minimal(target)
        else:
            ConfigGenerator().generate(target)
    except OSError as e:
        output.error(f"Could not write {target}: {e}")
        raise typer.Exit(code=1)

    output.info(f"Wrote example configuration to {target}")


def list_types(
        vinyl_control: bool | None = typer.Option(
            None, "--vinyl-control/--no-vinyl-control",
            help="Override the SOUNDROUTING_VINYL_CONTROL setting",
        ),
) -> None:
    """List the route types supported by outputs and inputs."""

    ConsoleOutputHandler(Console()).print_supported_types(vinyl_control)


def convert_config(
        source_path: Path = typer.Argument(
            ..., exists=True, file_okay=True, dir_okay=False, readable=True, resolve_path=True,
            help="Configuration to convert (.yaml/.yml or legacy .xml)",
        ),
        destination: Path = typer.Argument(
            ..., dir_okay=False, resolve_path=True,
            help="Converted configuration; the format follows the extension",
        ),
        force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
        verbose: bool = typer.Option(False, "--verbose", help="Enable verbose debug output"),
) -> None:
    """Convert a routing configuration between the YAML and legacy XML formats.

    Legacy records without a channel count are migrated on the way.
    """

    _configure_verbosity(verbose)
    output = ConsoleOutputHandler(Console())

    _refuse_overwrite(destination, force, output)

    try:
        source = source_for_path(source_path)
    except RoutingError as e:
        output.error(str(e))
        raise typer.Exit(code=1)

    devices = _load_devices(source, output)
    _write_devices(devices, destination, output)

    route_count = sum(len(device.routes) for device in devices)
    output.info(f"Converted {route_count} route(s) on {len(devices)} device(s) to {destination}")
