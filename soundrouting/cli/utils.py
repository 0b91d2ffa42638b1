"""CLI utility functions for Sound Routing."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable

import typer

from soundrouting.config import ConfigSource, DeviceConfig, RoutingConfigLoader, XMLConfigWriter
from soundrouting.config.generator import ConfigGenerator
from soundrouting.config.resolver import ConfigResolver, is_xml_config
from soundrouting.exceptions import RoutingError
from soundrouting.output import OutputHandler


def _sanitize_path(path: Path) -> Path:
    """Return a normalized, absolute version of ``path``."""

    return path.expanduser().resolve()


def _resolve_source(config: Path | None, output: OutputHandler) -> ConfigSource:
    """Resolve the configuration source: explicit file, search directories, then defaults."""

    try:
        source = ConfigResolver(_sanitize_path(config) if config else None).resolve()
    except (RoutingError, FileNotFoundError) as e:
        output.error(str(e))
        raise typer.Exit(code=1)
    output.info(f"Using {source.source_description}")
    return source


def _load_devices(source: ConfigSource, output: OutputHandler) -> list[DeviceConfig]:
    """Load and validate the devices of ``source``, reporting dropped routes."""

    try:
        loader = RoutingConfigLoader.from_source(source)
        devices = loader.load()
    except RoutingError as e:
        output.error(str(e))
        raise typer.Exit(code=1)

    for message in loader.warnings:
        output.warning(message)
    return devices


def _refuse_overwrite(path: Path, force: bool, output: OutputHandler) -> None:
    """Exit with an error if ``path`` exists and ``force`` is not set."""

    if path.exists() and not force:
        output.error(f"{path} already exists; use --force to overwrite it.")
        raise typer.Exit(code=1)


def _write_devices(devices: Iterable[DeviceConfig], destination: Path, output: OutputHandler) -> None:
    """Write ``devices`` in the format chosen by the extension of ``destination``."""

    devices = list(devices)
    try:
        if is_xml_config(destination):
            XMLConfigWriter().write(devices, destination)
        else:
            ConfigGenerator([device.to_dict() for device in devices]).generate(destination)
    except OSError as e:
        output.error(f"Could not write {destination}: {e}")
        raise typer.Exit(code=1)
