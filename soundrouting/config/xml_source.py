"""Legacy XML sound configuration source and writer for Sound Routing.

The XML document has the shape::

    <SoundManagerConfig api="ALSA" samplerate="44100">
      <SoundDevice name="hw:0" output_channels="4" input_channels="2">
        <output type="Master" index="0" channel="0" channel_count="2"/>
        <input type="Microphone" index="0" channel="0" channel_count="1"/>
      </SoundDevice>
    </SoundManagerConfig>

Attributes of the root element are engine settings and are not interpreted
here. Records written before ``channel_count`` was persisted omit it.
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Iterable

from soundrouting.config.models import DeviceConfig
from soundrouting.config.protocols import CURRENT_SCHEMA_VERSION
from soundrouting.exceptions import XMLConfigError
from soundrouting.routing import Direction, route_from_element

logger = logging.getLogger(__name__)

ROOT_TAG = "SoundManagerConfig"
DEVICE_TAG = "SoundDevice"

_SECTIONS = {Direction.OUTPUT: "outputs", Direction.INPUT: "inputs"}


class XMLConfigSource:
    """Load routing configuration from a legacy XML sound configuration file.

    Implements the ConfigSource protocol. Route records become AudioOutput and
    AudioInput instances chosen by their tag; other child elements are skipped.
    """

    def __init__(self, config_path: Path) -> None:
        self._config_path = config_path
        if not config_path.is_file():
            raise XMLConfigError(f"Configuration file not found: {config_path}")

    @property
    def source_description(self) -> str:
        """Human-readable description of the config source."""
        return f"XML file: {self._config_path}"

    def load(self) -> tuple[list[dict[str, Any]], int]:
        """Parse the XML document into device data.

        Raises:
            XMLConfigError: If the document cannot be parsed or has the wrong root
        """
        try:
            root = ET.parse(self._config_path).getroot()
        except ET.ParseError as e:
            line, column = e.position
            raise XMLConfigError(
                f"Failed to parse XML configuration: {e} (line {line}, column {column + 1})"
            ) from e

        if root.tag != ROOT_TAG:
            raise XMLConfigError(f"Expected <{ROOT_TAG}> root element, got <{root.tag}>")

        devices = [self._read_device(element) for element in root.iter(DEVICE_TAG)]
        logger.debug("Read %d device(s) from %s", len(devices), self._config_path)
        return devices, CURRENT_SCHEMA_VERSION

    def _read_device(self, element: ET.Element) -> dict[str, Any]:
        device: dict[str, Any] = {"name": element.get("name", ""), "outputs": [], "inputs": []}
        for child in element:
            route = route_from_element(child)
            if route is None:
                logger.debug("Skipping <%s> in device '%s'", child.tag, device["name"])
                continue
            device[_SECTIONS[route.direction]].append(route)
        for key in ("output_channels", "input_channels"):
            value = element.get(key)
            if value is not None:
                device[key] = _parse_count(value, key, device["name"])
        return device


class XMLConfigWriter:
    """Write devices and their routes as a legacy XML sound configuration."""

    def __init__(self, settings: dict[str, str] | None = None) -> None:
        """Initialize the writer.

        Args:
            settings: Attributes for the root element (API, sample rate, ...)
        """
        self.settings = settings or {}

    def build(self, devices: Iterable[DeviceConfig]) -> ET.ElementTree:
        """Build the XML document for ``devices``."""
        root = ET.Element(ROOT_TAG, self.settings)
        for device in devices:
            device_element = ET.SubElement(root, DEVICE_TAG, {"name": device.name})
            if device.output_channels is not None:
                device_element.set("output_channels", str(device.output_channels))
            if device.input_channels is not None:
                device_element.set("input_channels", str(device.input_channels))
            for route in device.routes:
                route.to_record(ET.SubElement(device_element, route.direction.value))
        tree = ET.ElementTree(root)
        ET.indent(tree)
        return tree

    def write(self, devices: Iterable[DeviceConfig], output_path: Path) -> None:
        """Write ``devices`` to ``output_path``.

        Raises:
            OSError: If the file cannot be written
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        self.build(devices).write(output_path, encoding="utf-8", xml_declaration=True)


def _parse_count(value: str, key: str, device: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise XMLConfigError(
            f"Attribute '{key}' of device '{device}' must be an integer, got '{value}'"
        ) from e
