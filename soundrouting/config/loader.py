"""Routing configuration loader for Sound Routing."""

import logging
from typing import Iterable, Self

from pydantic import ValidationError

from soundrouting.config.models import DeviceConfig
from soundrouting.config.protocols import ConfigSource
from soundrouting.config.types import DeviceData
from soundrouting.config.validators import RoutingValidator
from soundrouting.exceptions import ConfigValidationError, DuplicateDeviceError

logger = logging.getLogger(__name__)


class RoutingConfigLoader:
    """Load and validate the routes configured on each sound device.

    Raw device dictionaries are turned into DeviceConfig models. Routes that
    resolved to INVALID (an unknown type, or a type the direction does not
    support) are dropped and reported through ``warnings``; the remaining
    routes of every device are checked with a RoutingValidator.

    Attributes:
        warnings: Messages for routes dropped by the last ``load()``
    """

    def __init__(self, devices_data: Iterable[DeviceData]) -> None:
        """Initialize the configuration loader.

        Args:
            devices_data: Iterable of raw device configuration dictionaries
        """
        self._devices_data = list(devices_data)
        self.warnings: list[str] = []

    @classmethod
    def from_source(cls, source: ConfigSource) -> Self:
        """Create a loader from a configuration source.

        Raises:
            ConfigValidationError: If the source cannot be read
        """
        devices_data, schema_version = source.load()
        logger.debug(
            "Loaded %d device(s) from %s (schema version %d)",
            len(devices_data), source.source_description, schema_version,
        )
        return cls(devices_data)

    def load(self) -> list[DeviceConfig]:
        """Return the validated device configurations.

        Raises:
            ConfigValidationError: If a device entry is malformed
            DuplicateDeviceError: If two devices share a name
            RoutingError: If a device's routes fail validation
        """
        self.warnings = []
        devices = [self._drop_invalid_routes(device) for device in self._load_devices()]

        seen: set[str] = set()
        for device in devices:
            if device.name in seen:
                raise DuplicateDeviceError(device.name)
            seen.add(device.name)

            validator = RoutingValidator(
                output_channels=device.output_channels,
                input_channels=device.input_channels,
                device_name=device.name,
            )
            validator.validate(device.routes)
        return devices

    def _load_devices(self) -> list[DeviceConfig]:
        devices = []
        for data in self._devices_data:
            try:
                devices.append(DeviceConfig.model_validate(data))
            except ValidationError as e:
                raise ConfigValidationError(f"Invalid device configuration: {_summarize(data)}", errors=e) from e
        return devices

    def _drop_invalid_routes(self, device: DeviceConfig) -> DeviceConfig:
        for route in device.routes:
            if not route.is_valid:
                message = (
                    f"Ignoring invalid {route.direction.value} on device '{device.name}' "
                    f"({route.channels})"
                )
                logger.warning(message)
                self.warnings.append(message)
        return device.model_copy(update={
            "outputs": [route for route in device.outputs if route.is_valid],
            "inputs": [route for route in device.inputs if route.is_valid],
        })


def _summarize(data: object) -> str:
    if isinstance(data, dict) and "name" in data:
        return repr(data["name"])
    return repr(data)
