"""Configuration file generator for Sound Routing."""

from pathlib import Path

import yaml

from soundrouting.config.defaults import DEFAULT_DEVICES
from soundrouting.config.protocols import CURRENT_SCHEMA_VERSION
from soundrouting.config.types import DeviceData


# Template header with documentation
CONFIG_HEADER = """\
# Sound Routing Configuration File
# =================================
#
# This file assigns engine roles to the hardware channels of your sound
# devices.
#
# DEVICES SECTION
# ---------------
# Each device entry lists the routes configured on one sound device:
#
#   name:            (required) Device name as reported by the audio API
#   output_channels: (optional) Number of playback channels on the device
#   input_channels:  (optional) Number of capture channels on the device
#   outputs:         (optional) List of output routes
#   inputs:          (optional) List of input routes
#
# ROUTES
# ------
#   type:          Route type. Outputs: Master, Headphones, Bus, Deck.
#                  Inputs: Vinyl Control, Auxiliary, Microphone.
#   index:         (optional) Instance number for Bus, Deck, Vinyl Control
#                  and Auxiliary routes, counted from 0. For buses,
#                  0 = left, 1 = center, 2 = right.
#   channel:       First hardware channel, counted from 0
#   channel_count: Number of channels (1 or 2; Vinyl Control needs 2).
#                  When omitted, microphones use 1 and everything else 2.
#
# Routes of the same direction on one device must not share channels.
#
# Example:
#
#   devices:
#     - name: "USB Audio CODEC"
#       output_channels: 4
#       outputs:
#         - type: Master
#           channel: 0
#           channel_count: 2
#         - type: Deck
#           index: 1
#           channel: 2
#           channel_count: 2

"""


class ConfigGenerator:
    """Generate YAML routing configuration files.

    This class writes well-documented configuration files based on the
    default routing or on supplied device definitions.
    """

    def __init__(self, devices: list[DeviceData] | None = None) -> None:
        """Initialize the config generator.

        Args:
            devices: Device configurations (uses defaults if None)
        """
        self.devices = devices if devices is not None else DEFAULT_DEVICES

    def generate(self, output_path: Path, *, include_header: bool = True) -> None:
        """Generate a YAML configuration file.

        Args:
            output_path: Path where the config file will be written
            include_header: Whether to include documentation header

        Raises:
            OSError: If the file cannot be written
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)

        config = {
            'schema_version': CURRENT_SCHEMA_VERSION,
            'devices': self.devices,
        }

        yaml_content = yaml.safe_dump(
            config,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=2,
            width=80,
        )

        with open(output_path, 'w', encoding='utf-8') as f:
            if include_header:
                f.write(CONFIG_HEADER)
            f.write(yaml_content)

    @classmethod
    def generate_minimal(cls, output_path: Path) -> None:
        """Generate a minimal example configuration.

        A single stereo master output, for users who want to start from
        scratch.

        Args:
            output_path: Path where the config file will be written
        """
        minimal_devices: list[DeviceData] = [
            {
                "name": "Default Audio Interface",
                "outputs": [
                    {"type": "Master", "channel": 0, "channel_count": 2},
                ],
            },
        ]

        generator = cls(devices=minimal_devices)
        generator.generate(output_path)
