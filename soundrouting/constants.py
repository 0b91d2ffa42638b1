"""Constants for Sound Routing."""

import os

VERSION = "0.1.0"

# Channel bases, counts and indices are stored as unsigned 8-bit values
MAX_CHANNEL = 255

# Mixer bus positions addressed by the index of a BUS route
BUS_LEFT = 0
BUS_CENTER = 1
BUS_RIGHT = 2

_FALSE_VALUES = {"0", "false", "no", "off"}


def _read_flag(name: str, default: bool) -> bool:
    """Read a boolean feature flag from the environment."""

    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() not in _FALSE_VALUES


# Whether sound devices may carry vinyl-control (timecode) inputs
VINYL_CONTROL_ENABLED = _read_flag("SOUNDROUTING_VINYL_CONTROL", True)

# Directory holding the engine's own settings, searched after the working directory
SETTINGS_DIR_ENV = "SOUNDROUTING_SETTINGS_DIR"
