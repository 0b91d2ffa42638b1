"""Default configuration source for Sound Routing."""

from typing import Any

from soundrouting.config.defaults import DEFAULT_DEVICES
from soundrouting.config.protocols import CURRENT_SCHEMA_VERSION


class DefaultConfigSource:
    """Provide the built-in default routing.

    Implements the ConfigSource protocol using the Python defaults
    defined in soundrouting/config/defaults.py.
    """

    @property
    def source_description(self) -> str:
        """Human-readable description of the config source."""
        return "built-in defaults"

    def load(self) -> tuple[list[dict[str, Any]], int]:
        """Load the built-in default routing.

        Returns:
            Tuple of (devices_data, schema_version)
        """
        return DEFAULT_DEVICES, CURRENT_SCHEMA_VERSION  # type: ignore[return-value]
