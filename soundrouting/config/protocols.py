"""Protocol definitions for configuration sources."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ConfigSource(Protocol):
    """Protocol for routing configuration sources.

    The RoutingConfigLoader depends on this abstraction rather than on
    concrete file formats.

    Implementations include:
    - YAMLConfigSource: Load from YAML routing files
    - XMLConfigSource: Load from legacy XML sound configuration files
    - DefaultConfigSource: Built-in Python defaults
    """

    def load(self) -> tuple[list[dict[str, Any]], int]:
        """Load configuration data from the source.

        Returns:
            Tuple of (devices_data, schema_version) where:
            - devices_data: List of device dictionaries; their ``outputs`` and
              ``inputs`` hold route records (mappings or XML elements)
            - schema_version: Schema version number (1 for built-in defaults)

        Raises:
            ConfigValidationError: If configuration cannot be loaded or is invalid
        """
        ...

    @property
    def source_description(self) -> str:
        """Human-readable description of the config source.

        Returns:
            Description string for logging/error messages
            e.g., "YAML file: /path/to/sound_routing.yaml" or "built-in defaults"
        """
        ...


# Current supported schema version
CURRENT_SCHEMA_VERSION = 1
