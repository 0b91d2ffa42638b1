"""Configuration-loading exceptions for Sound Routing."""

from pydantic import ValidationError

from soundrouting.exceptions.base import RoutingError


class ConfigValidationError(RoutingError):
    """Raised when Pydantic validation fails for user data.

    This exception is raised when a device entry in a routing configuration
    has missing fields, wrong types, or values outside their allowed range.
    """

    def __init__(self, message: str, *, errors: ValidationError | None = None) -> None:
        super().__init__(message)
        self.errors = errors


class DuplicateDeviceError(ConfigValidationError):
    """Raised when a sound device is configured more than once."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Device '{name}' is defined multiple times; device names must be unique.")
        self.name = name


class YAMLConfigError(ConfigValidationError):
    """Exception raised for YAML configuration file errors.

    This includes:
    - File not found
    - YAML parsing errors
    - Invalid structure (missing sections, wrong types)
    - Unsupported schema version
    """


class XMLConfigError(ConfigValidationError):
    """Exception raised for legacy XML sound configuration errors."""
