"""Configuration package for Sound Routing."""

# Re-export models
from soundrouting.config.models import DeviceConfig

# Re-export validators
from soundrouting.config.validators import RoutingValidator

# Re-export loader
from soundrouting.config.loader import RoutingConfigLoader

# Re-export sources
from soundrouting.config.protocols import ConfigSource, CURRENT_SCHEMA_VERSION
from soundrouting.config.default_source import DefaultConfigSource
from soundrouting.config.yaml_source import YAMLConfigSource
from soundrouting.config.xml_source import XMLConfigSource, XMLConfigWriter

# Re-export defaults
from soundrouting.config.defaults import DEFAULT_DEVICES

# Re-export types
from soundrouting.config.types import DeviceData, DeviceDict

__all__ = [
    # Models
    "DeviceConfig",
    # Validators
    "RoutingValidator",
    # Loader
    "RoutingConfigLoader",
    # Sources
    "ConfigSource",
    "CURRENT_SCHEMA_VERSION",
    "DefaultConfigSource",
    "YAMLConfigSource",
    "XMLConfigSource",
    "XMLConfigWriter",
    # Defaults
    "DEFAULT_DEVICES",
    # Types
    "DeviceData",
    "DeviceDict",
]
