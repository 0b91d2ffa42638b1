"""Routing configuration lookup for Sound Routing."""

import logging
import os
from pathlib import Path
from typing import Sequence

from soundrouting.constants import SETTINGS_DIR_ENV
from soundrouting.config.default_source import DefaultConfigSource
from soundrouting.config.protocols import ConfigSource
from soundrouting.config.xml_source import XMLConfigSource
from soundrouting.config.yaml_source import YAMLConfigSource

logger = logging.getLogger(__name__)

# Looked up in each search directory, in this order
YAML_CONFIG_NAMES = ("sound_routing.yaml", "sound_routing.yml")
LEGACY_CONFIG_NAME = "soundconfig.xml"
CONFIG_NAMES = (*YAML_CONFIG_NAMES, LEGACY_CONFIG_NAME)

XML_SUFFIXES = frozenset({".xml"})


def is_xml_config(path: Path) -> bool:
    """Return True if ``path`` names a legacy XML sound configuration."""
    return path.suffix.lower() in XML_SUFFIXES


def source_for_path(path: Path) -> ConfigSource:
    """Open ``path`` with the source matching its extension.

    Raises:
        ConfigValidationError: If the file does not exist
    """
    if is_xml_config(path):
        return XMLConfigSource(path)
    return YAMLConfigSource(path)


class ConfigResolver:
    """Pick the routing configuration a command should load.

    An explicit path always wins. Otherwise the working directory and then
    the engine settings directory (``SOUNDROUTING_SETTINGS_DIR``) are
    searched for ``sound_routing.yaml``, ``sound_routing.yml`` and the
    engine's own ``soundconfig.xml``, in that order. When nothing is found
    the built-in default routing is used.
    """

    def __init__(self, explicit_path: Path | None = None, search_dirs: Sequence[Path] | None = None) -> None:
        """Initialize the resolver.

        Args:
            explicit_path: Path given with --config
            search_dirs: Directories to search instead of the working and
                settings directories
        """
        self.explicit_path = explicit_path
        self._search_dirs = list(search_dirs) if search_dirs is not None else None

    @property
    def search_dirs(self) -> list[Path]:
        if self._search_dirs is not None:
            return self._search_dirs
        dirs = [Path.cwd()]
        settings_dir = os.environ.get(SETTINGS_DIR_ENV)
        if settings_dir:
            dirs.append(Path(settings_dir).expanduser())
        return dirs

    def find(self) -> Path | None:
        """Return the configuration file to load, or None for the defaults.

        Raises:
            FileNotFoundError: If the explicit path does not exist
        """
        if self.explicit_path is not None:
            if not self.explicit_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {self.explicit_path}")
            return self.explicit_path

        for directory in self.search_dirs:
            for name in CONFIG_NAMES:
                candidate = directory / name
                if candidate.is_file():
                    logger.debug("Found routing configuration %s", candidate)
                    return candidate
        return None

    def resolve(self) -> ConfigSource:
        """Return the source for the configuration found by ``find``."""
        path = self.find()
        if path is None:
            logger.debug("No routing configuration found in %s", ", ".join(map(str, self.search_dirs)))
            return DefaultConfigSource()
        return source_for_path(path)

    @staticmethod
    def get_default_path() -> Path:
        """Return where init-config writes a new configuration."""
        return Path.cwd() / YAML_CONFIG_NAMES[0]
