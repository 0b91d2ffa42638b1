"""Sound Routing - hardware channel routing for an audio engine's sound devices."""

from soundrouting.constants import VERSION

__version__ = VERSION
