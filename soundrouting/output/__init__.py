"""Output handling package for Sound Routing."""
from soundrouting.output.protocols import OutputHandler
from soundrouting.output.console import ConsoleOutputHandler

__all__ = [
    "OutputHandler",
    "ConsoleOutputHandler",
]
