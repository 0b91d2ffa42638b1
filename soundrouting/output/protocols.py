"""Output handler protocol for Sound Routing."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputHandler(Protocol):
    """Destination for the messages a command reports while it runs.

    Configuration sources, dropped routes and validation failures all go
    through this interface; ConsoleOutputHandler renders them with rich.
    """

    def print(self, message: str, **kwargs) -> None:
        ...

    def info(self, message: str) -> None:
        """Report progress, such as the configuration file in use."""
        ...

    def warning(self, message: str) -> None:
        """Report a problem the command recovered from, such as a dropped route."""
        ...

    def error(self, message: str) -> None:
        """Report the problem that stops the command."""
        ...
