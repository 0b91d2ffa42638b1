"""Base exception classes for Sound Routing."""


class RoutingError(Exception):
    """Base class for user-facing routing configuration errors.

    All configuration-related exceptions inherit from this class so the CLI
    can report them uniformly.
    """
