"""Command-line interface for Sound Routing."""
