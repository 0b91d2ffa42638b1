"""Entry point for the Sound Routing CLI.

This module exposes a Typer-powered command-line interface for checking and
converting the routing configuration of an audio engine's sound devices.
"""

from soundrouting.cli.app import app


if __name__ == "__main__":
    app()
