"""Unit test shared fixtures.

Fixtures here are available to all unit tests but not integration tests.
Focus on lightweight factories and fast execution.
"""

from __future__ import annotations

from typing import Any

import pytest


# =============================================================================
# Automatic Markers
# =============================================================================

def pytest_collection_modifyitems(items):
    """Automatically mark all tests in unit/ directory with @pytest.mark.unit."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Sample Data Factories
# =============================================================================

@pytest.fixture
def route_record_factory():
    """Factory fixture for creating route record dictionaries.

    Returns:
        Callable that creates route records with sensible defaults.

    Example:
        >>> record = route_record_factory(type="Deck", index=1)
        >>> assert record == {"type": "Deck", "index": 1, "channel": 0, "channel_count": 2}
    """
    def _create(
        type: str = "Master",
        index: int = 0,
        channel: int = 0,
        channel_count: int = 2,
    ) -> dict[str, Any]:
        return {"type": type, "index": index, "channel": channel, "channel_count": channel_count}

    return _create


@pytest.fixture
def device_data_factory(route_record_factory):
    """Factory fixture for creating device configuration dictionaries.

    Returns:
        Callable that creates a device with a stereo master output by default.
    """
    def _create(
        name: str = "Test Interface",
        outputs: list[dict[str, Any]] | None = None,
        inputs: list[dict[str, Any]] | None = None,
        output_channels: int | None = None,
        input_channels: int | None = None,
    ) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": name,
            "outputs": outputs if outputs is not None else [route_record_factory()],
            "inputs": inputs if inputs is not None else [],
        }
        if output_channels is not None:
            data["output_channels"] = output_channels
        if input_channels is not None:
            data["input_channels"] = input_channels
        return data

    return _create
