"""Config module test fixtures.

Provides fixtures specific to testing device models, validators,
and configuration loading.
"""

from __future__ import annotations

from typing import Any

import pytest

from soundrouting.routing import AudioInput, AudioOutput, RouteType


# =============================================================================
# Route Fixtures
# =============================================================================

@pytest.fixture
def master_output() -> AudioOutput:
    """Stereo master on the first two playback channels."""
    return AudioOutput(route_type=RouteType.MASTER, channel_base=0, channel_count=2)


@pytest.fixture
def headphones_output() -> AudioOutput:
    """Stereo headphones on playback channels 3-4."""
    return AudioOutput(route_type=RouteType.HEADPHONES, channel_base=2, channel_count=2)


@pytest.fixture
def microphone_input() -> AudioInput:
    """Mono microphone on the first capture channel."""
    return AudioInput(route_type=RouteType.MICROPHONE, channel_base=0, channel_count=1)


# =============================================================================
# Raw Configuration Data
# =============================================================================

@pytest.fixture
def mock_device_list() -> list[dict[str, Any]]:
    """Create a list of device configurations for testing loaders."""
    return [
        {
            "name": "USB Audio CODEC",
            "output_channels": 4,
            "input_channels": 2,
            "outputs": [
                {"type": "Master", "channel": 0, "channel_count": 2},
                {"type": "Headphones", "channel": 2, "channel_count": 2},
            ],
            "inputs": [
                {"type": "Vinyl Control", "index": 0, "channel": 0, "channel_count": 2},
            ],
        },
        {
            "name": "Built-in Audio",
            "inputs": [
                {"type": "Microphone", "channel": 0, "channel_count": 1},
            ],
        },
    ]
