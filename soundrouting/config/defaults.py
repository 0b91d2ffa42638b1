"""Default sound device routing for Sound Routing."""

from soundrouting.config.types import DeviceDict

# A typical four-in/four-out DJ interface: master and headphones on the
# playback side, a turntable and a microphone on the capture side.
DEFAULT_DEVICES: list[DeviceDict] = [
    {
        "name": "Default Audio Interface",
        "output_channels": 4,
        "input_channels": 4,
        "outputs": [
            {"type": "Master", "channel": 0, "channel_count": 2},
            {"type": "Headphones", "channel": 2, "channel_count": 2},
        ],
        "inputs": [
            {"type": "Vinyl Control", "index": 0, "channel": 0, "channel_count": 2},
            {"type": "Microphone", "channel": 2, "channel_count": 1},
        ],
    },
]
