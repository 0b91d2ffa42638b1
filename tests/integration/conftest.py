"""Integration test configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture(autouse=True)
def _mark_integration(request: pytest.FixtureRequest) -> None:
    request.node.add_marker(pytest.mark.integration)


@pytest.fixture
def cli_runner() -> CliRunner:
    """CLI runner with a wide terminal so console output does not wrap."""
    return CliRunner(env={"COLUMNS": "200"})


@pytest.fixture
def legacy_xml_config(tmp_path: Path) -> Path:
    """Write an XML sound configuration with pre-channel-count records."""
    config_path = tmp_path / "soundconfig.xml"
    config_path.write_text("""\
<?xml version="1.0" encoding="utf-8"?>
<SoundManagerConfig api="ALSA" samplerate="44100" latency="5">
  <SoundDevice name="hw:0" output_channels="6" input_channels="4">
    <output type="Master" index="0" channel="0"/>
    <output type="Deck" index="0" channel="2" channel_count="2"/>
    <output type="Bus" index="2" channel="4" channel_count="1"/>
    <input type="Microphone" index="0" channel="0"/>
    <input type="Vinyl Control" index="1" channel="2"/>
  </SoundDevice>
  <SoundDevice name="hw:1">
    <output type="Headphones" index="0" channel="0" channel_count="2"/>
    <output type="Sidechain" index="0" channel="2" channel_count="2"/>
  </SoundDevice>
</SoundManagerConfig>
""", encoding="utf-8")
    return config_path
