"""Integration tests for loading and converting routing configurations."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from soundrouting.config import RoutingConfigLoader, XMLConfigSource, XMLConfigWriter, YAMLConfigSource
from soundrouting.config.generator import ConfigGenerator
from soundrouting.exceptions import ChannelClashError, ChannelOutOfRangeError
from soundrouting.routing import AudioInput, AudioOutput, RouteType


class TestLegacyXMLLoading:
    """Loading an XML sound configuration through the full validation pipeline."""

    @pytest.mark.xml
    def test_legacy_records_are_migrated(self, legacy_xml_config: Path) -> None:
        """Records without channel_count get the historical defaults."""
        loader = RoutingConfigLoader.from_source(XMLConfigSource(legacy_xml_config))
        devices = loader.load()

        first = devices[0]
        master = next(route for route in first.outputs if route.route_type is RouteType.MASTER)
        microphone = next(route for route in first.inputs if route.route_type is RouteType.MICROPHONE)
        vinyl = next(route for route in first.inputs if route.route_type is RouteType.VINYLCONTROL)

        assert master.channels.count == 2
        assert microphone.channels.count == 1
        assert vinyl.channels.count == 2
        assert vinyl.description == "Vinyl Control 2"

    @pytest.mark.xml
    def test_unknown_types_are_dropped(self, legacy_xml_config: Path) -> None:
        """Unknown route types are reported and left out."""
        loader = RoutingConfigLoader.from_source(XMLConfigSource(legacy_xml_config))
        devices = loader.load()

        second = devices[1]
        assert [route.route_type for route in second.outputs] == [RouteType.HEADPHONES]
        assert len(loader.warnings) == 1
        assert "hw:1" in loader.warnings[0]

    @pytest.mark.xml
    def test_vinyl_control_disabled(self, legacy_xml_config: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Vinyl control inputs are dropped when the feature is off."""
        from soundrouting import constants

        monkeypatch.setattr(constants, "VINYL_CONTROL_ENABLED", False)

        loader = RoutingConfigLoader.from_source(XMLConfigSource(legacy_xml_config))
        devices = loader.load()

        assert [route.route_type for route in devices[0].inputs] == [RouteType.MICROPHONE]
        assert len(loader.warnings) == 2


class TestConversion:
    """Converting between the YAML and XML formats."""

    @pytest.mark.xml
    def test_xml_to_yaml_and_back(self, legacy_xml_config: Path, tmp_path: Path) -> None:
        """Routes survive XML -> YAML -> XML unchanged."""
        devices = RoutingConfigLoader.from_source(XMLConfigSource(legacy_xml_config)).load()

        yaml_path = tmp_path / "routing.yaml"
        ConfigGenerator([device.to_dict() for device in devices]).generate(yaml_path)
        from_yaml = RoutingConfigLoader.from_source(YAMLConfigSource(yaml_path)).load()

        xml_path = tmp_path / "converted.xml"
        XMLConfigWriter().write(from_yaml, xml_path)
        from_xml = RoutingConfigLoader.from_source(XMLConfigSource(xml_path)).load()

        for original, converted in zip(devices, from_xml, strict=True):
            assert converted.name == original.name
            assert converted.output_channels == original.output_channels
            assert [(r.route_type, r.index, r.channels) for r in converted.routes] == \
                [(r.route_type, r.index, r.channels) for r in original.routes]

    def test_generated_example_is_valid(self, tmp_path: Path) -> None:
        """The example written by init-config passes validation."""
        config_path = tmp_path / "sound_routing.yaml"
        ConfigGenerator().generate(config_path)

        devices = RoutingConfigLoader.from_source(YAMLConfigSource(config_path)).load()

        assert len(devices) == 1
        assert len(devices[0].outputs) == 2
        assert len(devices[0].inputs) == 2


class TestValidationFailures:
    """Configuration errors detected end to end."""

    def test_clash_across_yaml(self, tmp_path: Path) -> None:
        """Overlapping outputs on one device are rejected."""
        config_path = tmp_path / "routing.yaml"
        config_path.write_text(yaml.safe_dump({"devices": [{
            "name": "hw:0",
            "outputs": [
                {"type": "Deck", "index": 0, "channel": 0, "channel_count": 2},
                {"type": "Deck", "index": 1, "channel": 1, "channel_count": 2},
            ],
        }]}), encoding="utf-8")

        with pytest.raises(ChannelClashError) as exc_info:
            RoutingConfigLoader.from_source(YAMLConfigSource(config_path)).load()

        assert exc_info.value.device == "hw:0"

    def test_inputs_and_outputs_may_share_channels(self, tmp_path: Path) -> None:
        """Playback and capture channels are separate."""
        config_path = tmp_path / "routing.yaml"
        config_path.write_text(yaml.safe_dump({"devices": [{
            "name": "hw:0",
            "outputs": [{"type": "Master", "channel": 0, "channel_count": 2}],
            "inputs": [{"type": "Auxiliary", "index": 0, "channel": 0, "channel_count": 2}],
        }]}), encoding="utf-8")

        devices = RoutingConfigLoader.from_source(YAMLConfigSource(config_path)).load()

        assert isinstance(devices[0].outputs[0], AudioOutput)
        assert isinstance(devices[0].inputs[0], AudioInput)

    def test_route_beyond_device_channels(self, tmp_path: Path) -> None:
        """Routes must fit the channels the device reports."""
        config_path = tmp_path / "routing.yaml"
        config_path.write_text(yaml.safe_dump({"devices": [{
            "name": "hw:0",
            "output_channels": 2,
            "outputs": [{"type": "Headphones", "channel": 2, "channel_count": 2}],
        }]}), encoding="utf-8")

        with pytest.raises(ChannelOutOfRangeError):
            RoutingConfigLoader.from_source(YAMLConfigSource(config_path)).load()
