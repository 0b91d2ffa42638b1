"""Pydantic models for routing configuration."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from soundrouting.constants import MAX_CHANNEL
from soundrouting.config.types import DeviceDict
from soundrouting.routing import AudioInput, AudioOutput, AudioRoute


class DeviceConfig(BaseModel):
    """Routes configured on one sound device."""

    name: str = Field(..., description="Sound device name as reported by the host audio API")
    output_channels: int | None = Field(None, ge=0, le=MAX_CHANNEL, description="Playback channels on the device")
    input_channels: int | None = Field(None, ge=0, le=MAX_CHANNEL, description="Capture channels on the device")
    outputs: list[AudioOutput] = Field(default_factory=list)
    inputs: list[AudioInput] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def clean_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Device name must not be empty")
        return value

    @field_validator("outputs", mode="before")
    @classmethod
    def parse_outputs(cls, value: Any) -> Any:
        return _parse_records(AudioOutput, value)

    @field_validator("inputs", mode="before")
    @classmethod
    def parse_inputs(cls, value: Any) -> Any:
        return _parse_records(AudioInput, value)

    @property
    def routes(self) -> list[AudioRoute]:
        """All routes of the device, outputs first."""
        return [*self.outputs, *self.inputs]

    def to_dict(self) -> DeviceDict:
        """Return the device as a plain mapping suitable for YAML output."""
        data: DeviceDict = {"name": self.name}
        if self.output_channels is not None:
            data["output_channels"] = self.output_channels
        if self.input_channels is not None:
            data["input_channels"] = self.input_channels
        data["outputs"] = [route.to_dict() for route in self.outputs]
        data["inputs"] = [route.to_dict() for route in self.inputs]
        return data


def _parse_records(route_cls: type[AudioRoute], value: Any) -> Any:
    """Convert raw route records (mappings or XML elements) into routes."""
    if value is None:
        return []
    if not isinstance(value, list):
        return value
    return [
        route_cls.from_record(item) if _is_record(item) else item
        for item in value
    ]


def _is_record(item: Any) -> bool:
    return not isinstance(item, AudioRoute) and callable(getattr(item, "get", None))
