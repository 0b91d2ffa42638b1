"""Hardware channel groups for Sound Routing."""

from pydantic import BaseModel, ConfigDict, Field

from soundrouting.constants import MAX_CHANNEL


class ChannelGroup(BaseModel):
    """A contiguous, half-open range of hardware channels ``[base, base + count)``.

    A group with ``count == 0`` claims no channels and never clashes with any
    other group, itself included.
    """

    model_config = ConfigDict(frozen=True)

    base: int = Field(0, ge=0, le=MAX_CHANNEL, description="First hardware channel (0-based)")
    count: int = Field(0, ge=0, le=MAX_CHANNEL, description="Number of channels in the group")

    @property
    def end(self) -> int:
        """One past the last channel of the group."""
        return self.base + self.count

    def clashes_with(self, other: "ChannelGroup") -> bool:
        """Return True if this group and ``other`` share any hardware channel."""
        if self.count == 0 or other.count == 0:
            return False
        if self.base == other.base:
            return True
        return (
            other.base < self.base < other.end
            or self.base < other.base < self.end
        )

    def __hash__(self) -> int:
        return (self.count << 8) | self.base

    def __str__(self) -> str:
        # 1-based, as channels are labelled on hardware
        if self.count == 0:
            return "no channels"
        if self.count == 1:
            return f"channel {self.base + 1}"
        return f"channels {self.base + 1}-{self.end}"
