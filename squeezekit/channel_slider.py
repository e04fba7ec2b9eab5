"""Channel selector whose values run from "All" (-1) to the last channel."""

from __future__ import annotations

import re

ALL_CHANNELS_TEXT = "All"

_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class ChannelSlider:
    """Selects one channel or all channels; -1 means all channels."""

    minimum = -1.0
    interval = 1.0

    def __init__(self, channels: int = 0) -> None:
        self.value = self.minimum
        self.set_number_of_channels(channels)

    def set_number_of_channels(self, channels: int) -> None:
        """Set the channel count and select all channels."""
        if channels < 0:
            raise ValueError("number of channels must not be negative")
        self.channels = int(channels)
        self.maximum = float(self.channels)
        self.set_value(self.minimum)

    def set_value(self, value: float) -> float:
        """Set the value, snapped to whole channels within range."""
        steps = round((float(value) - self.minimum) / self.interval)
        snapped = self.minimum + steps * self.interval
        self.value = min(max(snapped, self.minimum), self.maximum)
        return self.value

    def normalised(self) -> float:
        """Return the value scaled to 0.0 .. 1.0."""
        return (self.value - self.minimum) / (self.maximum - self.minimum)

    def value_from_text(self, text: str) -> float:
        """Parse a channel label; "All" gives -1, "n" gives n - 1."""
        if text == ALL_CHANNELS_TEXT:
            return -1.0
        match = _LEADING_NUMBER.match(text)
        number = float(match.group(1)) if match else 0.0
        return number - 1.0

    def text_from_value(self, value: float) -> str:
        """Format a value as a one-based channel label or "All"."""
        if value < 0:
            return ALL_CHANNELS_TEXT
        return str(int(value + 0.5) + 1)