"""Meter ballistics: peak hold, linear fall and logarithmic averaging."""

from __future__ import annotations

import math
from dataclasses import dataclass

#: Seconds a peak mark is held before it starts to fall.
PEAK_HOLD_SECONDS = 10.0

#: Linear fall rate of peak readings: this many decibels ...
FALL_DECIBELS = 26.0
#: ... in this many seconds.
FALL_SECONDS = 3.0

#: Time in seconds an average meter needs to reach 99 % of its target.
AVERAGE_INERTIA = 0.300


def decibel(level: float) -> float:
    """Convert a linear level to decibels; non-positive levels give -inf."""
    if level <= 0.0:
        return -math.inf
    return 20.0 * math.log10(level)


def log_meter_ballistics(
    inertia: float, time_passed: float, level: float, readout: float
) -> float:
    """Move ``readout`` towards ``level`` logarithmically and return it.

    The readout reaches 99 % of the way to ``level`` after ``inertia``
    seconds.
    """
    if inertia <= 0.0:
        raise ValueError("meter inertia must be positive")
    if level == readout:
        return readout
    coefficient = 0.01 ** (time_passed / inertia)
    return coefficient * (readout - level) + level


@dataclass
class PeakState:
    """Running state of a peak meter: reading, peak mark and hold time."""

    level: float
    mark: float
    hold_time: float = 0.0


class MeterBallistics:
    """Ballistics for meters that are updated once per buffer."""

    def __init__(self, buffer_length: float = 0.050) -> None:
        if buffer_length <= 0.0:
            raise ValueError("buffer length must be positive")
        self.buffer_length = buffer_length
        self.release_coefficient = FALL_DECIBELS * buffer_length / FALL_SECONDS

    def _fall(self, current: float, value: float) -> float:
        value -= self.release_coefficient
        return max(value, current)

    def _held_fall(self, current: float, state: PeakState) -> None:
        if state.hold_time < PEAK_HOLD_SECONDS:
            state.hold_time += self.buffer_length
        else:
            state.mark = self._fall(current, state.mark)

    def peak(self, current: float, state: PeakState) -> PeakState:
        """Update a peak meter with the current peak level in decibels."""
        if current >= 0.0:
            state.level = 0.0
        elif current >= state.level:
            state.level = current
        else:
            state.level = self._fall(current, state.level)

        if current >= 0.0:
            state.mark = 0.0
            state.hold_time = 0.0
        elif current >= state.mark:
            state.mark = current
            state.hold_time = 0.0
        else:
            self._held_fall(current, state)
        return state

    def average(self, current: float, readout: float) -> float:
        """Return the new average meter readout for ``current``."""
        return log_meter_ballistics(
            AVERAGE_INERTIA, self.buffer_length, current, readout
        )

    def gain_reduction_peak(self, current: float, state: PeakState) -> PeakState:
        """Update a gain reduction peak; uses ``mark`` and ``hold_time`` only."""
        if current >= state.mark:
            state.mark = current
            state.hold_time = 0.0
        else:
            self._held_fall(current, state)
        return state