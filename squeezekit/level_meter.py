"""Buffered input, output and gain reduction metering for a compressor."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import Sequence

from squeezekit.ballistics import MeterBallistics, PeakState, decibel

#: Length of one meter buffer in seconds (the meters update once per buffer).
BUFFER_LENGTH = 0.050

#: Distance of the meter floor below the crest factor, in decibels.
METER_RANGE = 70.01

# keeps silent buffers from producing infinite levels
_LEVEL_FLOOR = sys.float_info.min


def _level_decibel(level: float) -> float:
    return decibel(max(level, _LEVEL_FLOOR))


@dataclass(frozen=True)
class ChannelReading:
    """Meter readout of one channel, levels in decibels.

    All level readings include the crest factor; gain reduction values
    do not.
    """

    peak_input: float
    peak_output: float
    peak_mark_input: float
    peak_mark_output: float
    maximum_input: float
    maximum_output: float
    average_input: float
    average_output: float
    gain_reduction: float
    gain_reduction_peak: float


@dataclass
class _ChannelState:
    minimum: float
    input_peak: PeakState = field(init=False)
    output_peak: PeakState = field(init=False)
    reduction_peak: PeakState = field(init=False)
    maximum_input: float = field(init=False)
    maximum_output: float = field(init=False)
    average_input: float = field(init=False)
    average_output: float = field(init=False)
    gain_reduction: float = field(init=False)
    inputs: list[float] = field(default_factory=list)
    outputs: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        floor = self.minimum
        self.input_peak = PeakState(level=floor, mark=floor)
        self.output_peak = PeakState(level=floor, mark=floor)
        self.reduction_peak = PeakState(level=floor, mark=floor)
        self.maximum_input = floor
        self.maximum_output = floor
        self.average_input = floor
        self.average_output = floor
        self.gain_reduction = floor


def _magnitude(samples: Sequence[float]) -> float:
    return max((abs(sample) for sample in samples), default=0.0)


def _rms(samples: Sequence[float]) -> float:
    if not samples:
        return 0.0
    return math.sqrt(sum(sample * sample for sample in samples) / len(samples))


class LevelMeter:
    """Collects samples in 50 ms buffers and applies meter ballistics."""

    def __init__(
        self, channels: int, sample_rate: int, crest_factor: float = 20.0
    ) -> None:
        if channels < 1:
            raise ValueError("a level meter needs at least one channel")
        buffer_size = int(sample_rate * BUFFER_LENGTH)
        if buffer_size < 1:
            raise ValueError("sample rate too low for the meter buffer")
        self.channels = channels
        self.sample_rate = sample_rate
        self.crest_factor = crest_factor
        self.buffer_size = buffer_size
        self._ballistics = MeterBallistics(BUFFER_LENGTH)
        minimum = -(METER_RANGE + crest_factor)
        self._states = [_ChannelState(minimum) for _ in range(channels)]

    @property
    def minimum(self) -> float:
        """Meter floor in decibels, before the crest factor is added."""
        return -(METER_RANGE + self.crest_factor)

    def reset(self) -> None:
        """Set all meter readings back to the meter floor."""
        for state in self._states:
            state.reset()

    def _check_length(self, name: str, values: Sequence[float]) -> None:
        if len(values) != self.channels:
            raise ValueError(
                f"expected {self.channels} {name} values, got {len(values)}"
            )

    def push(
        self,
        inputs: Sequence[float],
        outputs: Sequence[float],
        gain_reductions: Sequence[float],
    ) -> bool:
        """Add one sample frame; return True when the meters were updated."""
        self._check_length("input", inputs)
        self._check_length("output", outputs)
        self._check_length("gain reduction", gain_reductions)

        for state, sample_in, sample_out, reduction in zip(
            self._states, inputs, outputs, gain_reductions
        ):
            state.inputs.append(float(sample_in))
            state.outputs.append(float(sample_out))
            state.gain_reduction = float(reduction)

        if len(self._states[0].inputs) < self.buffer_size:
            return False

        for state in self._states:
            self._update(state)
        return True

    def _update(self, state: _ChannelState) -> None:
        ballistics = self._ballistics

        input_peak = _level_decibel(_magnitude(state.inputs))
        output_peak = _level_decibel(_magnitude(state.outputs))

        state.maximum_input = max(state.maximum_input, input_peak)
        state.maximum_output = max(state.maximum_output, output_peak)

        ballistics.peak(input_peak, state.input_peak)
        ballistics.peak(output_peak, state.output_peak)
        ballistics.gain_reduction_peak(state.gain_reduction, state.reduction_peak)

        input_rms = _level_decibel(_rms(state.inputs))
        output_rms = _level_decibel(_rms(state.outputs))
        state.average_input = ballistics.average(input_rms, state.average_input)
        state.average_output = ballistics.average(output_rms, state.average_output)

        state.inputs.clear()
        state.outputs.clear()

    def reading(self, channel: int) -> ChannelReading:
        """Return the current readout of ``channel``."""
        if not 0 <= channel < self.channels:
            raise IndexError(f"channel {channel} out of range")
        state = self._states[channel]
        crest = self.crest_factor
        return ChannelReading(
            peak_input=state.input_peak.level + crest,
            peak_output=state.output_peak.level + crest,
            peak_mark_input=state.input_peak.mark + crest,
            peak_mark_output=state.output_peak.mark + crest,
            maximum_input=state.maximum_input + crest,
            maximum_output=state.maximum_output + crest,
            average_input=state.average_input + crest,
            average_output=state.average_output + crest,
            gain_reduction=state.gain_reduction,
            gain_reduction_peak=state.reduction_peak.mark,
        )