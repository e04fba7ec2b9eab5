"""A meter bar: a container of meter segments updated with one call."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, List, Tuple

from squeezekit.meter_segment import INITIAL_LEVEL, MeterSegment

#: Default segment width in pixels (segment height for horizontal meters).
DEFAULT_SEGMENT_WIDTH = 10


class Orientation(IntEnum):
    """Orientation of a meter bar."""

    HORIZONTAL = 0
    HORIZONTAL_INVERTED = 1
    VERTICAL = 2
    VERTICAL_INVERTED = 3


@dataclass
class Bounds:
    """Position and size of a segment within the bar, in pixels."""

    x: int
    y: int
    width: int
    height: int


@dataclass
class _Slot:
    segment: MeterSegment
    bounds: Bounds
    spacing: int


class MeterBar:
    """Meter bar made of stacked meter segments.

    Segments are laid out as in a vertical meter and re-arranged when the
    orientation changes.  Changing the orientation is cheapest once all
    segments have been added.
    """

    def __init__(self) -> None:
        self.create()

    def create(self) -> None:
        """Start a new, empty meter bar; fill it with ``add_segment``."""
        self.normal_level = INITIAL_LEVEL
        self.discrete_level = INITIAL_LEVEL
        self.normal_level_peak = INITIAL_LEVEL
        self.discrete_level_peak = INITIAL_LEVEL

        self._bar_width = 0
        self._bar_height = 0
        self._segment_width = DEFAULT_SEGMENT_WIDTH
        self._slots: List[_Slot] = []

        self._orientation = Orientation.VERTICAL
        self._vertical = True
        self._inverted = False
        self.size: Tuple[int, int] = (0, 0)

    @property
    def segments(self) -> Tuple[MeterSegment, ...]:
        """Segments in the order they were added."""
        return tuple(slot.segment for slot in self._slots)

    @property
    def bounds(self) -> Tuple[Bounds, ...]:
        """Current bounds of each segment, in the order they were added."""
        return tuple(slot.bounds for slot in self._slots)

    @property
    def orientation(self) -> Orientation:
        """Current orientation of the bar."""
        return self._orientation

    @property
    def is_inverted(self) -> bool:
        """True if segments are laid out from the far end of the bar."""
        return self._inverted

    @property
    def segment_width(self) -> int:
        """Segment width (segment height for horizontal meters)."""
        return self._segment_width

    def add_segment(
        self,
        lower_threshold: float,
        threshold_range: float,
        is_topmost: bool,
        segment_height: int,
        spacing_before: int,
        hue: float,
        peak_marker_colour: Any,
    ) -> MeterSegment:
        """Append a segment to the bar and return it."""
        old_orientation = self._orientation
        self.set_orientation(Orientation.VERTICAL)

        segment = MeterSegment()
        segment.set_thresholds(lower_threshold, threshold_range, is_topmost)
        segment.set_colour(hue, peak_marker_colour)
        segment.set_levels(
            self.normal_level,
            self.discrete_level,
            self.normal_level_peak,
            self.discrete_level_peak,
        )

        # segment outlines overlap
        segment_height = int(segment_height) + 1
        spacing_before = int(spacing_before) - 1

        # no spacing before the first segment
        if self._slots:
            self._bar_height += spacing_before

        bounds = Bounds(0, self._bar_height, self._segment_width, segment_height)
        self._slots.append(_Slot(segment, bounds, spacing_before))
        self._bar_height += segment_height
        self._resize()

        self.set_orientation(old_orientation)
        return segment

    def set_orientation(self, orientation: Orientation) -> None:
        """Change the bar's orientation and re-arrange its segments."""
        orientation = Orientation(orientation)
        if orientation == self._orientation:
            return

        was_vertical = self._vertical
        was_inverted = self._inverted
        self._orientation = orientation

        if orientation == Orientation.VERTICAL:
            self._vertical, self._inverted = True, False
        elif orientation == Orientation.VERTICAL_INVERTED:
            self._vertical, self._inverted = True, True
        elif orientation == Orientation.HORIZONTAL:
            # segments would otherwise be drawn the wrong way round
            self._vertical, self._inverted = False, True
        else:
            self._vertical, self._inverted = False, False

        if self._vertical != was_vertical:
            for slot in self._slots:
                b = slot.bounds
                slot.bounds = Bounds(b.y, b.x, b.height, b.width)
            self._resize()

        if self._inverted != was_inverted:
            self._position_segments()

    def _position_segments(self) -> None:
        position = self._bar_height if self._inverted else 0
        for index, slot in enumerate(self._slots):
            bounds = slot.bounds
            length = bounds.height if self._vertical else bounds.width

            if index > 0:
                position += -slot.spacing if self._inverted else slot.spacing
            if self._inverted:
                position -= length

            if self._vertical:
                bounds.x, bounds.y = 0, position
            else:
                bounds.x, bounds.y = position, 0

            if not self._inverted:
                position += length

    def invert(self, inverted: bool) -> None:
        """Invert the bar (True) or restore its normal orientation."""
        if self._vertical:
            self.set_orientation(
                Orientation.VERTICAL_INVERTED if inverted else Orientation.VERTICAL
            )
        else:
            self.set_orientation(
                Orientation.HORIZONTAL_INVERTED if inverted else Orientation.HORIZONTAL
            )

    def set_segment_width(self, width: int) -> None:
        """Set the segment width (segment height for horizontal meters)."""
        self._segment_width = int(width)
        self._bar_width = self._segment_width
        for slot in self._slots:
            if self._vertical:
                slot.bounds.width = self._segment_width
            else:
                slot.bounds.height = self._segment_width
        self._resize()

    def _resize(self) -> None:
        if self._vertical:
            self.size = (self._bar_width, self._bar_height)
        else:
            self.size = (self._bar_height, self._bar_width)

    def set_normal_levels(self, normal_level: float, normal_level_peak: float) -> None:
        """Set normal (average) levels only, disregarding discrete levels."""
        if (normal_level, normal_level_peak) == (
            self.normal_level,
            self.normal_level_peak,
        ):
            return
        self.normal_level = normal_level
        self.normal_level_peak = normal_level_peak
        for slot in self._slots:
            slot.segment.set_normal_levels(normal_level, normal_level_peak)

    def set_discrete_levels(
        self, discrete_level: float, discrete_level_peak: float
    ) -> None:
        """Set discrete (peak) levels only, disregarding normal levels."""
        if (discrete_level, discrete_level_peak) == (
            self.discrete_level,
            self.discrete_level_peak,
        ):
            return
        self.discrete_level = discrete_level
        self.discrete_level_peak = discrete_level_peak
        for slot in self._slots:
            slot.segment.set_discrete_levels(discrete_level, discrete_level_peak)

    def set_levels(
        self,
        normal_level: float,
        discrete_level: float,
        normal_level_peak: float,
        discrete_level_peak: float,
    ) -> None:
        """Set normal and discrete levels of all segments."""
        new = (normal_level, discrete_level, normal_level_peak, discrete_level_peak)
        old = (
            self.normal_level,
            self.discrete_level,
            self.normal_level_peak,
            self.discrete_level_peak,
        )
        if new == old:
            return
        (
            self.normal_level,
            self.discrete_level,
            self.normal_level_peak,
            self.discrete_level_peak,
        ) = new
        for slot in self._slots:
            slot.segment.set_levels(*new)