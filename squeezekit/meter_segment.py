"""A single meter segment with a peak marker that reacts to level changes."""

from __future__ import annotations

from typing import Any

#: Lowest level of a 24-bit signal in decibels.
INITIAL_LEVEL = -144.0

_LIT_SEGMENT = 0.97
_LIT_OUTLINE = 0.90
_DARK_SEGMENT = 0.25
_DARK_OUTLINE = 0.30


class MeterSegment:
    """Meter segment whose brightness and peak marker follow two levels.

    The segment is fully lit when the normal level reaches the upper
    threshold or the discrete level lies between the thresholds (lower
    threshold included).  It is dark when the normal level lies below
    the lower threshold; otherwise its brightness follows the normal
    level.  The peak marker is lit when any peak lies between the
    thresholds; a topmost segment has no upper threshold for peaks.
    """

    def __init__(
        self,
        lower_threshold: float = INITIAL_LEVEL,
        threshold_range: float = 1.0,
        is_topmost: bool = False,
    ) -> None:
        self.set_thresholds(lower_threshold, threshold_range, is_topmost)
        self.segment_brightness = 0.0
        self.outline_brightness = 0.0
        self.hue = 0.0
        self.peak_marker_colour: Any = None
        self.set_levels(INITIAL_LEVEL, INITIAL_LEVEL, INITIAL_LEVEL, INITIAL_LEVEL)

    def set_thresholds(
        self, lower_threshold: float, threshold_range: float, is_topmost: bool
    ) -> float:
        """Set the thresholds and return the new upper threshold."""
        self.lower_threshold = float(lower_threshold)
        self.threshold_range = float(threshold_range)
        self.upper_threshold = self.lower_threshold + self.threshold_range
        self.peak_marker_lit = False
        self.is_topmost = bool(is_topmost)
        return self.upper_threshold

    def set_colour(self, hue: float, peak_marker_colour: Any) -> None:
        """Set the segment's hue (0.0 to 1.0) and the peak marker colour."""
        self.hue = float(hue)
        self.peak_marker_colour = peak_marker_colour

    def set_normal_levels(self, normal_level: float, normal_level_peak: float) -> bool:
        """Set normal levels only, disregarding discrete levels."""
        return self.set_levels(normal_level, INITIAL_LEVEL, normal_level_peak, INITIAL_LEVEL)

    def set_discrete_levels(
        self, discrete_level: float, discrete_level_peak: float
    ) -> bool:
        """Set discrete levels only, disregarding normal levels."""
        return self.set_levels(INITIAL_LEVEL, discrete_level, INITIAL_LEVEL, discrete_level_peak)

    def _within(self, level: float) -> bool:
        return self.lower_threshold <= level < self.upper_threshold

    def _peak_lit(self, level: float) -> bool:
        if self.is_topmost:
            return level >= self.lower_threshold
        return self._within(level)

    def set_levels(
        self,
        normal_level: float,
        discrete_level: float,
        normal_level_peak: float,
        discrete_level_peak: float,
    ) -> bool:
        """Update the segment; return True if its appearance changed."""
        old_brightness = self.segment_brightness
        old_marker = self.peak_marker_lit

        if normal_level >= self.upper_threshold or self._within(discrete_level):
            self.segment_brightness = _LIT_SEGMENT
            self.outline_brightness = _LIT_OUTLINE
        elif normal_level < self.lower_threshold:
            self.segment_brightness = _DARK_SEGMENT
            self.outline_brightness = _DARK_OUTLINE
        else:
            fraction = (normal_level - self.lower_threshold) / self.threshold_range
            self.segment_brightness = fraction * 0.72 + _DARK_SEGMENT
            self.outline_brightness = fraction * 0.60 + _DARK_OUTLINE

        self.peak_marker_lit = self._peak_lit(normal_level_peak) or self._peak_lit(
            discrete_level_peak
        )

        return (
            self.segment_brightness != old_brightness
            or self.peak_marker_lit != old_marker
        )