from dataclasses import astuple

import pytest

from squeezekit.meter_bar import Bounds, MeterBar, Orientation
from squeezekit.meter_segment import INITIAL_LEVEL


def _bar(count=4, height=8, spacing=3, width=None):
    bar = MeterBar()
    for index in range(count):
        bar.add_segment(
            -40.0 + 10.0 * index,
            10.0,
            index == count - 1,
            height,
            spacing,
            0.3,
            "red",
        )
    if width is not None:
        bar.set_segment_width(width)
    return bar


def _snapshot(bar):
    return [astuple(b) for b in bar.bounds]


def test_create_defaults():
    bar = MeterBar()
    assert bar.orientation == Orientation.VERTICAL
    assert bar.is_inverted is False
    assert bar.segment_width == 10
    assert bar.size == (0, 0)
    assert bar.segments == ()


def test_create_clears_segments():
    bar = _bar()
    bar.create()
    assert bar.segments == ()
    assert bar.size == (0, 0)


def test_vertical_layout_is_contiguous_and_ordered():
    bar = _bar(count=3, height=8, spacing=3)
    bounds = bar.bounds
    assert bounds[0].y == 0
    for previous, current in zip(bounds, bounds[1:]):
        assert current.y > previous.y + previous.height - 1
    last = bounds[-1]
    assert bar.size[1] == last.y + last.height


def test_new_segment_takes_current_levels():
    bar = MeterBar()
    bar.set_levels(0.0, INITIAL_LEVEL, 0.0, INITIAL_LEVEL)
    segment = bar.add_segment(-10.0, 5.0, False, 8, 2, 0.5, "red")
    assert segment.segment_brightness == 0.97


def test_segment_width_applies_to_all_segments():
    bar = _bar(width=20)
    assert all(b.width == 20 for b in bar.bounds)
    assert bar.size[0] == 20
    assert bar.segment_width == 20


def test_horizontal_swaps_size_and_bounds():
    bar = _bar(width=12)
    vertical_size = bar.size
    vertical = _snapshot(bar)
    bar.set_orientation(Orientation.HORIZONTAL_INVERTED)
    assert bar.size == (vertical_size[1], vertical_size[0])
    assert [(b.width, b.height) for b in bar.bounds] == [
        (h, w) for (_, _, w, h) in vertical
    ]


def test_orientation_round_trip_restores_bounds():
    bar = _bar(width=12)
    original = _snapshot(bar)
    for orientation in Orientation:
        bar.set_orientation(orientation)
        assert bar.orientation == orientation
    bar.set_orientation(Orientation.VERTICAL)
    assert _snapshot(bar) == original


def test_inverted_vertical_starts_at_bottom():
    bar = _bar(width=12)
    bar.invert(True)
    assert bar.orientation == Orientation.VERTICAL_INVERTED
    assert bar.is_inverted is True
    first = bar.bounds[0]
    assert first.y + first.height == bar.size[1]
    ys = [b.y for b in bar.bounds]
    assert ys == sorted(ys, reverse=True)
    assert bar.bounds[-1].y == 0


def test_invert_twice_restores_layout():
    bar = _bar(width=12)
    original = _snapshot(bar)
    bar.invert(True)
    bar.invert(False)
    assert _snapshot(bar) == original
    assert bar.orientation == Orientation.VERTICAL


def test_horizontal_orientation_is_drawn_inverted():
    bar = _bar(width=12)
    bar.set_orientation(Orientation.HORIZONTAL)
    assert bar.is_inverted is True
    first = bar.bounds[0]
    assert first.x + first.width == bar.size[0]
    bar.invert(True)
    assert bar.orientation == Orientation.HORIZONTAL_INVERTED
    assert bar.is_inverted is False
    assert bar.bounds[0].x == 0


def test_adding_segment_keeps_orientation():
    bar = _bar(width=12)
    bar.set_orientation(Orientation.HORIZONTAL)
    bar.add_segment(0.0, 10.0, True, 8, 3, 0.1, "red")
    assert bar.orientation == Orientation.HORIZONTAL
    assert len(bar.segments) == 5
    assert bar.size[1] == 12


def test_set_levels_propagates_to_segments():
    bar = _bar()
    bar.set_levels(100.0, INITIAL_LEVEL, 100.0, INITIAL_LEVEL)
    assert all(s.segment_brightness == 0.97 for s in bar.segments)
    assert bar.segments[-1].peak_marker_lit is True
    assert not any(s.peak_marker_lit for s in bar.segments[:-1])


def test_set_normal_levels_dark_below_range():
    bar = _bar()
    bar.set_normal_levels(100.0, 100.0)
    bar.set_normal_levels(-100.0, -100.0)
    assert all(s.segment_brightness == 0.25 for s in bar.segments)
    assert bar.normal_level == -100.0


def test_set_discrete_levels_lights_matching_segment():
    bar = _bar()
    bar.set_discrete_levels(-35.0, -35.0)
    segments = bar.segments
    assert segments[0].segment_brightness == 0.97
    assert segments[0].peak_marker_lit is True
    assert all(s.segment_brightness == 0.25 for s in segments[1:])


def test_invalid_orientation_raises():
    bar = MeterBar()
    with pytest.raises(ValueError):
        bar.set_orientation(99)


def test_bounds_is_mutable_record():
    bounds = Bounds(1, 2, 3, 4)
    bounds.x = 5
    assert astuple(bounds) == (5, 2, 3, 4)