import math

import pytest

from squeezekit.ballistics import (
    MeterBallistics,
    PeakState,
    decibel,
    log_meter_ballistics,
)


def test_decibel_unity_is_zero():
    assert decibel(1.0) == pytest.approx(0.0)


def test_decibel_ten_is_twenty():
    assert decibel(10.0) == pytest.approx(20.0)


def test_decibel_of_zero_is_minus_infinity():
    assert decibel(0.0) == -math.inf


def test_decibel_is_monotonic():
    assert decibel(0.1) < decibel(0.5) < decibel(2.0)


def test_log_ballistics_reaches_99_percent_after_inertia():
    assert log_meter_ballistics(0.3, 0.3, 100.0, 0.0) == pytest.approx(99.0)


def test_log_ballistics_equal_level_unchanged():
    assert log_meter_ballistics(0.3, 0.05, -12.5, -12.5) == -12.5


def test_log_ballistics_moves_towards_level_without_overshoot():
    readout = log_meter_ballistics(0.3, 0.05, -10.0, -40.0)
    assert -40.0 < readout < -10.0
    readout = log_meter_ballistics(0.3, 0.05, -40.0, -10.0)
    assert -40.0 < readout < -10.0


def test_log_ballistics_rejects_zero_inertia():
    with pytest.raises(ValueError):
        log_meter_ballistics(0.0, 0.05, 1.0, 0.0)


def test_buffer_length_must_be_positive():
    with pytest.raises(ValueError):
        MeterBallistics(0.0)


def test_average_matches_log_ballistics():
    meter = MeterBallistics(0.05)
    assert meter.average(-6.0, -30.0) == log_meter_ballistics(0.3, 0.05, -6.0, -30.0)


def test_peak_rises_immediately():
    meter = MeterBallistics()
    state = meter.peak(-12.0, PeakState(level=-90.0, mark=-90.0, hold_time=3.0))
    assert state.level == -12.0
    assert state.mark == -12.0
    assert state.hold_time == 0.0


def test_peak_clamped_at_zero():
    meter = MeterBallistics()
    state = meter.peak(4.0, PeakState(level=-20.0, mark=-20.0, hold_time=1.0))
    assert state.level == 0.0
    assert state.mark == 0.0
    assert state.hold_time == 0.0


def test_peak_level_falls_26_db_in_three_seconds():
    meter = MeterBallistics(0.05)
    state = PeakState(level=-10.0, mark=-10.0)
    for _ in range(60):
        meter.peak(-100.0, state)
    assert state.level == pytest.approx(-10.0 - 26.0)


def test_peak_level_never_falls_below_current():
    meter = MeterBallistics(0.05)
    state = PeakState(level=-10.0, mark=-10.0)
    for _ in range(100):
        meter.peak(-15.0, state)
    assert state.level == -15.0


def test_peak_mark_is_held_then_falls():
    meter = MeterBallistics(0.05)
    state = PeakState(level=-10.0, mark=-10.0)
    for _ in range(199):
        meter.peak(-100.0, state)
    assert state.mark == -10.0
    assert state.hold_time > 9.0
    for _ in range(5):
        meter.peak(-100.0, state)
    assert state.mark < -10.0
    assert state.mark >= -100.0


def test_gain_reduction_peak_rises_and_resets_hold():
    meter = MeterBallistics()
    state = PeakState(level=0.0, mark=2.0, hold_time=4.0)
    meter.gain_reduction_peak(6.0, state)
    assert state.mark == 6.0
    assert state.hold_time == 0.0


def test_gain_reduction_peak_holds_and_accumulates_time():
    meter = MeterBallistics(0.05)
    state = PeakState(level=0.0, mark=6.0)
    meter.gain_reduction_peak(1.0, state)
    assert state.mark == 6.0
    assert state.hold_time == pytest.approx(0.05)


def test_gain_reduction_peak_falls_after_hold_but_not_below_current():
    meter = MeterBallistics(0.05)
    state = PeakState(level=0.0, mark=6.0, hold_time=10.0)
    meter.gain_reduction_peak(1.0, state)
    assert 1.0 <= state.mark < 6.0
    for _ in range(100):
        meter.gain_reduction_peak(1.0, state)
    assert state.mark == 1.0