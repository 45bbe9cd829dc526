import pytest

from minycraft.timing import FrameClock


def test_initial_state():
    clock = FrameClock()
    assert clock.delta_time == 0.0
    assert clock.elapsed_time == 0.0


def test_first_tick_has_zero_delta():
    clock = FrameClock()
    assert clock.tick(12.0) == 0.0
    assert clock.last == 12.0


def test_delta_between_ticks():
    clock = FrameClock()
    clock.tick(2.0)
    assert clock.tick(2.25) == 0.25
    assert clock.delta_time == 0.25


def test_elapsed_is_sum_of_deltas():
    clock = FrameClock()
    times = [1.0, 1.5, 1.75, 3.0, 3.5]
    deltas = [clock.tick(t) for t in times]
    assert clock.elapsed_time == pytest.approx(sum(deltas))
    assert clock.elapsed_time == pytest.approx(times[-1] - times[0])


def test_start_time_given():
    clock = FrameClock(last=5.0)
    assert clock.tick(6.0) == pytest.approx(6.0 - 5.0)


def test_backwards_time_raises():
    clock = FrameClock()
    clock.tick(10.0)
    with pytest.raises(ValueError):
        clock.tick(9.0)