import pytest

from engine3d.timeutil import Clock, get_delta_time, get_time


def _source(*values):
    return iter(values).__next__


def test_time_starts_at_zero_and_counts_from_first_call():
    clock = Clock(_source(5_000_000_000, 6_500_000_000))
    assert clock.time() == 0.0
    assert clock.time() == pytest.approx(1.5)


def test_delta_time_first_call_is_zero():
    clock = Clock(_source(42))
    assert clock.delta_time() == 0.0


def test_delta_time_measures_between_calls():
    clock = Clock(_source(0, 250_000_000, 1_250_000_000))
    assert clock.delta_time() == 0.0
    assert clock.delta_time() == pytest.approx(0.25)
    assert clock.delta_time() == pytest.approx(1.0)


def test_resolution_is_whole_milliseconds():
    clock = Clock(_source(0, 1_999_999))
    clock.delta_time()
    assert clock.delta_time() == pytest.approx(0.001)


def test_time_and_delta_are_independent():
    clock = Clock(_source(0, 0, 3_000_000_000, 3_000_000_000))
    clock.time()
    clock.delta_time()
    assert clock.time() == pytest.approx(3.0)
    assert clock.delta_time() == pytest.approx(3.0)


def test_module_time_is_monotonic():
    first = get_time()
    second = get_time()
    assert 0.0 <= first <= second


def test_module_delta_is_non_negative():
    get_delta_time()
    assert get_delta_time() >= 0.0