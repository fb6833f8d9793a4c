import time

from asaogea.time_delta import TimeDelta


def _clock(values):
    it = iter(values)
    return lambda: next(it)


def test_initial_delta_is_zero():
    assert TimeDelta().delta_time() == 0.0


def test_delta_uses_clock():
    td = TimeDelta(clock=_clock([1.0, 3.5, 4.0]))
    td.next()
    assert td.delta_time() == 2.5
    td.next()
    assert td.delta_time() == 0.5


def test_delta_stable_between_calls():
    td = TimeDelta(clock=_clock([0.0, 2.0]))
    td.next()
    first = td.delta_time()
    assert td.delta_time() == first


def test_real_clock_measures_sleep():
    td = TimeDelta()
    time.sleep(0.02)
    td.next()
    assert td.delta_time() >= 0.01
    td.next()
    assert 0.0 <= td.delta_time() < 0.01 + td.delta_time() + 1