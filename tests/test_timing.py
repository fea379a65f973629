# -*- coding: utf-8 -*-

import pytest

from fractal.timing import FrameClock


class FakeTime(object):

    def __init__(self, readings):
        self.readings = list(readings)
        self.slept = []

    def clock(self):
        return self.readings.pop(0)

    def sleep(self, seconds):
        self.slept.append(seconds)


def test_short_frame_sleeps_the_remainder(capsys):
    t = FakeTime([10.0, 10.025])
    clock = FrameClock(20, clock=t.clock, sleep=t.sleep)

    clock.start_frame()
    assert clock.end_frame() == pytest.approx(25.0)
    assert t.slept == [pytest.approx(0.025)]
    assert clock.dropped == 0
    assert capsys.readouterr().out == ""


def test_long_frame_is_reported(capsys):
    t = FakeTime([0.0, 0.1])
    clock = FrameClock(15, clock=t.clock, sleep=t.sleep)

    clock.start_frame()
    clock.end_frame()
    assert t.slept == []
    assert clock.dropped == 1
    assert "Dropped a frame! Frame time: 100.000ms" in capsys.readouterr().out
