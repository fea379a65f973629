# -*- coding: utf-8 -*-
"""
Frame pacing against a fixed target frame rate.
"""

__all__ = ["FrameClock"]

import sys, time


class FrameClock(object):

    def __init__(self, fps, clock=time.perf_counter, sleep=time.sleep):

        self.fps = fps
        self.target = 1.0 / fps
        self.clock = clock
        self.sleep = sleep
        self.dropped = 0
        self.start = None

    def start_frame(self):
        self.start = self.clock()
        return self.start

    def end_frame(self):
        """
        Sleep out the rest of the frame budget, or report an overrun.
        Returns the frame time in milliseconds, excluding the sleep.
        """
        elapsed = self.clock() - self.start
        milli_seconds = elapsed * 1000.0

        if elapsed < self.target:
            self.sleep(self.target - elapsed)
        elif elapsed > self.target:
            self.dropped += 1
            print("Dropped a frame! Frame time: {:.3f}ms".format(milli_seconds))
            sys.stdout.flush()

        return milli_seconds
