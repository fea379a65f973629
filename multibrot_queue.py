#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Explore the Mandelbrot and Multibrot sets on the CPU using queues for IPC.

Workers are threads or forked processes, see fractal/parallel.py.
Either way, the frame buffer lives in shared memory.
"""

from fractal.option import Option
from fractal.interface import WindowPygame
from fractal.parallel import USE_FORK, shared_buffer
from fractal.render_queue import RowRenderer

class App(WindowPygame):

    def __init__(self, opt):
        super().__init__(opt)

        # Construct shared-memory objects.
        h, w = self.texture_height, self.texture_width
        self.pixels = shared_buffer(h, w)

        # Spawn workers.
        self.renderer = RowRenderer(self.pixels, min(opt.num_threads, h))
        print("[CPU] number of {} {}".format(
            "processes" if USE_FORK else "threads", self.renderer.num_threads))

        # Instantiate the Window interface.
        super().init()

    def display(self):

        self.renderer.render(self.viewport, self.fractal)

    def exit(self):

        self.renderer.exit()
        del self.pixels


if __name__ == '__main__':

    mandel = App(Option())
    try:
        mandel.run()
        mandel.exit()
    except KeyboardInterrupt:
        mandel.exit()
