#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Explore the Mandelbrot and Multibrot sets on the CPU using Numba's parfor loop.
"""

import numpy as np

from fractal.option import Option
from fractal.interface import WindowPygame
from fractal.render_parfor import render, set_num_threads

class App(WindowPygame):

    def __init__(self, opt):
        super().__init__(opt)

        # Silently limit the number of threads to numba's pool size.
        self.num_threads = set_num_threads(opt.num_threads)
        print("[CPU] number of threads {}".format(self.num_threads))

        # Construct the frame buffer, one RGBA value per pixel.
        h, w = self.texture_height, self.texture_width
        self.pixels = np.zeros((h, w, 4), dtype=np.uint8)

        # Instantiate the Window interface.
        super().init()

    def display(self):

        render(self.pixels, self.viewport, self.fractal)

    def exit(self):

        del self.pixels


if __name__ == '__main__':

    mandel = App(Option())
    try:
        mandel.run()
        mandel.exit()
    except KeyboardInterrupt:
        mandel.exit()
