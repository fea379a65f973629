# -*- coding: utf-8 -*-
"""
Frame fill kernels. Loop using Numba's parfor loop.

The kernel sources live in render_for; here they are compiled with
parallel=True, spreading rows over numba's threads. Both versions
produce identical pixels.
"""

__all__ = ["FILL_PARFOR", "render", "set_num_threads"]

import numba as nb

from numba import njit

from .base import Base
from .render_for import FILL_SIG, _mandelbrot_fill, _multibrot_fill
from .variants import MANDELBROT, MULTIBROT

FILL_PARFOR = {
    MANDELBROT: njit(FILL_SIG, nogil=True, parallel=True)(_mandelbrot_fill),
    MULTIBROT: njit(FILL_SIG, nogil=True, parallel=True)(_multibrot_fill),
}


def set_num_threads(num_threads):
    """
    Silently limit the number of threads to what numba was started with.
    """
    num_threads = max(1, min(nb.config.NUMBA_NUM_THREADS, int(num_threads)))
    nb.set_num_threads(num_threads)

    return num_threads


def render(pixels, viewport, fractal):
    """
    Fill every pixel of the (height, width, 4) buffer for the given viewport.

    The fractal's bound and parameter are read once, so the whole frame
    uses one consistent state.
    """
    height, width = Base.check_buffer(pixels)
    if height == 0 or width == 0:
        return

    fill = FILL_PARFOR[fractal.kind]
    fill(
        pixels, (0, height), float(viewport.zoom), float(viewport.center_x),
        float(viewport.center_y), fractal.max_iterations(),
        float(fractal.parameter()) )
