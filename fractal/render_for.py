# -*- coding: utf-8 -*-
"""
Frame fill kernels. Loop using a serial for loop per row range.

Used by the worker pool in render_queue. This module compiles nothing
with parallel=True, so processes may be forked after importing it.
render_parfor compiles the same sources again as parallel kernels.
"""

__all__ = ["FILL_SIG", "FILL_ROWS"]

from numba import njit, prange

from .palette import get_color
from .variants import MANDELBROT, MULTIBROT, mandel_escape, multi_escape
from .viewport import to_plane

FILL_SIG = 'void(u1[:,:,:], UniTuple(i8,2), f8, f8, f8, i8, f8)'


def _mandelbrot_fill(pixels, seq, zoom, center_x, center_y, max_iters, param):

    height, width = pixels.shape[:2]

    for y in prange(seq[0], seq[1]):
        cimag = to_plane(y, height, zoom, center_y)

        for x in range(width):
            creal = to_plane(x, width, zoom, center_x)
            n = mandel_escape(max_iters, creal, cimag)
            pixels[y,x] = get_color(max_iters, n)


def _multibrot_fill(pixels, seq, zoom, center_x, center_y, max_iters, d):

    height, width = pixels.shape[:2]

    for y in prange(seq[0], seq[1]):
        cimag = to_plane(y, height, zoom, center_y)

        for x in range(width):
            creal = to_plane(x, width, zoom, center_x)
            n = multi_escape(max_iters, d, creal, cimag)
            pixels[y,x] = get_color(max_iters, n)


# prange runs as a plain range without parallel=True.
FILL_ROWS = {
    MANDELBROT: njit(FILL_SIG, nogil=True)(_mandelbrot_fill),
    MULTIBROT: njit(FILL_SIG, nogil=True)(_multibrot_fill),
}
