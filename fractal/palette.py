# -*- coding: utf-8 -*-
"""
Colour interpolation and the 4-stop escape-time palette.

Each function is written once in plain Python and compiled with numba.
The compiled versions take and return UniTuple(u1,4) so the fill kernels
can write them straight into the frame buffer. lerp() and colour_for()
are the Python-facing wrappers returning Colour values.
"""

__all__ = ["BAD_T", "GOOD_T", "BEST_T", "lerp_rgba", "rescale", "get_color",
           "lerp", "colour_for"]

from numba import njit, uint8

from .base import BLACK, BLUE, GREEN, MAGENTA, RED, Colour

BAD_T = 0.25
GOOD_T = 0.75
BEST_T = 0.90

C_BAD = RED.as_uint8()
C_OK = GREEN.as_uint8()
C_GOOD = BLUE.as_uint8()
C_BEST = MAGENTA.as_uint8()
C_INSIDE = BLACK.as_uint8()


def _lerp_rgba(c1, c2, t):

    # Precise form, the result equals c2 when t == 1.
    s = 1.0 - t
    r = uint8(int(s * c1[0] + t * c2[0] + 0.5))
    g = uint8(int(s * c1[1] + t * c2[1] + 0.5))
    b = uint8(int(s * c1[2] + t * c2[2] + 0.5))
    a = uint8(int(s * c1[3] + t * c2[3] + 0.5))

    return (r,g,b,a)

lerp_rgba = \
    njit('UniTuple(u1,4)(UniTuple(u1,4), UniTuple(u1,4), f8)', nogil=True)(_lerp_rgba)


def _rescale(value, lo, hi):
    return (value - lo) / (hi - lo)

rescale = njit('f8(f8, f8, f8)', nogil=True)(_rescale)


def _get_color(max_n, n):

    if n > max_n:
        n = max_n

    # A zero bound scores as 0 rather than dividing by zero.
    score = 0.0 if max_n <= 0 else n / max_n

    if score <= BAD_T:
        return lerp_rgba(C_BAD, C_OK, rescale(score, 0.0, BAD_T))
    if score <= GOOD_T:
        return lerp_rgba(C_OK, C_GOOD, rescale(score, BAD_T, GOOD_T))
    if score < BEST_T:
        return lerp_rgba(C_GOOD, C_BEST, rescale(score, GOOD_T, BEST_T))

    # Did not escape (or close enough to the bound).
    return C_INSIDE

get_color = njit('UniTuple(u1,4)(i8, i8)', nogil=True)(_get_color)


def lerp(a, b, t):
    """
    Linear interpolation between two colours, channel by channel.
    t is expected in [0,1]; values outside extrapolate unguarded.
    """
    c = lerp_rgba(Colour(*a).as_uint8(), Colour(*b).as_uint8(), float(t))
    return Colour(*(int(v) for v in c))


def colour_for(max_n, n):
    """
    Map an iteration count n, clamped to max_n, to its palette colour.
    """
    c = get_color(int(max_n), int(n))
    return Colour(*(int(v) for v in c))
