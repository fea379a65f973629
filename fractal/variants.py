# -*- coding: utf-8 -*-
"""
Escape-time functions and the fractal variants built on them.

The set of variants is closed: each one carries a kind tag which the
renderers use to pick the matching fill kernel once per frame.
"""

__all__ = ["MANDELBROT", "MULTIBROT", "mandel_escape", "multi_escape",
           "Fractal", "Mandelbrot", "Multibrot", "make_fractal"]

import math

from numba import njit

from .base import ESCAPE_RADIUS_2, MAX_ESCAPE_TIME

MANDELBROT = 0
MULTIBROT = 1


def _mandel_escape(max_iters, creal, cimag):

    zreal = 0.0
    zimag = 0.0

    # Compute z = z^2 + c.
    for n in range(max_iters):
        zreal_sqr = zreal * zreal
        zimag_sqr = zimag * zimag
        zimag = 2.0 * zreal * zimag + cimag
        zreal = zreal_sqr - zimag_sqr + creal

        if zreal * zreal + zimag * zimag > ESCAPE_RADIUS_2:
            return n

    return max_iters

mandel_escape = njit('i8(i8, f8, f8)', nogil=True)(_mandel_escape)


def _multi_escape(max_iters, d, creal, cimag):

    zreal = 0.0
    zimag = 0.0

    # Compute z = z^d + c, taking the power in polar form.
    for n in range(max_iters):
        norm = zreal * zreal + zimag * zimag
        if norm > 0.0:
            r = math.pow(norm, 0.5 * d)
            theta = d * math.atan2(zimag, zreal)
            zreal = r * math.cos(theta)
            zimag = r * math.sin(theta)

        zreal += creal
        zimag += cimag

        if zreal * zreal + zimag * zimag > ESCAPE_RADIUS_2:
            return n

    return max_iters

multi_escape = njit('i8(i8, f8, f8, f8)', nogil=True)(_multi_escape)


class Fractal(object):
    """
    Common interface of the fractal variants.

    Subclasses own one mutable parameter, advanced by step_parameter()
    between frames and only read while a frame is rendered.
    """

    kind = None
    label = None

    def escape_time(self, x0, y0):
        raise NotImplementedError

    def max_iterations(self):
        n = self._max_escape_time()
        assert 0 <= n < MAX_ESCAPE_TIME, "iteration bound out of range: {}".format(n)
        return n

    def parameter(self):
        """
        The scalar handed to the fill kernels alongside max_iterations().
        """
        return 0.0

    def step_parameter(self):
        raise NotImplementedError

    def name(self):
        return self.label

    def parameter_description(self):
        raise NotImplementedError

    def _max_escape_time(self):
        raise NotImplementedError

    def __repr__(self):
        return "{}({})".format(type(self).__name__, self.parameter_description())


class Mandelbrot(Fractal):
    """
    z = z^2 + c, sweeping the iteration bound 0, 1, ..., 511, 0, ...
    """

    kind = MANDELBROT
    label = "Mandelbrot"

    def __init__(self, max_iters=0):
        self.current_max_iters = int(max_iters) % MAX_ESCAPE_TIME

    def escape_time(self, x0, y0):
        return int(mandel_escape(self.max_iterations(), float(x0), float(y0)))

    def step_parameter(self):
        self.current_max_iters += 1
        if self.current_max_iters >= MAX_ESCAPE_TIME:
            self.current_max_iters = 0

    def parameter_description(self):
        return "max_iterations={}".format(self.current_max_iters)

    def _max_escape_time(self):
        return self.current_max_iters


class Multibrot(Fractal):
    """
    z = z^d + c with a fixed bound of 64, sweeping d from 0.5 to 5.0.

    d is kept as an integer step index so repeated stepping does not
    accumulate rounding error.
    """

    kind = MULTIBROT
    label = "Multibrot"

    MAX_ITERS = 64
    MIN_D = 0.5
    MAX_D = 5.0
    STEP_D = 0.1

    def __init__(self, d=MIN_D):
        self.num_steps = int(round((self.MAX_D - self.MIN_D) / self.STEP_D)) + 1
        index = int(round((d - self.MIN_D) / self.STEP_D))
        self.index = max(0, min(self.num_steps - 1, index))

    @property
    def d(self):
        return self.MIN_D + self.index * self.STEP_D

    def escape_time(self, x0, y0):
        return int(multi_escape(self.max_iterations(), self.d, float(x0), float(y0)))

    def parameter(self):
        return self.d

    def step_parameter(self):
        self.index += 1
        if self.index >= self.num_steps:
            self.index = 0

    def parameter_description(self):
        return "d={:.1f}".format(self.d)

    def _max_escape_time(self):
        return self.MAX_ITERS


FRACTALS = {
    "mandelbrot": Mandelbrot,
    "multibrot": Multibrot,
}


def make_fractal(name):
    """
    Construct a fractal variant from its configured name.
    """
    try:
        cls = FRACTALS[name.strip().lower()]
    except KeyError:
        raise ValueError("unknown fractal '{}', expected one of: {}".format(
            name, ", ".join(sorted(FRACTALS)))) from None

    return cls()
