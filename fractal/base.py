# -*- coding: utf-8 -*-
"""
Provides the shared constants, the Colour type and the Base class.
"""

__all__ = ["MAX_ESCAPE_TIME", "ESCAPE_RADIUS_2", "PLANE_HALF_WIDTH",
           "Colour", "WHITE", "BLACK", "RED", "GREEN", "BLUE", "MAGENTA",
           "Base"]

from collections import namedtuple

import numpy as np

# Safety ceiling on the per-frame iteration bound.
MAX_ESCAPE_TIME = 512

# Escape when |Z|^2 exceeds 2^2.
ESCAPE_RADIUS_2 = 4.0

# Half-width of the plane region at zoom 1.0.
PLANE_HALF_WIDTH = 3.5


class Colour(namedtuple("Colour", "r g b a")):
    """
    RGBA colour with 8-bit channels. Immutable.
    """
    __slots__ = ()

    def __new__(cls, r, g, b, a=255):
        for name, value in zip(cls._fields, (r, g, b, a)):
            if not 0 <= value <= 255:
                raise ValueError(
                    "colour channel {} out of range [0,255]: {}".format(name, value))

        return super().__new__(cls, r, g, b, a)

    @classmethod
    def rgb(cls, r, g, b):
        return cls(r, g, b, 255)

    def as_uint8(self):
        """
        Returns the channels as a tuple of np.uint8, the form used by the kernels.
        """
        return (np.uint8(self.r), np.uint8(self.g), np.uint8(self.b), np.uint8(self.a))


WHITE   = Colour.rgb(255, 255, 255)
BLACK   = Colour.rgb(0, 0, 0)
RED     = Colour.rgb(255, 0, 0)
GREEN   = Colour.rgb(0, 255, 0)
BLUE    = Colour.rgb(0, 0, 255)
MAGENTA = Colour.rgb(255, 0, 255)


class Base(object):

    @staticmethod
    def divide_up(dividend, divisor):
        """
        Helper funtion to get the next up value for integer division.
        """
        return dividend // divisor + 1 if dividend % divisor else dividend // divisor


    @staticmethod
    def check_buffer(pixels):
        """
        Raise ValueError unless pixels is a (height, width, 4) uint8 array.
        """
        if not isinstance(pixels, np.ndarray):
            raise ValueError("frame buffer must be a numpy array")
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise ValueError(
                "frame buffer must have shape (height, width, 4), got {}".format(pixels.shape))
        if pixels.dtype != np.uint8:
            raise ValueError(
                "frame buffer must have dtype uint8, got {}".format(pixels.dtype))

        return pixels.shape[0], pixels.shape[1]
