# -*- coding: utf-8 -*-
"""
Mapping from pixel space to the complex plane, and the viewport state.
"""

from __future__ import annotations

__all__ = ["PAN_STEP", "ZOOM_STEP", "Intents", "Viewport", "to_plane"]

from dataclasses import dataclass, replace
from typing import NamedTuple

from numba import njit

from .base import PLANE_HALF_WIDTH

PAN_STEP = 0.1
ZOOM_STEP = 1.25


def _to_plane(p, extent, zoom, center):

    # Pixel 0 maps to center - 3.5*zoom, pixel extent to center + 3.5*zoom.
    return center + zoom * PLANE_HALF_WIDTH * (2.0 * p / extent - 1.0)

to_plane = njit('f8(i8, i8, f8, f8)', nogil=True)(_to_plane)


class Intents(NamedTuple):
    """Snapshot of the user's held input intents for one tick."""

    move_left: bool = False
    move_right: bool = False
    move_up: bool = False
    move_down: bool = False
    zoom_in: bool = False
    zoom_out: bool = False
    quit: bool = False


@dataclass(frozen=True)
class Viewport:
    """Square region of the complex plane of half-width 3.5 * zoom."""

    zoom: float = 1.0
    center_x: float = 0.0
    center_y: float = 0.0

    def step(self, intents: Intents) -> Viewport:
        """Apply one tick of pan and zoom intents, returning the new viewport."""

        offset = PAN_STEP * self.zoom
        center_x, center_y, zoom = self.center_x, self.center_y, self.zoom

        if intents.move_left:
            center_x -= offset
        if intents.move_right:
            center_x += offset

        # Row 0 of the buffer is the top of the window.
        if intents.move_up:
            center_y -= offset
        if intents.move_down:
            center_y += offset

        if intents.zoom_in:
            zoom /= ZOOM_STEP
        if intents.zoom_out:
            zoom *= ZOOM_STEP

        return replace(self, zoom=zoom, center_x=center_x, center_y=center_y)

    def bounds(self) -> tuple[float, float, float, float]:
        half = PLANE_HALF_WIDTH * self.zoom
        return (self.center_x - half, self.center_x + half,
                self.center_y - half, self.center_y + half)
