# -*- coding: utf-8 -*-
"""
Provides the Pygame-based window interface: display, input and pacing.
"""

__all__ = ["KEYMAP", "InputState", "WindowPygame", "window_title"]

import os, sys
os.environ['SDL_VIDEO_ALLOW_SCREENSAVER'] = '1'

import numpy as np
import pygame as pg

from .base import Base
from .timing import FrameClock
from .variants import make_fractal
from .viewport import Intents

# Held keys mapped to intents, several keys per intent.
KEYMAP = {
    pg.K_LEFT: 'move_left',   pg.K_KP4: 'move_left',   pg.K_a: 'move_left',
    pg.K_RIGHT: 'move_right', pg.K_KP6: 'move_right',  pg.K_d: 'move_right',
    pg.K_UP: 'move_up',       pg.K_KP8: 'move_up',     pg.K_w: 'move_up',
    pg.K_DOWN: 'move_down',   pg.K_KP2: 'move_down',   pg.K_s: 'move_down',
    pg.K_KP_PLUS: 'zoom_in',  pg.K_e: 'zoom_in',       pg.K_PAGEUP: 'zoom_in',
    pg.K_KP_MINUS: 'zoom_out', pg.K_q: 'zoom_out',     pg.K_PAGEDOWN: 'zoom_out',
}

FRACTAL_KEYS = {
    pg.K_F1: 'mandelbrot',
    pg.K_F2: 'multibrot',
}


def window_title(fractal, viewport):
    return "{} {} | zoom={:.6g} x={:.6f} y={:.6f}".format(
        fractal.name(), fractal.parameter_description(),
        viewport.zoom, viewport.center_x, viewport.center_y)


class InputState(object):
    """
    Tracks held keys across polls and exposes a snapshot of intents.
    Reset and fractal selection are one-shot requests.
    """

    def __init__(self):
        self.held = dict.fromkeys(Intents._fields, False)
        self.reset = False
        self.select = None

    def handle(self, e):

        if e.type == pg.QUIT:
            self.held['quit'] = True
        elif e.type == pg.KEYDOWN:
            if e.key == pg.K_ESCAPE:
                self.held['quit'] = True
            elif e.key in (pg.K_r, pg.K_HOME):
                self.reset = True
            elif e.key in FRACTAL_KEYS:
                self.select = FRACTAL_KEYS[e.key]
            elif e.key in KEYMAP:
                self.held[KEYMAP[e.key]] = True
        elif e.type == pg.KEYUP:
            if e.key in KEYMAP:
                self.held[KEYMAP[e.key]] = False

    def poll_events(self):
        for e in pg.event.get():
            self.handle(e)

    def snapshot(self):
        return Intents(**self.held)

    def take_reset(self):
        reset, self.reset = self.reset, False
        return reset

    def take_select(self):
        select, self.select = self.select, None
        return select


class WindowPygame(Base):
    """
    Subclasses allocate self.pixels and implement display(), which renders
    the current viewport and fractal into it.
    """

    def __init__(self, opt):

        self.width = opt.width
        self.height = opt.height
        self.texture_width = opt.texture_width
        self.texture_height = opt.texture_height
        self.fps = opt.fps
        self.frame = 0

        # init/save home location
        self.home = opt.viewport()
        self.viewport = self.home
        self.fractal = make_fractal(opt.fractal)

        self.clock = FrameClock(self.fps)
        self.input = InputState()
        self.pixels = None


    def init(self):

        # There's no sound or anything like that. Thus initializing display only.
        pg.display.init()

        self.window = pg.display.set_mode((self.width, self.height), flags=pg.RESIZABLE)
        self.window.fill(pg.Color('#000000'))

        self.check_buffer(self.pixels)

        pg.display.set_caption(window_title(self.fractal, self.viewport))
        pg.display.flip()


    def print_info(self):

        print("[{:>5}] fractal      : {} {}".format(
            self.frame, self.fractal.name(), self.fractal.parameter_description()))
        print("[{:>5}] center x, y  : {:.16f}, {:.16f}".format(
            self.frame, self.viewport.center_x, self.viewport.center_y))
        print("[{:>5}] zoom         : {}".format(
            self.frame, str(self.viewport.zoom)))


    def run(self):

        self.print_info()

        while True:
            self.clock.start_frame()

            self.input.poll_events()
            intents = self.input.snapshot()
            if intents.quit:
                break

            self.__handle_requests()
            self.viewport = self.viewport.step(intents)

            self.display()
            title = window_title(self.fractal, self.viewport)
            self.fractal.step_parameter()
            self.update_window(title)

            self.frame += 1
            self.clock.end_frame()

        print("[{:>5}] dropped frames : {}".format(self.frame, self.clock.dropped))
        pg.quit()


    def display(self):
        raise NotImplementedError


    def update_window(self, title):

        buf = np.ravel(self.pixels)
        img = pg.image.frombuffer(buf, (self.texture_width, self.texture_height), 'RGBA')

        size = self.window.get_size()
        if size != (self.texture_width, self.texture_height):
            img = pg.transform.scale(img, size)

        self.window.blit(img, (0,0))
        pg.display.set_caption(title)
        pg.display.flip()


    def __handle_requests(self):

        if self.input.take_reset():
            self.viewport = self.home
            self.print_info()

        name = self.input.take_select()
        if name is not None and name != self.fractal.name().lower():
            self.fractal = make_fractal(name)
            self.print_info()
            sys.stdout.flush()
