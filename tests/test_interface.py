# -*- coding: utf-8 -*-

import os
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')

import pygame as pg

from fractal.interface import InputState, window_title
from fractal.variants import Mandelbrot, Multibrot
from fractal.viewport import Intents, Viewport


def key(kind, k):
    return pg.event.Event(kind, key=k)


def test_held_keys_map_to_intents():
    state = InputState()
    assert state.snapshot() == Intents()

    state.handle(key(pg.KEYDOWN, pg.K_LEFT))
    state.handle(key(pg.KEYDOWN, pg.K_e))
    assert state.snapshot() == Intents(move_left=True, zoom_in=True)

    # Still held on the next poll until released.
    assert state.snapshot().move_left

    state.handle(key(pg.KEYUP, pg.K_LEFT))
    assert state.snapshot() == Intents(zoom_in=True)


def test_alternate_keys():
    state = InputState()
    for k in (pg.K_KP6, pg.K_w, pg.K_PAGEDOWN):
        state.handle(key(pg.KEYDOWN, k))
    assert state.snapshot() == Intents(move_right=True, move_up=True, zoom_out=True)


def test_quit():
    state = InputState()
    state.handle(key(pg.KEYDOWN, pg.K_ESCAPE))
    assert state.snapshot().quit

    state = InputState()
    state.handle(pg.event.Event(pg.QUIT))
    assert state.snapshot().quit


def test_one_shot_requests():
    state = InputState()
    state.handle(key(pg.KEYDOWN, pg.K_HOME))
    state.handle(key(pg.KEYDOWN, pg.K_F2))

    assert state.take_reset() is True
    assert state.take_reset() is False
    assert state.take_select() == 'multibrot'
    assert state.take_select() is None


def test_window_title():
    title = window_title(Mandelbrot(37), Viewport(0.5, -0.75, 0.1))
    assert title.startswith("Mandelbrot max_iterations=37 |")
    assert "zoom=0.5" in title
    assert "x=-0.750000" in title

    assert window_title(Multibrot(1.3), Viewport()).startswith("Multibrot d=1.3")
