# -*- coding: utf-8 -*-

import pytest

from fractal.viewport import Intents, Viewport, to_plane


@pytest.mark.parametrize("width", [1, 7, 640, 1920])
def test_to_plane_edges(width):
    assert to_plane(0, width, 1.0, 0.0) == -3.5
    assert to_plane(width, width, 1.0, 0.0) == 3.5


def test_to_plane_zoom_and_center():
    assert to_plane(320, 640, 2.0, -0.5) == -0.5
    assert to_plane(0, 640, 0.5, 1.0) == pytest.approx(1.0 - 1.75)
    assert to_plane(640, 640, 0.5, 1.0) == pytest.approx(1.0 + 1.75)


def test_same_zoom_on_both_axes():
    # Square in plane space whatever the buffer aspect.
    assert to_plane(0, 640, 1.0, 0.0) == to_plane(0, 480, 1.0, 0.0)


def test_step_without_intents_keeps_viewport():
    v = Viewport(0.5, -0.75, 0.1)
    assert v.step(Intents()) == v


def test_step_pans_by_a_tenth_of_zoom():
    v = Viewport(2.0, 0.0, 0.0)
    assert v.step(Intents(move_left=True)).center_x == pytest.approx(-0.2)
    assert v.step(Intents(move_right=True)).center_x == pytest.approx(0.2)
    assert v.step(Intents(move_up=True)).center_y == pytest.approx(-0.2)
    assert v.step(Intents(move_down=True)).center_y == pytest.approx(0.2)
    assert v.step(Intents(move_left=True, move_right=True)).center_x == pytest.approx(0.0)


def test_step_zooms_by_a_quarter():
    v = Viewport(1.0, 0.3, 0.4)
    assert v.step(Intents(zoom_in=True)).zoom == pytest.approx(0.8)
    assert v.step(Intents(zoom_out=True)).zoom == pytest.approx(1.25)

    stepped = v.step(Intents(zoom_in=True, move_right=True))
    assert stepped.center_x == pytest.approx(0.4)
    assert stepped.center_y == pytest.approx(0.4)


def test_bounds():
    assert Viewport(1.0, 1.0, -1.0).bounds() == (-2.5, 4.5, -4.5, 2.5)
