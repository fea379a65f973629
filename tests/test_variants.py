# -*- coding: utf-8 -*-

import pytest

from fractal.base import MAX_ESCAPE_TIME
from fractal.variants import (
    MANDELBROT, MULTIBROT, Mandelbrot, Multibrot, make_fractal)


@pytest.mark.parametrize("bound", [1, 2, 10, 64, 511])
def test_mandelbrot_origin_never_escapes(bound):
    assert Mandelbrot(bound).escape_time(0.0, 0.0) == bound


@pytest.mark.parametrize("bound", [1, 2, 10, 511])
def test_mandelbrot_far_point_escapes_at_once(bound):
    assert Mandelbrot(bound).escape_time(10.0, 10.0) == 0


def test_mandelbrot_escape_iteration():
    # 0 -> 1 -> 2 -> 5, |2|^2 == 4 is not an escape.
    assert Mandelbrot(10).escape_time(1.0, 0.0) == 2
    assert Mandelbrot(10).escape_time(-1.0, 0.0) == 10
    assert Mandelbrot(0).escape_time(10.0, 10.0) == 0


def test_mandelbrot_step_cycles_below_ceiling():
    m = Mandelbrot()
    seen = []
    for _ in range(2 * MAX_ESCAPE_TIME):
        seen.append(m.max_iterations())
        m.step_parameter()

    assert seen == list(range(MAX_ESCAPE_TIME)) * 2
    assert max(seen) == MAX_ESCAPE_TIME - 1


def test_mandelbrot_bound_over_ceiling_is_an_invariant_violation():
    m = Mandelbrot()
    m.current_max_iters = MAX_ESCAPE_TIME
    with pytest.raises(AssertionError):
        m.max_iterations()


def test_mandelbrot_labels():
    m = Mandelbrot(37)
    assert m.kind == MANDELBROT
    assert m.name() == "Mandelbrot"
    assert m.parameter_description() == "max_iterations=37"
    assert Mandelbrot(MAX_ESCAPE_TIME).max_iterations() == 0


def test_multibrot_fixed_bound():
    m = Multibrot()
    assert m.max_iterations() == 64
    assert m.escape_time(0.0, 0.0) == 64
    assert m.escape_time(10.0, 10.0) == 0


def test_multibrot_square_matches_mandelbrot_escape():
    m = Multibrot(2.0)
    assert m.d == pytest.approx(2.0)
    assert m.escape_time(1.0, 0.0) == 2


def test_multibrot_step_cycles_d():
    m = Multibrot()
    expected = [0.5 + 0.1 * k for k in range(46)]

    seen = []
    for _ in range(2 * len(expected)):
        seen.append(m.d)
        m.step_parameter()

    assert seen == pytest.approx(expected * 2)
    assert max(seen) <= 5.0 + 1e-9
    assert seen[len(expected)] == 0.5


def test_multibrot_labels():
    m = Multibrot(1.3)
    assert m.kind == MULTIBROT
    assert m.name() == "Multibrot"
    assert m.parameter_description() == "d=1.3"
    assert m.parameter() == pytest.approx(1.3)


def test_multibrot_clamps_initial_d():
    assert Multibrot(0.0).d == 0.5
    assert Multibrot(9.0).d == pytest.approx(5.0)


def test_make_fractal():
    assert isinstance(make_fractal("mandelbrot"), Mandelbrot)
    assert isinstance(make_fractal(" MultiBrot "), Multibrot)
    with pytest.raises(ValueError):
        make_fractal("julia")


def multibrot_reference(d, c, max_iters):
    """
    Escape count with Python's complex power, and the closest approach of
    |z|^2 to the escape radius along the way.
    """
    z = 0j
    margin = float('inf')
    for n in range(max_iters):
        z = z ** d + c
        norm = z.real * z.real + z.imag * z.imag
        margin = min(margin, abs(norm - 4.0))
        if norm > 4.0:
            return n, margin
    return max_iters, margin


@pytest.mark.parametrize("d", [0.7, 1.5, 2.7, 3.3, 4.6])
def test_multibrot_matches_complex_power(d):
    m = Multibrot(d)
    assert m.d == pytest.approx(d)

    compared = 0
    for x0 in (-1.43, -0.97, -0.51, -0.13, 0.21, 0.58, 1.04):
        for y0 in (-1.27, -0.62, -0.17, 0.33, 0.86, 1.39):
            c = complex(x0, y0)
            n, margin = multibrot_reference(m.d, c, m.max_iterations())
            nearby = [multibrot_reference(m.d, c + dc, m.max_iterations())[0]
                      for dc in (1e-10, 1e-10j)]

            # Orbits grazing the escape radius, or sensitive to the last
            # bits of c, may round either way.
            if margin < 1e-6 or nearby != [n, n]:
                continue
            assert m.escape_time(x0, y0) == n, (x0, y0)
            compared += 1

    assert compared >= 21
