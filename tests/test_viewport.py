import pytest

from mandelbrot_viewer import DEFAULT_BOUNDS, Viewport


def test_default_bounds_and_pan_step(viewport):
    assert viewport.bounds == DEFAULT_BOUNDS
    assert viewport.pan_step == pytest.approx(0.3)


def test_pan_left_then_right_restores_bounds(viewport):
    original = viewport.bounds
    viewport.pan_left()
    assert viewport.x_min == pytest.approx(-2.3)
    assert viewport.x_max == pytest.approx(0.7)
    viewport.pan_right()
    assert viewport.bounds == pytest.approx(original)


def test_pan_up_then_down_restores_bounds(viewport):
    original = viewport.bounds
    viewport.pan_up()
    assert viewport.y_min == pytest.approx(-1.5)
    viewport.pan_down()
    assert viewport.bounds == pytest.approx(original)


def test_pan_does_not_change_pan_step(viewport):
    step = viewport.pan_step
    viewport.pan(dx=3, dy=-2)
    assert viewport.pan_step == step
    assert viewport.x_min == pytest.approx(-2.0 + 3 * step)
    assert viewport.y_max == pytest.approx(1.2 - 2 * step)


def test_zoom_in_keeps_center_and_recomputes_pan_step(viewport):
    center = viewport.center
    viewport.zoom(0.8)
    assert viewport.center == pytest.approx(center)
    assert viewport.x_max - viewport.x_min == pytest.approx(2.4)
    assert viewport.y_max - viewport.y_min == pytest.approx(1.92)
    assert viewport.pan_step == pytest.approx(0.24)


def test_zoom_round_trip(viewport):
    original = viewport.bounds
    viewport.zoom(0.8)
    viewport.zoom(1 / 0.8)
    assert viewport.bounds == pytest.approx(original, abs=1e-12)
    assert viewport.pan_step == pytest.approx(0.3)


def test_repeated_zoom_out_is_not_clamped():
    viewport = Viewport()
    for _ in range(50):
        viewport.zoom(1 / 0.8)
    assert viewport.x_max - viewport.x_min > 3.0 * 1000


def test_inverted_bounds_are_accepted():
    viewport = Viewport(1.0, -1.0, 0.5, -0.5)
    assert viewport.pan_step == pytest.approx(-0.2)


def test_copy_is_independent(viewport):
    viewport.zoom(0.5)
    snapshot = viewport.copy()
    viewport.pan_right()
    assert snapshot.bounds != viewport.bounds
    assert snapshot.pan_step == viewport.pan_step


def test_reset_restores_defaults(viewport):
    viewport.zoom(0.1)
    viewport.pan_left()
    viewport.reset()
    assert viewport.bounds == DEFAULT_BOUNDS
    assert viewport.pan_step == pytest.approx(0.3)


def test_pixel_to_complex_divides_by_pixel_count(viewport):
    assert viewport.pixel_to_complex(0, 0, 100, 100) == (-2.0, -1.2)
    re, im = viewport.pixel_to_complex(50, 50, 100, 100)
    assert re == pytest.approx(-0.5)
    assert im == pytest.approx(0.0)
    re, im = viewport.pixel_to_complex(99, 99, 100, 100)
    assert re < viewport.x_max
    assert im < viewport.y_max
