import numpy as np
import pytest

from mandelbrot_viewer import Complex, Viewport, escape_time, render, render_bounds, render_frame


def test_complex_operations():
    a = Complex(1.0, 2.0)
    b = Complex(3.0, -1.0)
    assert a.add(b) == Complex(4.0, 1.0)
    assert a.multiply(b) == Complex(5.0, 5.0)
    assert Complex(3.0, 4.0).magnitude() == 5.0


def test_origin_never_escapes():
    assert escape_time(Complex(0.0, 0.0), 100) == 100


def test_far_point_escapes_after_first_step():
    assert escape_time(Complex(2.0, 2.0), 100) == 1


def test_escape_count_respects_limit():
    assert escape_time(Complex(-1.0, 0.0), 50) == 50
    assert escape_time(Complex(0.5, 0.5), 100) < 100


@pytest.mark.parametrize("width,height", [(1, 1), (7, 3), (16, 9)])
def test_buffer_shape_and_values(viewport, width, height):
    pixels = render(viewport, width, height, 30)
    assert pixels.shape == (height, width)
    assert pixels.size == width * height
    assert pixels.dtype == np.uint32
    assert int(pixels.max()) <= 0xFFFFFF


@pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-4, 5)])
def test_non_positive_dimensions_give_empty_buffer(viewport, width, height):
    pixels = render(viewport, width, height)
    assert pixels.shape == (0, 0)


def test_render_is_deterministic(viewport):
    first = render(viewport, 40, 30)
    second = render(viewport, 40, 30)
    np.testing.assert_array_equal(first, second)


def test_default_view_end_to_end(viewport):
    pixels = render(viewport, 100, 100, 100)
    assert pixels[0, 0] != 0
    assert pixels[50, 50] == 0


def test_iterations_match_scalar_reference():
    viewport = Viewport(-1.5, 0.5, -1.0, 1.0)
    result = render_frame(viewport, 24, 16, 60)
    for py in range(0, 16, 3):
        for px in range(0, 24, 5):
            re, im = viewport.pixel_to_complex(px, py, 24, 16)
            assert result.iterations[py, px] == escape_time(Complex(re, im), 60)


def test_inside_mask_matches_black_pixels(viewport):
    result = render_frame(viewport, 32, 24, 40)
    inside = result.iterations >= result.max_iterations
    np.testing.assert_array_equal(inside, result.pixels == 0)


def test_metadata_uses_pixel_count_as_divisor(viewport):
    metadata = render_frame(viewport, 100, 50).metadata
    assert metadata.x_res == 100
    assert metadata.y_res == 50
    assert metadata.x_step == pytest.approx(0.03)
    assert metadata.y_step == pytest.approx(0.048)


def test_render_bounds_matches_viewport_render(viewport):
    direct = render_bounds(-2.0, 1.0, -1.2, 1.2, 20, 20, 50)
    np.testing.assert_array_equal(direct, render(viewport, 20, 20, 50))


def test_render_does_not_mutate_viewport(viewport):
    before = (viewport.bounds, viewport.pan_step)
    render(viewport, 10, 10)
    assert (viewport.bounds, viewport.pan_step) == before
