import math

import numpy as np
import pytest

import constants as C
from renderer import (
    _get_grey_color_vectorized,
    noise_to_grey,
    pixels_from_values,
    sample_values,
)
from viewport import Viewport


def test_viewport_maps_pixels_to_sample_points():
    viewport = Viewport()
    assert viewport.pixel_to_sample(0, 0) == (245.0, 324.0)
    assert viewport.pixel_to_sample(50, 100) == (246.0, 326.0)
    assert viewport.pixel_to_sample(25, 0) == (245.5, 324.0)


def test_viewport_grid_lines():
    viewport = Viewport(pixels_per_unit=50)
    assert viewport.is_grid_line(0, 13)
    assert viewport.is_grid_line(13, 100)
    assert not viewport.is_grid_line(13, 14)


def test_viewport_rejects_non_positive_scale():
    with pytest.raises(ValueError):
        Viewport(pixels_per_unit=0)


def test_noise_to_grey_clamps_and_scales():
    assert noise_to_grey(1.0) == 255
    assert noise_to_grey(1.7) == 255
    assert noise_to_grey(0.0) == 0
    assert noise_to_grey(-0.3) == 0
    assert noise_to_grey(0.5) == 128
    assert noise_to_grey(0.999) == 255
    assert noise_to_grey(0.01) == 2
    assert noise_to_grey(math.nan) == 0
    assert noise_to_grey(math.inf) == 255
    assert noise_to_grey(-math.inf) == 0


def test_vectorized_grey_matches_scalar_mapping():
    values = np.array([[-1.0, 0.0, 0.003, 0.25], [0.5, 0.75, 0.999, 1.2]])
    pixels = _get_grey_color_vectorized(values)
    assert pixels.shape == (2, 4, 3)
    assert pixels.dtype == np.uint8
    for (row, col), value in np.ndenumerate(values):
        assert list(pixels[row, col]) == [noise_to_grey(value)] * 3


def test_vectorized_grey_maps_nan_to_black():
    pixels = _get_grey_color_vectorized(np.array([[math.nan]]))
    assert list(pixels[0, 0]) == [0, 0, 0]


def test_sample_values_on_lattice_points_are_zero():
    viewport = Viewport(origin_x=0.0, origin_y=0.0, pixels_per_unit=1.0)
    progress = []
    values = sample_values(5, 3, viewport, progress_callback=lambda done, total: progress.append((done, total)))
    assert values.shape == (3, 5)
    assert np.all(values == 0.0)
    assert progress == [(1, 3), (2, 3), (3, 3)]


def test_sample_values_rejects_empty_image():
    with pytest.raises(ValueError):
        sample_values(0, 10, Viewport())


def test_grid_overlay_paints_lattice_lines_red():
    viewport = Viewport(pixels_per_unit=4)
    values = np.full((8, 8), 0.5)
    pixels = pixels_from_values(values, viewport, draw_grid=True)
    red = list(C.COLOR_GRID_LINE)
    assert list(pixels[0, 5]) == red
    assert list(pixels[5, 0]) == red
    assert list(pixels[4, 6]) == red
    assert list(pixels[6, 4]) == red
    assert list(pixels[1, 1]) == [128, 128, 128]


def test_render_without_grid_is_pure_grey():
    viewport = Viewport(pixels_per_unit=4)
    pixels = pixels_from_values(np.full((8, 8), 0.5), viewport, draw_grid=False)
    assert np.all(pixels == 128)


def test_sampled_image_shape_and_content():
    viewport = Viewport()
    pixels = pixels_from_values(sample_values(60, 40, viewport), viewport)
    assert pixels.shape == (40, 60, 3)
    assert pixels.dtype == np.uint8
    assert list(pixels[0, 0]) == list(C.COLOR_GRID_LINE)
    # Off-grid pixels are grey: all three channels equal.
    assert np.all(pixels[1:49, 1:49, 0] == pixels[1:49, 1:49, 1])


def test_non_finite_samples_render_black():
    viewport = Viewport(pixels_per_unit=4)
    values = sample_values(3, 2, viewport, evaluator=lambda x, y: math.nan)
    pixels = pixels_from_values(values, viewport, draw_grid=False)
    assert np.all(pixels == 0)
