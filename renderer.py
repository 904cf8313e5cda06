#renderer.py

import math
import numpy as np
import constants as C
from perlin import evaluate2d

def noise_to_grey(value):
    """Maps a noise value to a grey level: <= 0 is black, >= 1 is white, NaN is black."""
    if math.isnan(value):
        return 0
    if value >= 1.0:
        return C.GREY_MAX
    if value <= 0.0:
        return 0
    return int(math.floor(value * C.GREY_LEVELS))

_noise_to_grey_array = np.vectorize(noise_to_grey, otypes=[np.uint8])

def _get_grey_color_vectorized(noise_values):
    """Applies noise_to_grey to a whole (height, width) array and returns RGB pixels."""
    grey = _noise_to_grey_array(noise_values)
    return np.repeat(grey[..., np.newaxis], 3, axis=2)

def _check_size(width, height):
    if width <= 0 or height <= 0:
        raise ValueError(f"Image size must be positive, got {width}x{height}")

def sample_values(width, height, viewport, evaluator=evaluate2d, progress_callback=None):
    """
    Evaluates the noise field once per pixel.

    Returns a float64 array of shape (height, width), row major like the image.
    `progress_callback(rows_done, total_rows)` is called after each row.
    """
    _check_size(width, height)
    values = np.empty((height, width), dtype=np.float64)
    for row in range(height):
        for col in range(width):
            sample_x, sample_y = viewport.pixel_to_sample(col, row)
            values[row, col] = evaluator(sample_x, sample_y)
        if progress_callback:
            progress_callback(row + 1, height)
    return values

def pixels_from_values(noise_values, viewport, draw_grid=C.DRAW_LATTICE_GRID):
    """Turns sampled values into (height, width, 3) uint8 pixels, optionally with the lattice grid overlaid."""
    pixels = _get_grey_color_vectorized(noise_values)
    if draw_grid:
        height, width = noise_values.shape
        rows, cols = np.meshgrid(np.arange(height), np.arange(width), indexing="ij")
        pixels[viewport.is_grid_line(cols, rows)] = C.COLOR_GRID_LINE
    return pixels
