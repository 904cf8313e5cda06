#image_writer.py

import numpy as np
import matplotlib.pyplot as plt
import constants as C
import logger as log

def _check_pixels(pixels):
    pixels = np.asarray(pixels)
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"Expected (height, width, 3) RGB pixels, got shape {pixels.shape}")
    return pixels.astype(np.uint8, copy=False)

def write_ppm_image(file_path, pixels):
    """
    Writes RGB pixels as a plain-text (P3) PPM image.

    One image row per line, channel values separated by single spaces.
    """
    pixels = _check_pixels(pixels)
    height, width, _ = pixels.shape
    with open(file_path, "w", encoding="ascii") as image:
        image.write(f"{C.PPM_MAGIC}\n{width} {height}\n{C.PPM_MAX_CHANNEL_VALUE}\n")
        for row in pixels:
            image.write(" ".join(str(int(value)) for value in row.ravel()))
            image.write("\n")
    log.log(f"PPM image ({width}x{height}) written to {file_path}")

def save_png_image(file_path, pixels):
    """Saves RGB pixels as a PNG through matplotlib."""
    pixels = _check_pixels(pixels)
    plt.imsave(file_path, pixels)
    log.log(f"PNG image ({pixels.shape[1]}x{pixels.shape[0]}) written to {file_path}")
