#viewport.py

import constants as C
import logger as log

class Viewport:
    """Maps image pixels onto the real-valued sample domain of the noise field."""
    def __init__(self, origin_x=C.SAMPLE_ORIGIN_X, origin_y=C.SAMPLE_ORIGIN_Y, pixels_per_unit=C.PIXELS_PER_LATTICE_UNIT):
        if pixels_per_unit <= 0:
            raise ValueError(f"pixels_per_unit must be positive, got {pixels_per_unit}")
        self.origin_x = origin_x
        self.origin_y = origin_y
        self.pixels_per_unit = pixels_per_unit
        log.log(f"Viewport at sample coordinates ({self.origin_x:.2f}, {self.origin_y:.2f}), {self.pixels_per_unit:g} px per lattice unit")

    def pixel_to_sample(self, col, row):
        """Converts a pixel (column, row) into a sample point."""
        sample_x = self.origin_x + col / self.pixels_per_unit
        sample_y = self.origin_y + row / self.pixels_per_unit
        return sample_x, sample_y

    def is_grid_line(self, col, row):
        """True for pixels on the overlay grid, drawn every `pixels_per_unit` pixels. Accepts numpy arrays."""
        spacing = max(1, int(self.pixels_per_unit))
        return (col % spacing == 0) | (row % spacing == 0)
