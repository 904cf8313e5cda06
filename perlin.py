#perlin.py

import math
import constants as C
from gradients import gradient_at_2d, gradient_at_3d
from interpolation import fade, lerp
from permutation import PERMUTATIONS

# Lattice offsets of a cube corner, as (dx, dy, dz) bits.
CUBE_CORNERS = tuple((dx, dy, dz) for dz in (0, 1) for dy in (0, 1) for dx in (0, 1))

def _lattice_cell(value):
    """
    Splits a coordinate into its cell's lower corner and the offset from it, in [0, 1].

    The offset is below 1 for ordinary inputs, but rounds to exactly 1.0 for tiny
    negative values such as -1e-17. The blend is still continuous there.
    """
    floored = math.floor(value)
    return floored, value - floored

def evaluate2d(x, y, permutation=PERMUTATIONS):
    """
    Classical 2D Perlin noise at (x, y).

    The result is roughly within [-1, 1] and is exactly 0 on every lattice point.
    Non-finite coordinates give NaN; avoiding them is up to the caller.
    """
    if not (math.isfinite(x) and math.isfinite(y)):
        return math.nan

    # The lower left corner of the cell, and the sample's offset from it.
    floor_x, frac_x = _lattice_cell(x)
    floor_y, frac_y = _lattice_cell(y)

    gradient_00 = gradient_at_2d(floor_x, floor_y, permutation)
    gradient_10 = gradient_at_2d(floor_x + 1, floor_y, permutation)
    gradient_01 = gradient_at_2d(floor_x, floor_y + 1, permutation)
    gradient_11 = gradient_at_2d(floor_x + 1, floor_y + 1, permutation)

    # Dot each corner's gradient with the vector from that corner to the sample.
    noise_00 = gradient_00.dot((frac_x, frac_y))
    noise_10 = gradient_10.dot((frac_x - 1, frac_y))
    noise_01 = gradient_01.dot((frac_x, frac_y - 1))
    noise_11 = gradient_11.dot((frac_x - 1, frac_y - 1))

    # Blend along x for the lower and upper edges, then along y.
    u = fade(frac_x)
    lower = lerp(noise_00, noise_10, u)
    upper = lerp(noise_01, noise_11, u)
    return lerp(lower, upper, fade(frac_y))

def evaluate3d(x, y, z, permutation=PERMUTATIONS):
    """
    Classical 3D Perlin noise at (x, y, z).

    Corners are keyed by their (dx, dy, dz) offset bits. Each blending step only
    pairs corners that differ in the axis being blended: x first, then y, then z.
    """
    if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(z)):
        return math.nan

    floor_x, frac_x = _lattice_cell(x)
    floor_y, frac_y = _lattice_cell(y)
    floor_z, frac_z = _lattice_cell(z)

    corner_noise = {}
    for dx, dy, dz in CUBE_CORNERS:
        gradient = gradient_at_3d(floor_x + dx, floor_y + dy, floor_z + dz, permutation)
        corner_noise[(dx, dy, dz)] = gradient.dot((frac_x - dx, frac_y - dy, frac_z - dz))

    u = fade(frac_x)
    v = fade(frac_y)
    w = fade(frac_z)

    # 8 corners -> 4 edges along x
    along_x = {
        (dy, dz): lerp(corner_noise[(0, dy, dz)], corner_noise[(1, dy, dz)], u)
        for dy in (0, 1) for dz in (0, 1)
    }
    # 4 edges -> 2 faces along y
    along_y = {
        dz: lerp(along_x[(0, dz)], along_x[(1, dz)], v)
        for dz in (0, 1)
    }
    # 2 faces -> 1 value along z
    return lerp(along_y[0], along_y[1], w)

def evaluate2d_from_3d(x, y, z=C.FIXED_Z_OFFSET, permutation=PERMUTATIONS):
    """2D noise taken as a fixed-z slice of the 3D field."""
    return evaluate3d(x, y, z, permutation)
