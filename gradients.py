#gradients.py

import constants as C
from permutation import PERMUTATIONS, hash_index
from vectors import Vector2, Vector3

_D = C.DIAGONAL_GRADIENT_COMPONENT

# The 8 compass directions, all unit length.
GRADIENTS_2D = (
    Vector2(-_D, -_D),
    Vector2(-1.0, 0.0),
    Vector2(-_D, _D),
    Vector2(0.0, 1.0),
    Vector2(_D, _D),
    Vector2(1.0, 0.0),
    Vector2(_D, -_D),
    Vector2(0.0, -1.0),
)

# Directions to the 12 edge midpoints of a cube (length sqrt(2)).
GRADIENTS_3D = (
    Vector3(0.0, -1.0, 1.0),
    Vector3(1.0, -1.0, 0.0),
    Vector3(0.0, -1.0, -1.0),
    Vector3(-1.0, -1.0, 0.0),
    Vector3(1.0, 0.0, 1.0),
    Vector3(1.0, 0.0, -1.0),
    Vector3(-1.0, 0.0, 1.0),
    Vector3(-1.0, 0.0, -1.0),
    Vector3(0.0, 1.0, 1.0),
    Vector3(1.0, 1.0, 0.0),
    Vector3(0.0, 1.0, -1.0),
    Vector3(-1.0, 1.0, 0.0),
)

def gradient_at_2d(x, y, permutation=PERMUTATIONS):
    """Gradient assigned to the integer lattice corner (x, y)."""
    # Hashing the raw x plus the hashed y keeps the pattern from lining up with the axes.
    h = hash_index(x + hash_index(y, permutation), permutation)
    return GRADIENTS_2D[h % C.GRADIENT_COUNT_2D]

def gradient_at_3d(x, y, z, permutation=PERMUTATIONS):
    """Gradient assigned to the integer lattice corner (x, y, z)."""
    h = hash_index(x + hash_index(y + hash_index(z, permutation), permutation), permutation)
    return GRADIENTS_3D[h % C.GRADIENT_COUNT_3D]
