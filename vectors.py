#vectors.py

from collections import namedtuple

class Vector2(namedtuple("Vector2", ["x", "y"])):
    """A 2D point or direction. Immutable, compared by value."""
    __slots__ = ()

    def dot(self, other):
        return self.x * other[0] + self.y * other[1]

class Vector3(namedtuple("Vector3", ["x", "y", "z"])):
    """A 3D point or direction. Immutable, compared by value."""
    __slots__ = ()

    def dot(self, other):
        return self.x * other[0] + self.y * other[1] + self.z * other[2]
