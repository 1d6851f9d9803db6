"""
Geometric Primitives for positioning solids in 3D space.
"""
from __future__ import annotations
from dataclasses import dataclass

@dataclass
class Vector:
    """
    A displacement in 3D space, used to move a Point.
    """
    x: float
    y: float
    z: float = 0.0


@dataclass
class Point:
    """A mutable location in 3D space. Defaults to the origin."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        raise TypeError("Can only add a Vector to a Point.")

    def copy(self) -> Point:
        return Point(self.x, self.y, self.z)

    def format(self, precision: int = 2) -> str:
        """Render as '(x, y, z)' with fixed decimals."""
        return f"({self.x:.{precision}f}, {self.y:.{precision}f}, {self.z:.{precision}f})"
