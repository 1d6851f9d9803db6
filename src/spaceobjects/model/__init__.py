"""
The MODEL layer contains pure data structures and geometry.
It has NO knowledge of the console driver.
It deals with Positions, Solids and their measurements.
"""
from spaceobjects.model.geometry_primitives import Point, Vector
from spaceobjects.model.shapes import ShapeKind, SpaceObject, Parallelepiped, Sphere, create_shape

__all__ = [
    "Point",
    "Vector",
    "ShapeKind",
    "SpaceObject",
    "Parallelepiped",
    "Sphere",
    "create_shape",
]
