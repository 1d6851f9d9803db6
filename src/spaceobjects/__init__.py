"""Polymorphic 3D solids that can be measured, moved and resized."""
from spaceobjects.model import Point, Vector, ShapeKind, SpaceObject, Parallelepiped, Sphere, create_shape

__version__ = "0.1.0"
