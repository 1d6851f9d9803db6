"""
Solid Shapes
============
Defines the polymorphic 3D solids handled by the application.

Classes:
    ShapeKind: Closed tag enumerating the concrete solids.
    SpaceObject: Abstract base holding the position and the geometry contract.
    Parallelepiped: Rectangular box (length x width x height).
    Sphere: Ball defined by its radius.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Optional
import logging
import math

import numpy as np

from spaceobjects.config import DISPLAY_PRECISION
from spaceobjects.model.geometry_primitives import Point, Vector

logger = logging.getLogger(__name__)


class ShapeKind(StrEnum):
    PARALLELEPIPED = "Parallelepiped"
    SPHERE = "Sphere"


class SpaceObject(ABC):
    """
    Abstract base class for solids positioned in 3D space.
    """
    kind: ShapeKind

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self._position = Point(x, y, z)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(position={self._position.format()})"

    @property
    def x(self) -> float:
        return self._position.x

    @property
    def y(self) -> float:
        return self._position.y

    @property
    def z(self) -> float:
        return self._position.z

    @property
    def position(self) -> Point:
        """Copy of the current position; mutate through move_to/move_by."""
        return self._position.copy()

    def move_to(self, x: float, y: float, z: float) -> None:
        self._position = Point(x, y, z)

    def move_by(self, dx: float, dy: float, dz: float) -> None:
        self._position = self._position + Vector(dx, dy, dz)

    @abstractmethod
    def volume(self) -> float:
        """Calculate the volume of the solid."""
        pass

    @abstractmethod
    def surface_area(self) -> float:
        """Calculate the surface area of the solid."""
        pass

    @abstractmethod
    def scale(self, factor: float) -> None:
        """Scale every dimension by `factor`. Non-positive factors are ignored."""
        pass

    @abstractmethod
    def _apply_volume(self, target: float, current: float) -> None:
        """Resize so that the volume becomes `target` (both are > 0)."""
        pass

    def set_volume(self, target: float) -> bool:
        """
        Resize the solid so its volume equals `target`.

        Args:
            target: Desired volume, must be positive.

        Returns:
            True if the solid was resized, False if the request was rejected.
            A rejected request is logged and leaves the solid untouched.
        """
        # Also rejects NaN
        if not target > 0:
            logger.error(f"Cannot set volume of {self.kind} to {target}: target volume must be positive.")
            return False

        current = self.volume()
        if current == 0:
            logger.error(f"Cannot set volume of {self.kind}: current volume is zero, nothing to scale from.")
            return False

        self._apply_volume(target, current)
        logger.debug(f"{self.kind} resized from volume {current} to {self.volume()}.")
        return True

    def describe(self, precision: int = DISPLAY_PRECISION) -> str:
        """Position prefix; subclasses append their own summary."""
        return f"Center: {self._position.format(precision)}  "

    def print_info(self, precision: int = DISPLAY_PRECISION) -> None:
        print(self.describe(precision))


class Parallelepiped(SpaceObject):
    """
    Rectangular box aligned with the coordinate axes.
    All three dimensions are strictly positive.
    """
    kind = ShapeKind.PARALLELEPIPED

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        length: float = 1.0,
        width: float = 1.0,
        height: float = 1.0
    ) -> None:
        if not (length > 0 and width > 0 and height > 0):
            raise ValueError(
                f"Parallelepiped dimensions must be positive, got {length}x{width}x{height}."
            )
        super().__init__(x, y, z)
        self.length = length
        self.width = width
        self.height = height

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(position={self._position.format()}, "
                f"length={self.length}, width={self.width}, height={self.height})")

    @property
    def dimensions(self) -> tuple[float, float, float]:
        return self.length, self.width, self.height

    def set_dimensions(self, length: float, width: float, height: float) -> None:
        if length > 0 and width > 0 and height > 0:
            self.length, self.width, self.height = length, width, height
        else:
            logger.debug(f"Ignoring non-positive dimensions {length}x{width}x{height}.")

    def scale(self, factor: float) -> None:
        if not factor > 0:
            logger.debug(f"Ignoring non-positive scale factor {factor}.")
            return
        self.length *= factor
        self.width *= factor
        self.height *= factor

    def volume(self) -> float:
        return self.length * self.width * self.height

    def surface_area(self) -> float:
        return 2 * (self.length * self.width + self.length * self.height + self.width * self.height)

    def _apply_volume(self, target: float, current: float) -> None:
        # Uniform rescale keeps the l:w:h ratio
        factor = float(np.cbrt(target / current))
        self.length *= factor
        self.width *= factor
        self.height *= factor

    def describe(self, precision: int = DISPLAY_PRECISION) -> str:
        p = precision
        return (
            super().describe(precision)
            + f"{self.kind}: {self.length:.{p}f}x{self.width:.{p}f}x{self.height:.{p}f}"
            + f"  Volume={self.volume():.{p}f}  Area={self.surface_area():.{p}f}"
        )


class Sphere(SpaceObject):
    """
    Ball defined by its radius. A negative radius at construction is clamped to 0.
    """
    kind = ShapeKind.SPHERE

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        radius: float = 1.0
    ) -> None:
        super().__init__(x, y, z)
        self.radius = radius if radius > 0 else 0.0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(position={self._position.format()}, radius={self.radius})"

    @property
    def diameter(self) -> float:
        return 2 * self.radius

    def set_radius(self, radius: float) -> None:
        if not radius >= 0:
            logger.debug(f"Ignoring negative radius {radius}.")
            return
        self.radius = radius

    def scale(self, factor: float) -> None:
        if not factor > 0:
            logger.debug(f"Ignoring non-positive scale factor {factor}.")
            return
        self.radius *= factor

    def volume(self) -> float:
        return 4.0 / 3.0 * math.pi * self.radius**3

    def surface_area(self) -> float:
        return 4.0 * math.pi * self.radius**2

    def _apply_volume(self, target: float, current: float) -> None:
        # Closed-form inverse of V = 4/3 pi r^3
        self.radius = float(np.cbrt(3.0 * target / (4.0 * math.pi)))

    def describe(self, precision: int = DISPLAY_PRECISION) -> str:
        p = precision
        return (
            super().describe(precision)
            + f"{self.kind}: R={self.radius:.{p}f}"
            + f"  Volume={self.volume():.{p}f}  Area={self.surface_area():.{p}f}"
        )


def create_shape(kind: ShapeKind, position: Optional[Point] = None, **dimensions: float) -> SpaceObject:
    """
    Build a concrete solid from its tag.

    Args:
        kind: Which solid to build.
        position: Initial position, origin if omitted.
        **dimensions: length/width/height for a box, radius for a sphere.
    """
    position = position or Point()
    match kind:
        case ShapeKind.PARALLELEPIPED:
            return Parallelepiped(position.x, position.y, position.z, **dimensions)
        case ShapeKind.SPHERE:
            return Sphere(position.x, position.y, position.z, **dimensions)
        case _:
            raise ValueError(f"Unknown shape kind: {kind!r}")
