"""
Demonstration Driver
====================
This module builds a small collection of solids, prints them, mutates them
and prints them again.

Why is this file needed?
------------------------
It acts as the composition root. It:
1. Sets up logging.
2. Runs the move/scale scenario on a box and a sphere.
3. Runs the volume-targeting scenario, including a degenerate sphere that
   shows the rejection path.
4. Waits for the user to acknowledge completion.
"""
import logging
import sys
from typing import Iterable, List

from spaceobjects import config
from spaceobjects.logging_config import setup_logging
from spaceobjects.model.shapes import Parallelepiped, Sphere, SpaceObject

logger = logging.getLogger(__name__)


def build_objects() -> List[SpaceObject]:
    """Demo pair: a 5x3x4 box at the origin and an r=6 sphere at (10, -5, 8)."""
    return [
        Parallelepiped(0, 0, 0, length=5, width=3, height=4),
        Sphere(10, -5, 8, radius=6),
    ]


def build_volume_objects() -> List[SpaceObject]:
    return [
        Parallelepiped(length=2, width=3, height=4),
        Sphere(radius=2),
        Sphere(radius=0),
    ]


def print_objects(objects: Iterable[SpaceObject], title: str) -> None:
    print(title)
    for obj in objects:
        obj.print_info(config.DISPLAY_PRECISION)


def run_move_and_scale(objects: List[SpaceObject]) -> None:
    """Move the box by a delta, send the sphere home, then scale both."""
    box, sphere = objects[0], objects[1]

    box.move_by(*config.DEMO_MOVE_DELTA)
    box.scale(config.DEMO_BOX_SCALE)

    sphere.move_to(0, 0, 0)
    sphere.scale(config.DEMO_SPHERE_SCALE)


def run_volume_targeting(objects: Iterable[SpaceObject], target: float) -> int:
    """
    Resize every solid to `target` volume.

    Returns:
        Number of solids that rejected the request.
    """
    failures = 0
    for obj in objects:
        if not obj.set_volume(target):
            failures += 1
    if failures:
        logger.warning(f"{failures} object(s) could not be resized to volume {target}.")
    return failures


def main(pause: bool = True) -> int:
    setup_logging(level=config.DEFAULT_LOG_LEVEL)

    # 1. Move and scale
    objects = build_objects()
    print_objects(objects, "Start objects:")
    run_move_and_scale(objects)
    print_objects(objects, "\nAfter move and scale:")

    # 2. Volume targeting
    objects = build_volume_objects()
    print_objects(objects, "\nBefore volume change:")
    run_volume_targeting(objects, config.DEMO_TARGET_VOLUME)
    print_objects(objects, f"\nAfter setting volume to {config.DEMO_TARGET_VOLUME:.{config.DISPLAY_PRECISION}f}:")

    if pause:
        try:
            input("\nPress Enter to exit...")
        except EOFError:
            # stdin closed or redirected from an empty file
            print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
