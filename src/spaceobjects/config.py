"""
Configuration & Global Constants
================================
This module serves as the central registry for the constants shared by the
model and the demonstration driver.

Why is this file needed?
------------------------
It prevents magic numbers (print precision, demo targets)
scattered throughout the code.

Exports:
    DISPLAY_PRECISION (int): Decimal places used when printing shapes.
    DEMO_TARGET_VOLUME (float): Volume the second demo resizes every shape to.
    DEFAULT_LOG_LEVEL (int): Log level used by the driver.
"""
import logging

# Output formatting
DISPLAY_PRECISION: int = 2

# Demonstration
DEMO_MOVE_DELTA: tuple[float, float, float] = (2.0, 3.0, -1.0)
DEMO_BOX_SCALE: float = 1.5
DEMO_SPHERE_SCALE: float = 0.8
DEMO_TARGET_VOLUME: float = 1000.0

DEFAULT_LOG_LEVEL: int = logging.INFO
