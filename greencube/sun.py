"""Position and motion of the sun."""

from __future__ import annotations

import math

from greencube.transform import Position, Sphere

SUN_DISTANCE = 20.0
SUN_HEIGHT = 40.0
SUN_RADIUS = 3.0
SUN_COLOR = (1.0, 0.95, 0.5)
SUN_STEP = 0.1
SUN_WRAP = 360.0


def sun_sphere(angle: float) -> Sphere:
    """The sun as a sphere circling the vertical axis at ``angle`` radians."""
    return Sphere(
        Position(math.cos(angle) * SUN_DISTANCE, SUN_HEIGHT, math.sin(angle) * SUN_DISTANCE),
        SUN_RADIUS,
    )


def advance_angle(angle: float) -> float:
    """Step the sun angle forward, starting over from zero at 360."""
    angle += SUN_STEP
    return 0.0 if angle >= SUN_WRAP else angle