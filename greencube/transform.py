"""Points, uniform transforms and simple solids in 3D space."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Iterator


@dataclass(frozen=True)
class Position:
    """A point (or vector) in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def moved(self, dx: float, dy: float, dz: float) -> Position:
        """Return this position shifted by the given deltas."""
        return Position(self.x + dx, self.y + dy, self.z + dz)

    def rotated(self, angle_x: float, angle_y: float, angle_z: float) -> Position:
        """Rotate about the origin around X, then Y, then Z (radians)."""
        cos_x, sin_x = math.cos(angle_x), math.sin(angle_x)
        cos_y, sin_y = math.cos(angle_y), math.sin(angle_y)
        cos_z, sin_z = math.cos(angle_z), math.sin(angle_z)

        x = self.x
        y = self.y * cos_x - self.z * sin_x
        z = self.y * sin_x + self.z * cos_x

        x, z = x * cos_y + z * sin_y, -x * sin_y + z * cos_y

        x, y = x * cos_z - y * sin_z, x * sin_z + y * cos_z
        return Position(x, y, z)


@dataclass(frozen=True)
class Transform:
    """A position together with a uniform scale factor."""

    pos: Position = field(default_factory=Position)
    scale: float = 1.0

    def scaled(self, factor: float) -> Transform:
        """Return a transform whose scale is multiplied by ``factor``."""
        return replace(self, scale=self.scale * factor)


@dataclass(frozen=True)
class Sphere:
    """A sphere given by its centre and radius."""

    center: Position = field(default_factory=Position)
    radius: float = 0.0

    def contains(self, point: Position) -> bool:
        """True if ``point`` lies inside the sphere or on its surface."""
        dx = point.x - self.center.x
        dy = point.y - self.center.y
        dz = point.z - self.center.z
        return dx * dx + dy * dy + dz * dz <= self.radius * self.radius


@dataclass(frozen=True)
class Rectangle3D:
    """An axis-aligned cuboid anchored at its minimum corner."""

    pos: Position = field(default_factory=Position)
    width: float = 0.0
    height: float = 0.0
    depth: float = 0.0

    def contains(self, point: Position) -> bool:
        """True if ``point`` lies inside the cuboid or on its boundary."""
        return (
            self.pos.x <= point.x <= self.pos.x + self.width
            and self.pos.y <= point.y <= self.pos.y + self.height
            and self.pos.z <= point.z <= self.pos.z + self.depth
        )

    def vertices(self) -> tuple[Position, ...]:
        """The eight corners: near face first, bottom before top, left before right."""
        x, y, z = self.pos
        x2, y2, z2 = x + self.width, y + self.height, z + self.depth
        return (
            Position(x, y, z),
            Position(x2, y, z),
            Position(x, y2, z),
            Position(x2, y2, z),
            Position(x, y, z2),
            Position(x2, y, z2),
            Position(x, y2, z2),
            Position(x2, y2, z2),
        )