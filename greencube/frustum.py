"""View-frustum planes and visibility tests for spheres and cuboids."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from greencube.camera import multiply
from greencube.transform import Position, Rectangle3D, Sphere


@dataclass(frozen=True)
class Plane:
    """The plane a*x + b*y + c*z + d = 0."""

    a: float
    b: float
    c: float
    d: float

    def distance(self, point: Position) -> float:
        """Signed distance of ``point`` from the plane (for a normalised plane)."""
        return self.a * point.x + self.b * point.y + self.c * point.z + self.d


# Clip-matrix rows combined with the fourth row: right, left, bottom, top, far, near.
_PLANE_ROWS = ((0, -1.0), (0, 1.0), (1, 1.0), (1, -1.0), (2, -1.0), (2, 1.0))


@dataclass(frozen=True)
class Frustum:
    """A set of planes whose positive sides bound the visible volume.

    A frustum with no planes contains everything.
    """

    planes: tuple[Plane, ...] = ()

    @classmethod
    def from_matrices(cls, projection: Sequence[float], modelview: Sequence[float]) -> Frustum:
        """Extract the six normalised planes from column-major matrices."""
        clip = multiply(projection, modelview)

        def row(r: int) -> tuple[float, float, float, float]:
            return clip[r], clip[4 + r], clip[8 + r], clip[12 + r]

        w = row(3)
        planes = []
        for index, sign in _PLANE_ROWS:
            a, b, c, d = (wv + sign * rv for wv, rv in zip(w, row(index)))
            magnitude = math.sqrt(a * a + b * b + c * c)
            if magnitude == 0.0:
                raise ValueError("matrices do not describe a valid frustum")
            planes.append(Plane(a / magnitude, b / magnitude, c / magnitude, d / magnitude))
        return cls(tuple(planes))

    def contains_sphere(self, sphere: Sphere) -> bool:
        """False if the sphere lies wholly behind any plane."""
        return not any(plane.distance(sphere.center) <= -sphere.radius for plane in self.planes)

    def contains_rectangle(self, rect: Rectangle3D) -> bool:
        """False if all eight corners of the cuboid lie behind one plane."""
        corners = rect.vertices()
        return not any(
            all(plane.distance(v) < 0 for v in corners) for plane in self.planes
        )