"""Scene lights, surface material and a simple per-vertex shading model."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

Color4 = tuple[float, float, float, float]


@dataclass(frozen=True)
class Light:
    """A light source; ``position`` has w=1 for a point light, w=0 for a direction."""

    diffuse: Color4
    specular: Color4
    position: Color4
    ambient: Color4 = (0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Material:
    """Reflective properties shared by all surfaces."""

    diffuse: Color4 = (1.0, 1.0, 1.0, 1.0)
    specular: Color4 = (0.9, 0.9, 0.9, 1.0)
    shininess: float = 50.0


@dataclass(frozen=True)
class LightingSetup:
    """Global ambient light, the enabled lights and the material."""

    ambient: Color4
    lights: tuple[Light, ...] = ()
    material: Material = field(default_factory=Material)


def default_lighting() -> LightingSetup:
    """The scene's standard lighting: warm overhead light plus sunlight."""
    overhead = Light(
        diffuse=(1.0, 0.9, 0.6, 1.0),
        specular=(1.0, 0.9, 0.6, 1.0),
        position=(0.0, 30.0, 0.0, 1.0),
    )
    sunlight = Light(
        diffuse=(1.2, 1.1, 0.9, 1.0),
        specular=(1.2, 1.1, 0.9, 1.0),
        position=(0.0, -1.0, -0.5, 0.0),
    )
    return LightingSetup(
        ambient=(0.3, 0.3, 0.3, 1.0),
        lights=(overhead, sunlight),
        material=Material(),
    )


def _unit(v: Sequence[float]) -> tuple[float, float, float] | None:
    x, y, z = v[0], v[1], v[2]
    length = math.sqrt(x * x + y * y + z * z)
    if length == 0.0:
        return None
    return x / length, y / length, z / length


def shade(
    color: Sequence[float], normal: Sequence[float], setup: LightingSetup
) -> tuple[float, float, float]:
    """Ambient and diffuse lighting of a surface whose colour is ``color``.

    Point lights are evaluated as seen from the origin. Each channel is
    clamped to [0, 1].
    """
    n = _unit(normal)
    if n is None:
        raise ValueError("surface normal has zero length")
    total = [setup.ambient[i] for i in range(3)]
    for light in setup.lights:
        direction = _unit(light.position)
        lambert = 0.0
        if direction is not None:
            lambert = max(0.0, sum(a * b for a, b in zip(n, direction)))
        for i in range(3):
            total[i] += light.ambient[i] + light.diffuse[i] * lambert
    return tuple(min(1.0, max(0.0, c * t)) for c, t in zip(color[:3], total))