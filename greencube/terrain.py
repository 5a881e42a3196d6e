"""Noise-based terrain, block grid and the quad faces that make up the scene."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from greencube.frustum import Frustum
from greencube.transform import Position, Rectangle3D

Color = tuple[float, float, float]

GRID_SIZE = 100
NOISE_SCALE = 0.2
MAX_HEIGHT = 3.0
BLOCK_SPACING = 2.2
SKY_SIZE = 50.0
SKY_COLOR: Color = (0.5, 0.7, 1.0)
PLAYER_COLOR: Color = (0.0, 1.0, 0.0)

_QUAD_UV = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0))


def _wrap32(n: int) -> int:
    """Reduce ``n`` to a signed 32-bit integer, wrapping on overflow."""
    n &= 0xFFFFFFFF
    return n - 0x100000000 if n & 0x80000000 else n


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def perlin_noise(x: float, z: float) -> float:
    """Integer-lattice hash noise in the range (-1, 1].

    Coordinates are truncated towards zero, so every point in a unit cell
    shares one value.
    """
    n = _wrap32(int(x) + int(z) * 57)
    n = _wrap32(_wrap32(n << 13) ^ n)
    inner = _wrap32(n * n * 15731 + 789221)
    value = (n * inner + 1376312589) & 0x7FFFFFFF
    return 1.0 - value / 1073741824.0


@dataclass(frozen=True)
class Face:
    """One quad: four corners, optional texture coordinates and colour."""

    vertices: tuple[Position, ...]
    tex_coords: tuple[tuple[float, float], ...] = ()
    color: Optional[Color] = None


@dataclass(frozen=True)
class HeightMap:
    """Terrain heights on a square grid spanning -grid_size..grid_size."""

    grid_size: int
    values: tuple[tuple[float, ...], ...]

    @classmethod
    def generate(
        cls,
        grid_size: int = GRID_SIZE,
        noise_scale: float = NOISE_SCALE,
        max_height: float = MAX_HEIGHT,
    ) -> HeightMap:
        """Fill a grid with noise scaled to ``max_height``."""
        if grid_size < 0:
            raise ValueError("grid size must not be negative")
        scale = _f32(noise_scale)
        span = range(-grid_size, grid_size + 1)
        values = tuple(
            tuple(
                perlin_noise(_f32(x * scale), _f32(z * scale)) * max_height
                for z in span
            )
            for x in span
        )
        return cls(grid_size, values)

    def height(self, x: int, z: int) -> float:
        """The height at grid cell (x, z)."""
        g = self.grid_size
        if not (-g <= x <= g and -g <= z <= g):
            raise IndexError(f"cell ({x}, {z}) is outside the grid of size {g}")
        return self.values[x + g][z + g]


def box_faces(rect: Rectangle3D) -> tuple[Face, ...]:
    """The six textured faces of a cuboid: front, back, left, right, top, bottom."""
    x, y, z = rect.pos
    w, h, d = rect.width, rect.height, rect.depth
    P = Position
    quads = (
        (P(x, y, z + d), P(x + w, y, z + d), P(x + w, y + h, z + d), P(x, y + h, z + d)),
        (P(x, y, z), P(x + w, y, z), P(x + w, y + h, z), P(x, y + h, z)),
        (P(x, y, z), P(x, y, z + d), P(x, y + h, z + d), P(x, y + h, z)),
        (P(x + w, y, z), P(x + w, y, z + d), P(x + w, y + h, z + d), P(x + w, y + h, z)),
        (P(x, y + h, z), P(x + w, y + h, z), P(x + w, y + h, z + d), P(x, y + h, z + d)),
        (P(x, y, z), P(x + w, y, z), P(x + w, y, z + d), P(x, y, z + d)),
    )
    return tuple(Face(quad, _QUAD_UV) for quad in quads)


def sky_faces(size: float = SKY_SIZE) -> tuple[Face, ...]:
    """The five sky-coloured walls of an open-bottomed box around the origin."""
    s = size
    P = Position
    quads = (
        (P(-s, -s, -s), P(s, -s, -s), P(s, s, -s), P(-s, s, -s)),
        (P(-s, -s, s), P(s, -s, s), P(s, s, s), P(-s, s, s)),
        (P(-s, -s, -s), P(-s, -s, s), P(-s, s, s), P(-s, s, -s)),
        (P(s, -s, -s), P(s, -s, s), P(s, s, s), P(s, s, -s)),
        (P(-s, s, -s), P(s, s, -s), P(s, s, s), P(-s, s, s)),
    )
    return tuple(Face(quad, color=SKY_COLOR) for quad in quads)


def player_cube_faces(position: Position) -> tuple[Face, ...]:
    """A green unit cube centred on ``position``."""
    h = 0.5
    corners = (
        ((-h, -h, h), (h, -h, h), (h, h, h), (-h, h, h)),
        ((-h, -h, -h), (-h, h, -h), (h, h, -h), (h, -h, -h)),
        ((-h, -h, -h), (-h, -h, h), (-h, h, h), (-h, h, -h)),
        ((h, -h, -h), (h, h, -h), (h, h, h), (h, -h, h)),
        ((-h, h, -h), (-h, h, h), (h, h, h), (h, h, -h)),
        ((-h, -h, -h), (h, -h, -h), (h, -h, h), (-h, -h, h)),
    )
    return tuple(
        Face(tuple(position.moved(dx, dy, dz) for dx, dy, dz in quad), color=PLAYER_COLOR)
        for quad in corners
    )


def _default_block() -> Rectangle3D:
    return Rectangle3D(Position(), width=2.0, height=3.0, depth=1.5)


def _default_offset() -> Position:
    return Position(0.0, 0.0, -10.0)


@dataclass(frozen=True)
class World:
    """A grid of blocks standing on a height map, shifted by ``offset``."""

    height_map: HeightMap
    spacing: float = BLOCK_SPACING
    block: Rectangle3D = field(default_factory=_default_block)
    offset: Position = field(default_factory=_default_offset)

    def blocks(self) -> Iterator[Rectangle3D]:
        """Every block of the grid in world coordinates, row by row."""
        g = self.height_map.grid_size
        ox, oy, oz = self.offset
        for x in range(-g, g + 1):
            for z in range(-g, g + 1):
                yield Rectangle3D(
                    Position(
                        x * self.spacing + ox,
                        self.height_map.height(x, z) + oy,
                        z * self.spacing + oz,
                    ),
                    self.block.width,
                    self.block.height,
                    self.block.depth,
                )

    def visible_blocks(self, frustum: Frustum) -> Iterable[Rectangle3D]:
        """The blocks not wholly outside ``frustum``."""
        return (block for block in self.blocks() if frustum.contains_rectangle(block))