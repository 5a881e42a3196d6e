"""Column-major 4x4 matrices for projection and a third-person camera."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from greencube.transform import Position

Matrix = tuple[float, ...]

IDENTITY: Matrix = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def _matrix(values: Iterable[float]) -> Matrix:
    m = tuple(float(v) for v in values)
    if len(m) != 16:
        raise ValueError(f"a 4x4 matrix needs 16 values, got {len(m)}")
    return m


def _vec(v: Iterable[float]) -> tuple[float, float, float]:
    x, y, z = v
    return float(x), float(y), float(z)


def _sub(a, b):
    return a[0] - b[0], a[1] - b[1], a[2] - b[2]


def _dot(a, b):
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a, b):
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(v, what: str):
    length = math.sqrt(_dot(v, v))
    if length == 0.0:
        raise ValueError(f"{what} has zero length")
    return v[0] / length, v[1] / length, v[2] / length


def perspective(fovy: float, aspect: float, near: float, far: float) -> Matrix:
    """A perspective projection; ``fovy`` is the vertical field of view in degrees."""
    if aspect == 0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    half = math.radians(fovy) / 2.0
    sine = math.sin(half)
    if sine == 0.0:
        raise ValueError("field of view must not be a multiple of 360 degrees")
    f = math.cos(half) / sine
    depth = near - far
    return (
        f / aspect, 0.0, 0.0, 0.0,
        0.0, f, 0.0, 0.0,
        0.0, 0.0, (far + near) / depth, -1.0,
        0.0, 0.0, 2.0 * far * near / depth, 0.0,
    )


def look_at(eye: Sequence[float], target: Sequence[float], up: Sequence[float]) -> Matrix:
    """A view matrix placing the eye at ``eye`` looking towards ``target``."""
    eye, target, up = _vec(eye), _vec(target), _vec(up)
    forward = _normalize(_sub(target, eye), "view direction")
    side = _normalize(_cross(forward, up), "up vector across view direction")
    upward = _cross(side, forward)
    return (
        side[0], upward[0], -forward[0], 0.0,
        side[1], upward[1], -forward[1], 0.0,
        side[2], upward[2], -forward[2], 0.0,
        -_dot(side, eye), -_dot(upward, eye), _dot(forward, eye), 1.0,
    )


def multiply(a: Sequence[float], b: Sequence[float]) -> Matrix:
    """The product ``a @ b`` of two column-major matrices."""
    a, b = _matrix(a), _matrix(b)
    return tuple(
        sum(a[k * 4 + row] * b[col * 4 + k] for k in range(4))
        for col in range(4)
        for row in range(4)
    )


def camera_eye(target: Position, yaw: float, pitch: float, distance: float) -> Position:
    """Where a camera sits ``distance`` behind ``target`` when facing along yaw and pitch."""
    look_x = math.cos(yaw) * math.cos(pitch)
    look_y = math.sin(pitch)
    look_z = math.sin(yaw) * math.cos(pitch)
    return Position(
        target.x - look_x * distance,
        target.y - look_y * distance,
        target.z - look_z * distance,
    )


def transform_point(matrix: Sequence[float], point: Sequence[float]) -> tuple[float, float, float, float]:
    """Apply ``matrix`` to the homogeneous point (x, y, z, 1)."""
    m = _matrix(matrix)
    x, y, z = _vec(point)
    return tuple(
        m[row] * x + m[4 + row] * y + m[8 + row] * z + m[12 + row] for row in range(4)
    )