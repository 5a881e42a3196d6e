"""The player: keyboard movement, jumping under gravity and mouse look."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Collection, Optional

from greencube.transform import Position

Point = tuple[int, int]
Rect = tuple[int, int, int, int]


class Key(enum.Enum):
    """Player actions: W/Up, S/Down, A/Left, D/Right, Q, E and Space."""

    FORWARD = enum.auto()
    BACKWARD = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    TURN_LEFT = enum.auto()
    TURN_RIGHT = enum.auto()
    JUMP = enum.auto()


@dataclass
class Player:
    """Position, orientation and vertical motion of the player."""

    x: float = 0.0
    y: float = 3.5
    z: float = -5.0
    yaw: float = 0.0
    pitch: float = 0.0
    velocity_y: float = 0.0
    on_ground: bool = False
    gravity: float = -9.8
    ground_y: float = 3.5
    jump_strength: float = 5.0
    move_speed: float = 0.1
    strafe_speed: float = 0.1
    rotate_speed: float = 0.2

    @property
    def position(self) -> Position:
        return Position(self.x, self.y, self.z)

    def update_physics(self, dt: float) -> None:
        """Fall under gravity while airborne and land on the ground plane."""
        if not self.on_ground:
            self.velocity_y += self.gravity * dt
            self.y += self.velocity_y * dt
        if self.y <= self.ground_y:
            self.y = self.ground_y
            self.velocity_y = 0.0
            self.on_ground = True

    def handle_input(self, keys: Collection[Key]) -> None:
        """Apply one frame of the held keys."""
        side = self.yaw + math.pi / 2
        if Key.FORWARD in keys:
            self.x += math.cos(self.yaw) * self.move_speed
            self.z += math.sin(self.yaw) * self.move_speed
        if Key.BACKWARD in keys:
            self.x -= math.cos(self.yaw) * self.move_speed
            self.z -= math.sin(self.yaw) * self.move_speed
        if Key.LEFT in keys:
            self.x -= math.cos(side) * self.strafe_speed
            self.z -= math.sin(side) * self.strafe_speed
        if Key.RIGHT in keys:
            self.x += math.cos(side) * self.strafe_speed
            self.z += math.sin(side) * self.strafe_speed
        if Key.TURN_LEFT in keys:
            self.yaw -= math.sin(self.yaw + math.pi / 2) * self.rotate_speed
        if Key.TURN_RIGHT in keys:
            self.yaw += math.sin(self.yaw + math.pi / 2) * self.rotate_speed
        if Key.JUMP in keys and self.on_ground:
            self.velocity_y = self.jump_strength
            self.on_ground = False


@dataclass
class MouseLook:
    """Turns cursor movement inside the window into yaw and pitch."""

    sensitivity: float = 0.002
    pitch_limit: float = 0.506
    last: Optional[Point] = None

    def update(self, player: Player, mouse: Point, window_rect: Rect) -> Optional[Point]:
        """Rotate ``player`` by the cursor movement since the last call.

        ``window_rect`` is (left, top, right, bottom) in screen coordinates.
        Returns the screen point the cursor should be moved to when tracking
        starts, otherwise None.
        """
        mx, my = mouse
        left, top, right, bottom = window_rect
        if mx < left or mx > right or my < top or my > bottom:
            self.last = None
            return None

        warp = None
        if self.last is None:
            warp = (left + (right - left) // 2, top + (bottom - top) // 2)
            self.last = (mx, my)

        dx = (mx - self.last[0]) * self.sensitivity
        dy = (my - self.last[1]) * self.sensitivity
        player.yaw += dx
        player.pitch -= dy
        player.pitch = max(-self.pitch_limit, min(self.pitch_limit, player.pitch))
        self.last = (mx, my)
        return warp