"""The game: world state, frame updates, a draw list and a software renderer."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

import pygame

from greencube.camera import Matrix, camera_eye, look_at, multiply, perspective, transform_point
from greencube.frustum import Frustum
from greencube.lighting import LightingSetup, default_lighting, shade
from greencube.player import Key, MouseLook, Player
from greencube.sun import SUN_COLOR, SUN_RADIUS, sun_sphere
from greencube.terrain import SKY_COLOR, Face, HeightMap, World, box_faces, sky_faces
from greencube.texture import Texture, TextureError, load_texture
from greencube.transform import Position, Sphere

FIELD_OF_VIEW = 45.0
NEAR_PLANE = 0.1
FAR_PLANE = 100.0
TARGET_FPS = 60
WINDOW_TITLE = "Green Cube"
BLOCK_COLOR = (0.2, 0.8, 0.2)
UP = (0.0, 1.0, 0.0)

DrawItem = Union[Face, Sphere]


def _default_world() -> World:
    return World(HeightMap.generate())


def _to_rgb(color: Sequence[float]) -> tuple[int, int, int]:
    return tuple(round(255 * min(1.0, max(0.0, c))) for c in color[:3])


def _sub(a: Position, b: Position) -> tuple[float, float, float]:
    return a.x - b.x, a.y - b.y, a.z - b.z


def _cross(a, b):
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


@dataclass
class Game:
    """Everything a frame needs: the player, the world, the sun and the camera."""

    world: World = field(default_factory=_default_world)
    player: Player = field(default_factory=Player)
    mouse_look: MouseLook = field(default_factory=MouseLook)
    lighting: LightingSetup = field(default_factory=default_lighting)
    texture: Optional[Texture] = None
    sun_angle: float = 1.0
    camera_distance: float = 2.0
    cull: bool = False
    width: int = 800
    height: int = 600
    projection: Matrix = field(init=False)

    def __post_init__(self) -> None:
        self.resize(self.width, self.height)

    def step(self, dt: float, keys) -> None:
        """Advance one frame: gravity first, then the held keys."""
        self.player.update_physics(dt)
        self.player.handle_input(keys)

    def view_matrix(self) -> Matrix:
        """A third-person view looking at the player from behind."""
        target = self.player.position
        eye = camera_eye(target, self.player.yaw, self.player.pitch, self.camera_distance)
        return look_at(tuple(eye), tuple(target), UP)

    def resize(self, width: int, height: int) -> None:
        """Adopt a new viewport size; a zero height counts as one."""
        if height == 0:
            height = 1
        self.width, self.height = width, height
        self.projection = perspective(FIELD_OF_VIEW, width / height, NEAR_PLANE, FAR_PLANE)

    def _frustum(self) -> Frustum:
        if not self.cull:
            return Frustum()
        return Frustum.from_matrices(self.projection, self.view_matrix())

    def draw_list(self) -> list[DrawItem]:
        """What a frame draws, in order: sky walls, the sun, then block faces."""
        frustum = self._frustum()
        items: list[DrawItem] = list(sky_faces())
        sun = sun_sphere(self.sun_angle)
        if frustum.contains_sphere(sun):
            items.append(sun)
        for block in self.world.visible_blocks(frustum):
            items.extend(box_faces(block))
        return items

    def _block_color(self) -> tuple[float, float, float]:
        if self.texture is None:
            return BLOCK_COLOR
        return tuple(self.texture.sample(0.5, 0.5)[:3])

    def render(self, surface: pygame.Surface) -> None:
        """Draw the scene onto ``surface`` with painter's-order polygons."""
        width, height = surface.get_size()
        clip = multiply(self.projection, self.view_matrix())
        eye = camera_eye(
            self.player.position, self.player.yaw, self.player.pitch, self.camera_distance
        )
        surface.fill(_to_rgb(SKY_COLOR))

        def project(point: Position):
            cx, cy, _, cw = transform_point(clip, tuple(point))
            if cw < NEAR_PLANE:
                return None
            return (cx / cw * 0.5 + 0.5) * width, (0.5 - cy / cw * 0.5) * height, cw

        block_color = self._block_color()
        queue = []
        for item in self.draw_list():
            if isinstance(item, Sphere):
                projected = project(item.center)
                if projected is None:
                    continue
                sx, sy, depth = projected
                radius = item.radius * self.projection[5] * (height / 2) / depth
                normal = _sub(eye, item.center)
                color = shade(SUN_COLOR, normal, self.lighting) if any(normal) else SUN_COLOR
                queue.append((depth, "circle", ((sx, sy), max(1, round(radius))), _to_rgb(color)))
                continue
            points = [project(v) for v in item.vertices]
            if any(p is None for p in points):
                continue
            polygon = [(p[0], p[1]) for p in points]
            if item.color == SKY_COLOR:
                pygame.draw.polygon(surface, _to_rgb(SKY_COLOR), polygon)
                continue
            base = item.color if item.color is not None else block_color
            v0, v1, v3 = item.vertices[0], item.vertices[1], item.vertices[3]
            normal = _cross(_sub(v1, v0), _sub(v3, v0))
            to_eye = _sub(eye, v0)
            if sum(n * t for n, t in zip(normal, to_eye)) < 0:
                normal = tuple(-n for n in normal)
            color = shade(base, normal, self.lighting) if any(normal) else base
            depth = sum(p[2] for p in points) / len(points)
            queue.append((depth, "polygon", polygon, _to_rgb(color)))

        queue.sort(key=lambda entry: entry[0], reverse=True)
        for _, kind, shape, color in queue:
            if kind == "circle":
                center, radius = shape
                pygame.draw.circle(surface, color, center, radius)
            else:
                pygame.draw.polygon(surface, color, shape)


_KEY_BINDINGS = {
    Key.FORWARD: (pygame.K_UP, pygame.K_w),
    Key.BACKWARD: (pygame.K_DOWN, pygame.K_s),
    Key.LEFT: (pygame.K_LEFT, pygame.K_a),
    Key.RIGHT: (pygame.K_RIGHT, pygame.K_d),
    Key.TURN_LEFT: (pygame.K_q,),
    Key.TURN_RIGHT: (pygame.K_e,),
    Key.JUMP: (pygame.K_SPACE,),
}


def _held_keys() -> set[Key]:
    pressed = pygame.key.get_pressed()
    return {key for key, codes in _KEY_BINDINGS.items() if any(pressed[c] for c in codes)}


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="greencube", description="Walk over a field of blocks.")
    parser.add_argument("--texture", help="image used for the blocks")
    parser.add_argument("--width", type=int, default=800, help="window width")
    parser.add_argument("--height", type=int, default=600, help="window height")
    parser.add_argument("--grid-size", type=int, default=100, help="blocks on each side of the origin")
    parser.add_argument("--no-cull", action="store_true", help="draw blocks outside the view too")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open a window and run the game until it is closed."""
    args = _parse_args(argv)
    texture = None
    if args.texture:
        try:
            texture = load_texture(args.texture)
        except TextureError as exc:
            print(exc, file=sys.stderr)

    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        game = Game(
            world=World(HeightMap.generate(args.grid_size)),
            texture=texture,
            cull=not args.no_cull,
            width=args.width,
            height=args.height,
        )
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
                    game.resize(*event.size)
                elif event.type == pygame.KEYDOWN:
                    game.player.handle_input(_held_keys())
            if not running:
                break
            dt = clock.tick(TARGET_FPS) / 1000.0
            game.step(dt, _held_keys())
            w, h = screen.get_size()
            warp = game.mouse_look.update(game.player, pygame.mouse.get_pos(), (0, 0, w, h))
            if warp is not None:
                pygame.mouse.set_pos(warp)
            game.render(screen)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())