import math

import pygame
import pytest

from greencube.app import Game, main
from greencube.camera import perspective, transform_point
from greencube.player import Key
from greencube.sun import sun_sphere
from greencube.terrain import Face, HeightMap, World, sky_faces
from greencube.transform import Sphere


def small_game(grid_size=1, **kwargs):
    return Game(world=World(HeightMap.generate(grid_size)), **kwargs)


def test_first_step_lands_player_on_ground():
    game = small_game()
    game.step(0.016, set())
    assert game.player.y == pytest.approx(3.5)
    assert game.player.on_ground is True
    assert game.player.velocity_y == 0.0


def test_jump_then_rise():
    game = small_game()
    game.step(0.016, set())
    game.step(0.016, {Key.JUMP})
    assert game.player.on_ground is False
    assert game.player.velocity_y == pytest.approx(5.0)
    game.step(0.1, set())
    assert game.player.y > 3.5
    assert game.player.velocity_y < 5.0


def test_step_forward_moves_along_yaw():
    game = small_game()
    game.step(0.016, {Key.FORWARD})
    assert game.player.x == pytest.approx(0.1)
    assert game.player.z == pytest.approx(-5.0)


def test_view_matrix_puts_player_in_front_of_camera():
    game = small_game()
    game.player.yaw = 0.7
    game.player.pitch = 0.3
    x, y, z, w = transform_point(game.view_matrix(), tuple(game.player.position))
    assert x == pytest.approx(0.0, abs=1e-9)
    assert y == pytest.approx(0.0, abs=1e-9)
    assert z == pytest.approx(-game.camera_distance)
    assert w == pytest.approx(1.0)


def test_initial_projection_matches_window():
    game = small_game()
    assert game.projection == pytest.approx(perspective(45.0, 800 / 600, 0.1, 100.0))


def test_resize_zero_height_counts_as_one():
    game = small_game()
    game.resize(640, 0)
    other = small_game()
    other.resize(640, 1)
    assert game.height == 1
    assert game.projection == pytest.approx(other.projection)


def test_draw_list_without_culling_holds_everything():
    game = small_game(grid_size=1)
    items = game.draw_list()
    assert tuple(items[:5]) == sky_faces()
    assert items[5] == sun_sphere(1.0)
    faces = [i for i in items[6:] if isinstance(i, Face)]
    assert len(faces) == 6 * 9
    assert len(items) == 5 + 1 + 6 * 9


def test_culled_draw_list_is_subset():
    full = small_game(grid_size=3).draw_list()
    culled = small_game(grid_size=3, cull=True).draw_list()
    assert len(culled) <= len(full)
    assert all(item in full for item in culled)
    assert not any(isinstance(i, Sphere) for i in culled) or sun_sphere(1.0) in culled


def _facing_block_game(yaw):
    game = small_game(grid_size=0)
    h = game.world.height_map.height(0, 0)
    game.player.x = 1.0
    game.player.z = -3.0
    game.player.y = h + 1.5
    game.player.yaw = yaw
    return game


def test_render_draws_block_ahead():
    width, height = 80, 60
    facing = pygame.Surface((width, height))
    _facing_block_game(-math.pi / 2).render(facing)
    away = pygame.Surface((width, height))
    _facing_block_game(math.pi / 2).render(away)
    center = (width // 2, height // 2)
    assert away.get_at(center) == away.get_at((0, 0))
    assert facing.get_at(center) != away.get_at(center)


def test_render_is_deterministic():
    first = pygame.Surface((40, 30))
    second = pygame.Surface((40, 30))
    _facing_block_game(-math.pi / 2).render(first)
    _facing_block_game(-math.pi / 2).render(second)
    assert pygame.image.tobytes(first, "RGB") == pygame.image.tobytes(second, "RGB")


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0


def test_main_rejects_bad_argument():
    with pytest.raises(SystemExit) as info:
        main(["--width", "wide"])
    assert info.value.code == 2