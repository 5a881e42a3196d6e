import math

import pytest

from greencube.camera import (
    IDENTITY,
    camera_eye,
    look_at,
    multiply,
    perspective,
    transform_point,
)
from greencube.transform import Position


def test_multiply_by_identity():
    m = perspective(45.0, 800.0 / 600.0, 0.1, 100.0)
    assert tuple(multiply(IDENTITY, m)) == pytest.approx(tuple(m), abs=1e-9)
    assert tuple(multiply(m, IDENTITY)) == pytest.approx(tuple(m), abs=1e-9)


def test_multiply_is_associative():
    a = perspective(60.0, 1.5, 0.5, 50.0)
    b = look_at((1.0, 2.0, 3.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    c = look_at((-2.0, 1.0, 4.0), (1.0, 0.5, 0.0), (0.0, 1.0, 0.0))
    left = tuple(multiply(multiply(a, b), c))
    right = tuple(multiply(a, multiply(b, c)))
    assert len(left) == 16
    assert left == pytest.approx(right, abs=1e-9)


def test_multiply_matches_sequential_transform():
    a = look_at((1.0, 2.0, 3.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    b = look_at((-2.0, 1.0, 4.0), (1.0, 0.5, 0.0), (0.0, 1.0, 0.0))
    p = (0.5, -1.0, 2.0)
    combined = tuple(transform_point(multiply(a, b), p))
    step = transform_point(b, p)
    assert combined == pytest.approx(tuple(transform_point(a, step[:3])), abs=1e-9)


def test_multiply_rejects_wrong_size():
    with pytest.raises(ValueError):
        multiply(IDENTITY, (1.0,) * 9)


def test_perspective_near_and_far_map_to_ndc_bounds():
    m = perspective(45.0, 800.0 / 600.0, 0.1, 100.0)
    _, _, z, w = transform_point(m, (0.0, 0.0, -0.1))
    assert z / w == pytest.approx(-1.0)
    _, _, z, w = transform_point(m, (0.0, 0.0, -100.0))
    assert z / w == pytest.approx(1.0)


@pytest.mark.parametrize(
    "args", [(45.0, 0.0, 0.1, 100.0), (45.0, 1.0, 5.0, 5.0), (0.0, 1.0, 0.1, 100.0)]
)
def test_perspective_rejects_degenerate(args):
    with pytest.raises(ValueError):
        perspective(*args)


def test_look_at_moves_eye_to_origin_and_target_ahead():
    eye, target = (0.0, 0.0, 5.0), (0.0, 0.0, 0.0)
    view = look_at(eye, target, (0.0, 1.0, 0.0))
    assert tuple(transform_point(view, eye)) == pytest.approx((0.0, 0.0, 0.0, 1.0), abs=1e-9)
    assert tuple(transform_point(view, target)) == pytest.approx(
        (0.0, 0.0, -5.0, 1.0), abs=1e-9
    )


def test_look_at_preserves_distances():
    eye = Position(3.0, 1.0, -2.0)
    view = look_at(eye, (0.0, 0.5, 0.0), (0.0, 1.0, 0.0))
    p = (1.0, 2.0, 3.0)
    x, y, z, _ = transform_point(view, p)
    assert math.hypot(x, y, z) == pytest.approx(math.dist(tuple(eye), p))


def test_look_at_rejects_degenerate():
    with pytest.raises(ValueError):
        look_at((1.0, 1.0, 1.0), (1.0, 1.0, 1.0), (0.0, 1.0, 0.0))
    with pytest.raises(ValueError):
        look_at((0.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 1.0, 0.0))


def test_camera_eye_keeps_distance():
    target = Position(0.0, 3.5, -5.0)
    eye = camera_eye(target, 0.7, -0.3, 2.0)
    assert math.dist(tuple(eye), tuple(target)) == pytest.approx(2.0)


def test_camera_eye_behind_along_x_at_zero_angles():
    target = Position(0.0, 3.5, -5.0)
    eye = camera_eye(target, 0.0, 0.0, 2.0)
    assert tuple(eye) == pytest.approx((-2.0, 3.5, -5.0), abs=1e-9)


def test_camera_eye_target_is_straight_ahead():
    target = Position(1.0, 2.0, 3.0)
    eye = camera_eye(target, 1.2, 0.4, 2.0)
    view = look_at(eye, target, (0.0, 1.0, 0.0))
    x, y, z, _ = transform_point(view, target)
    assert x == pytest.approx(0.0, abs=1e-9)
    assert y == pytest.approx(0.0, abs=1e-9)
    assert z == pytest.approx(-2.0)