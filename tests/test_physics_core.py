import random

import pytest

from crabout.data_models import Ball, Vec2
from crabout.physics_core import PhysicsCore

circle_intersects_rect = PhysicsCore.circle_intersects_rect


def test_ball_overlapping_top_edge():
    assert circle_intersects_rect(Vec2(125, 90), 10, Vec2(100, 100), Vec2(50, 20))


def test_ball_just_above_top_edge():
    assert not circle_intersects_rect(Vec2(125, 89), 10, Vec2(100, 100), Vec2(50, 20))


def test_center_inside_rect():
    assert circle_intersects_rect(Vec2(110, 105), 1, Vec2(100, 100), Vec2(50, 20))


def test_touching_face_counts_as_hit():
    assert circle_intersects_rect(Vec2(15, 5), 5, Vec2(0, 0), Vec2(10, 10))


@pytest.mark.parametrize("center, expected", [
    ((17, 17), True),     # corner distance sqrt(98) < 10
    ((18, 18), False),    # inside both slabs' reach but outside the corner arc
    ((-7, -7), True),
    ((-8, 18), False),
])
def test_corner_region(center, expected):
    assert circle_intersects_rect(Vec2(*center), 10, Vec2(0, 0), Vec2(10, 10)) is expected


def test_far_away():
    assert not circle_intersects_rect(Vec2(0, 0), 5, Vec2(100, 100), Vec2(10, 10))


def test_symmetric_under_axis_reflection():
    rng = random.Random(7)
    for _ in range(500):
        center = Vec2(rng.uniform(-50, 150), rng.uniform(-50, 150))
        radius = rng.uniform(1, 30)
        pos = Vec2(rng.uniform(0, 80), rng.uniform(0, 80))
        size = Vec2(rng.uniform(1, 60), rng.uniform(1, 60))
        result = circle_intersects_rect(center, radius, pos, size)

        mirrored_x = circle_intersects_rect(
            Vec2(-center.x, center.y), radius, Vec2(-(pos.x + size.x), pos.y), size)
        mirrored_y = circle_intersects_rect(
            Vec2(center.x, -center.y), radius, Vec2(pos.x, -(pos.y + size.y)), size)
        assert mirrored_x == result
        assert mirrored_y == result


def test_does_not_mutate_inputs():
    center, pos, size = Vec2(1, 2), Vec2(3, 4), Vec2(5, 6)
    circle_intersects_rect(center, 3, pos, size)
    assert (center, pos, size) == (Vec2(1, 2), Vec2(3, 4), Vec2(5, 6))


def test_ball_helpers():
    core = PhysicsCore()
    ball = Ball(center=Vec2(320, 470), radius=10, velocity=Vec2(5, 5))
    assert not core.ball_missed(ball, 480)
    assert core.ball_hits(ball, Vec2(300, 475), Vec2(100, 10))
    assert not core.ball_hits(ball, Vec2(0, 0), Vec2(100, 10))

    ball.center.y = 471
    assert core.ball_missed(ball, 480)
