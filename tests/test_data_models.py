import pytest

from crabout.data_models import (
    Ball, Direction, GameConfig, Obstacle, Paddle, Vec2,
)


def make_paddle(x: float) -> Paddle:
    return Paddle(pos=Vec2(x, 375), size=Vec2(100, 10), speed=12)


class TestPaddle:
    def test_slide_right(self):
        paddle = make_paddle(270)
        paddle.slide(Direction.RIGHT, 1, 640)
        assert paddle.pos.x == 282

    def test_slide_left(self):
        paddle = make_paddle(270)
        paddle.slide(Direction.LEFT, 1, 640)
        assert paddle.pos.x == 258

    def test_slide_scales_with_elapsed(self):
        paddle = make_paddle(270)
        paddle.slide(Direction.RIGHT, 0.5, 640)
        assert paddle.pos.x == pytest.approx(276)

    def test_step_past_right_edge_is_dropped(self):
        paddle = make_paddle(535)
        paddle.slide(Direction.RIGHT, 1, 640)
        assert paddle.pos.x == 535

    def test_step_past_left_edge_is_dropped(self):
        paddle = make_paddle(5)
        paddle.slide(Direction.LEFT, 1, 640)
        assert paddle.pos.x == 5

    def test_step_onto_edges(self):
        paddle = make_paddle(12)
        paddle.slide(Direction.LEFT, 1, 640)
        assert paddle.pos.x == 0

        paddle = make_paddle(528)
        paddle.slide(Direction.RIGHT, 1, 640)
        assert paddle.pos.x == 540

    def test_never_leaves_field(self):
        paddle = make_paddle(270)
        for _ in range(100):
            paddle.slide(Direction.RIGHT, 1.7, 640)
            assert 0 <= paddle.pos.x <= 540
        for _ in range(100):
            paddle.slide(Direction.LEFT, 1.7, 640)
            assert 0 <= paddle.pos.x <= 540

    def test_center_on(self):
        paddle = make_paddle(0)
        paddle.center_on(320)
        assert paddle.pos.x == 270
        assert paddle.center_x == 320


class TestBall:
    def test_reflects_off_left_wall_and_ceiling_before_moving(self):
        ball = Ball(center=Vec2(5, 5), radius=10, velocity=Vec2(5, 5))
        ball.advance(1, 640)
        assert ball.velocity == Vec2(-5, -5)
        assert ball.center == Vec2(10, 10)

    def test_long_frame_does_not_leave_ball_outside(self):
        ball = Ball(center=Vec2(15, 15), radius=10, velocity=Vec2(-5, -5))
        ball.advance(12, 640)
        assert ball.center == Vec2(10, 10)

        for _ in range(6):
            ball.advance(1, 640)
            assert 10 <= ball.center.x <= 630
            assert ball.center.y >= 10
        assert ball.velocity == Vec2(5, 5)
        assert ball.center.x > 15

    def test_ball_past_right_wall_comes_back(self):
        ball = Ball(center=Vec2(660, 200), radius=10, velocity=Vec2(-5, 0))
        ball.advance(1, 640)
        assert ball.center.x == 630

        ball.advance(1, 640)
        ball.advance(1, 640)
        assert ball.center.x < 630
        assert ball.velocity.x < 0

    def test_reflects_off_right_wall(self):
        ball = Ball(center=Vec2(632, 200), radius=10, velocity=Vec2(5, 5))
        ball.advance(1, 640)
        assert ball.velocity == Vec2(-5, 5)
        assert ball.center == Vec2(627, 205)

    def test_bottom_is_not_a_wall(self):
        ball = Ball(center=Vec2(320, 475), radius=10, velocity=Vec2(5, 5))
        ball.advance(1, 640)
        assert ball.velocity == Vec2(5, 5)
        assert ball.center == Vec2(325, 480)

    def test_free_flight(self):
        ball = Ball(center=Vec2(320, 240), radius=10, velocity=Vec2(5, -5))
        ball.advance(2, 640)
        assert ball.center == Vec2(330, 230)
        assert ball.velocity == Vec2(5, -5)

    def test_place_above_paddle_copies_velocity(self):
        paddle = make_paddle(270)
        launch = Vec2(5, 5)
        ball = Ball(center=Vec2(1, 1), radius=10, velocity=Vec2(-3, -3))
        ball.place_above(paddle, launch)
        assert ball.center == Vec2(320, 355)
        assert ball.velocity == Vec2(5, 5)

        ball.bounce_vertical()
        assert launch == Vec2(5, 5)


def test_obstacle_is_hit_once():
    obstacle = Obstacle(pos=Vec2(0, 0), size=Vec2(70, 25))
    assert obstacle.mark_hit()
    assert obstacle.hit
    assert not obstacle.mark_hit()
    assert obstacle.hit
    assert obstacle.to_tuple() == (0, 0, 70, 25, True)


class TestGameConfig:
    def test_defaults_are_valid(self):
        config = GameConfig().validate()
        assert config.field_width == 640
        assert config.field_height == 480
        assert config.starting_lives == 3
        assert config.paddle_y == 375

    @pytest.mark.parametrize("overrides", [
        {"obstacle_min_width": 700},
        {"paddle_width": 641},
        {"starting_lives": 0},
        {"field_width": 0},
        {"ball_radius": -1},
        {"obstacle_rows": 0},
        {"obstacle_rows": 20},
        {"obstacle_brick_gap": 70},
        {"score_per_hit": -10},
        {"ground_offset": 480},
    ])
    def test_invalid_configs_fail_fast(self, overrides):
        with pytest.raises(ValueError):
            GameConfig(**overrides).validate()
