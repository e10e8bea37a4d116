"""
game_engine.py: The authoritative game session.

Owns the paddle, ball and obstacles, advances them once per frame and drives
the phase transitions. Nothing in here touches pygame.
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional

from .data_models import (
    Ball, Direction, FrameInput, GameConfig, GameSnapshot, Obstacle, Paddle,
    Phase, Vec2,
)
from .obstacle_field import generate_obstacles
from .physics_core import PhysicsCore

TERMINAL_PHASES = (Phase.GAME_OVER, Phase.WON)


def build_paddle(config: GameConfig) -> Paddle:
    return Paddle(
        pos=Vec2((config.field_width - config.paddle_width) / 2, config.paddle_y),
        size=Vec2(config.paddle_width, config.paddle_height),
        speed=config.paddle_speed,
    )


def build_ball(config: GameConfig, paddle: Paddle) -> Ball:
    ball = Ball(center=Vec2(0.0, 0.0), radius=config.ball_radius, velocity=Vec2(0.0, 0.0))
    ball.place_above(paddle, Vec2(*config.ball_velocity))
    return ball


@dataclass
class GameEngine(PhysicsCore):
    """
    One game session.

    The client calls step() once per rendered frame with the polled input and
    the frame time normalized to the target rate, then reads snapshot().
    """
    config: GameConfig = field(default_factory=GameConfig)
    rng: random.Random = field(default_factory=random.Random)

    tick_count: int = 0
    score: int = 0
    lives: int = 0
    phase: Phase = Phase.PLAYING
    paddle: Optional[Paddle] = None
    ball: Optional[Ball] = None
    obstacles: List[Obstacle] = field(default_factory=list)

    def __post_init__(self):
        self.config.validate()
        self.reset()

    @property
    def launch_velocity(self) -> Vec2:
        return Vec2(*self.config.ball_velocity)

    def reset(self):
        """Starts a fresh session. Every piece of session state is replaced together."""
        paddle = build_paddle(self.config)
        ball = build_ball(self.config, paddle)
        obstacles = generate_obstacles(self.config, self.rng)

        self.paddle = paddle
        self.ball = ball
        self.obstacles = obstacles
        self.lives = self.config.starting_lives
        self.score = 0
        self.tick_count = 0
        self.phase = Phase.PLAYING

    def toggle(self):
        """Pauses or resumes; a no-op once the session has ended."""
        if self.phase is Phase.PLAYING:
            self.phase = Phase.PAUSED
        elif self.phase is Phase.PAUSED:
            self.phase = Phase.PLAYING

    def restart(self) -> bool:
        """Resets a finished session. Returns False if the session is still running."""
        if self.phase not in TERMINAL_PHASES:
            return False
        self.reset()
        return True

    @property
    def all_hit(self) -> bool:
        return all(obs.hit for obs in self.obstacles)

    @property
    def remaining(self) -> int:
        return sum(1 for obs in self.obstacles if not obs.hit)

    def step(self, frame_input: FrameInput, elapsed: float = 1.0) -> Phase:
        """
        The main simulation step. Mutates the entities and returns the phase
        the session is in afterwards.
        """
        # Finished sessions only listen for a restart
        if self.phase in TERMINAL_PHASES:
            if frame_input.confirm:
                self.restart()
            return self.phase

        if frame_input.confirm:
            self.toggle()

        self.tick_count += 1
        width = self.config.field_width

        # 1. Paddle input is live even while paused
        if frame_input.left:
            self.paddle.slide(Direction.LEFT, elapsed, width)
        if frame_input.right:
            self.paddle.slide(Direction.RIGHT, elapsed, width)

        # 2. First obstacle hit wins
        self._collide_obstacles()

        # 3. Paddle bounce
        if self.ball_hits(self.ball, self.paddle.pos, self.paddle.size):
            self.ball.bounce_vertical()

        # 4. Ball motion
        if self.phase is not Phase.PAUSED:
            self.ball.advance(elapsed, width)

        # 5. Miss
        if self.ball_missed(self.ball, self.config.field_height):
            self._lose_life()
            if self.phase is Phase.GAME_OVER:
                return self.phase

        # 6. Cleared field
        if self.all_hit:
            self.phase = Phase.WON

        return self.phase

    def _collide_obstacles(self):
        for obs in self.obstacles:
            if obs.hit:
                continue
            if self.ball_hits(self.ball, obs.pos, obs.size):
                obs.mark_hit()
                self.score += self.config.score_per_hit
                self.ball.bounce_vertical()
                break

    def _lose_life(self):
        self.lives = max(self.lives - 1, 0)
        if self.lives == 0:
            self.phase = Phase.GAME_OVER
            return
        self.ball.place_above(self.paddle, self.launch_velocity)

    def snapshot(self) -> GameSnapshot:
        paddle, ball = self.paddle, self.ball
        return GameSnapshot(
            paddle=(paddle.pos.x, paddle.pos.y, paddle.size.x, paddle.size.y),
            ball=(ball.center.x, ball.center.y, ball.radius),
            obstacles=tuple(obs.to_tuple() for obs in self.obstacles),
            score=self.score,
            lives=self.lives,
            phase=self.phase,
            tick=self.tick_count,
            remaining=self.remaining,
        )
