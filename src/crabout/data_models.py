"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .constants import (
    FIELD_WIDTH, FIELD_HEIGHT, GROUND_OFFSET,
    PADDLE_WIDTH, PADDLE_HEIGHT, PADDLE_SPEED,
    BALL_RADIUS, BALL_VELOCITY,
    OBSTACLE_ROWS, OBSTACLE_MIN_WIDTH, OBSTACLE_WIDTH_RANGE, OBSTACLE_HEIGHT,
    OBSTACLE_TOP_OFFSET, OBSTACLE_ROW_GAP, OBSTACLE_BRICK_GAP,
    SCORE_PER_HIT, STARTING_LIVES,
)


class Direction(Enum):
    LEFT = -1
    RIGHT = 1


class Phase(Enum):
    """Top-level mode of a game session."""
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    WON = "won"


@dataclass
class Vec2:
    x: float
    y: float

    def copy(self) -> "Vec2":
        return Vec2(self.x, self.y)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass
class GameConfig:
    """
    Every tunable of a session. Defaults come from constants.py.

    Call validate() before building entities from it; a bad config is a
    programming error and raises ValueError.
    """
    field_width: float = FIELD_WIDTH
    field_height: float = FIELD_HEIGHT
    ground_offset: float = GROUND_OFFSET

    paddle_width: float = PADDLE_WIDTH
    paddle_height: float = PADDLE_HEIGHT
    paddle_speed: float = PADDLE_SPEED

    ball_radius: float = BALL_RADIUS
    ball_velocity: Tuple[float, float] = BALL_VELOCITY

    obstacle_rows: int = OBSTACLE_ROWS
    obstacle_min_width: float = OBSTACLE_MIN_WIDTH
    obstacle_width_range: float = OBSTACLE_WIDTH_RANGE
    obstacle_height: float = OBSTACLE_HEIGHT
    obstacle_top_offset: float = OBSTACLE_TOP_OFFSET
    obstacle_row_gap: float = OBSTACLE_ROW_GAP
    obstacle_brick_gap: float = OBSTACLE_BRICK_GAP

    score_per_hit: int = SCORE_PER_HIT
    starting_lives: int = STARTING_LIVES

    @property
    def paddle_y(self) -> float:
        """Top edge of the paddle (the paddle is centered on the ground line)."""
        return self.field_height - self.ground_offset - self.paddle_height / 2

    @property
    def obstacles_bottom(self) -> float:
        return self.obstacle_top_offset + self.obstacle_rows * (
            self.obstacle_height + self.obstacle_row_gap)

    def validate(self) -> "GameConfig":
        """Raises ValueError describing the first inconsistency found."""
        if self.field_width <= 0 or self.field_height <= 0:
            raise ValueError(
                f"Field size must be positive, got {self.field_width}x{self.field_height}")
        if self.paddle_width <= 0 or self.paddle_height <= 0:
            raise ValueError("Paddle size must be positive")
        if self.paddle_width > self.field_width:
            raise ValueError(
                f"Paddle width {self.paddle_width} exceeds field width {self.field_width}")
        if self.paddle_speed < 0:
            raise ValueError("Paddle speed must not be negative")
        if not 0 < self.ground_offset < self.field_height:
            raise ValueError(
                f"Ground offset {self.ground_offset} must lie inside the field")
        if self.ball_radius <= 0:
            raise ValueError("Ball radius must be positive")
        if 2 * self.ball_radius > self.field_width:
            raise ValueError("Ball does not fit inside the field")
        if self.paddle_y - 2 * self.ball_radius - self.ball_radius < 0:
            raise ValueError("No room to serve the ball above the paddle")
        if self.obstacle_rows < 1:
            raise ValueError("At least one obstacle row is required")
        if self.obstacle_min_width <= 0 or self.obstacle_height <= 0:
            raise ValueError("Obstacle size must be positive")
        if self.obstacle_min_width > self.field_width:
            raise ValueError(
                f"Obstacle minimum width {self.obstacle_min_width} "
                f"exceeds field width {self.field_width}")
        if self.obstacle_width_range < 0:
            raise ValueError("Obstacle width range must not be negative")
        if self.obstacle_brick_gap < 0 or self.obstacle_row_gap < 0:
            raise ValueError("Obstacle gaps must not be negative")
        if self.obstacle_brick_gap >= self.obstacle_min_width:
            raise ValueError("Brick gap must be narrower than the minimum brick")
        if self.obstacles_bottom >= self.paddle_y:
            raise ValueError(
                f"Obstacle rows end at y={self.obstacles_bottom}, "
                f"below the paddle at y={self.paddle_y}")
        if self.score_per_hit < 0:
            raise ValueError("Score per hit must not be negative")
        if self.starting_lives < 1:
            raise ValueError("A session needs at least one life")
        return self


@dataclass
class Paddle:
    """Player paddle. pos is the top-left corner."""
    pos: Vec2
    size: Vec2
    speed: float

    def slide(self, direction: Direction, elapsed: float, field_width: float):
        """
        Moves the paddle by speed * elapsed. A step that would leave
        [0, field_width] is dropped entirely, the paddle never snaps to the edge.
        """
        step = self.speed * elapsed
        if direction is Direction.LEFT:
            if self.pos.x - step >= 0:
                self.pos.x -= step
        elif self.pos.x + step + self.size.x <= field_width:
            self.pos.x += step

    def center_on(self, x: float):
        self.pos.x = x - self.size.x / 2

    @property
    def center_x(self) -> float:
        return self.pos.x + self.size.x / 2


@dataclass
class Ball:
    center: Vec2
    radius: float
    velocity: Vec2

    def advance(self, elapsed: float, field_width: float):
        """
        Reflects off the side walls and the ceiling, then integrates.
        The bottom edge is not a wall: crossing it is a miss.

        After integration the center is pulled back to [radius, field_width - radius]
        and below the ceiling, so a long frame cannot leave the ball outside.
        """
        if (self.center.x + self.radius >= field_width
                or self.center.x - self.radius <= 0):
            self.velocity.x *= -1
        if self.center.y - self.radius <= 0:
            self.velocity.y *= -1

        self.center.x += self.velocity.x * elapsed
        self.center.y += self.velocity.y * elapsed

        self.center.x = min(max(self.center.x, self.radius), field_width - self.radius)
        self.center.y = max(self.center.y, self.radius)

    def bounce_vertical(self):
        self.velocity.y *= -1

    def place_above(self, paddle: Paddle, velocity: Vec2):
        """Serves the ball from just above the paddle center."""
        self.center = Vec2(paddle.center_x, paddle.pos.y - 2 * self.radius)
        self.velocity = velocity.copy()


@dataclass
class Obstacle:
    """A brick. Once hit it stays in the field, marked as destroyed."""
    pos: Vec2
    size: Vec2
    hit: bool = False

    def mark_hit(self) -> bool:
        """Returns True only for the first hit."""
        if self.hit:
            return False
        self.hit = True
        return True

    def to_tuple(self) -> Tuple[float, float, float, float, bool]:
        return (self.pos.x, self.pos.y, self.size.x, self.size.y, self.hit)


@dataclass(frozen=True)
class FrameInput:
    """Input polled by the client for one frame."""
    left: bool = False      # held
    right: bool = False     # held
    confirm: bool = False   # pressed this frame: pause toggle / restart
    quit: bool = False


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only copy of everything the client needs to draw one frame."""
    paddle: Tuple[float, float, float, float]
    ball: Tuple[float, float, float]
    obstacles: Tuple[Tuple[float, float, float, float, bool], ...]
    score: int
    lives: int
    phase: Phase
    tick: int = 0
    remaining: int = 0
