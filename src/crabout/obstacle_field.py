"""
obstacle_field.py: Randomized, gap-free brick layout.

The generator is a pure function of (config, rng). Pass a seeded
random.Random for a reproducible layout.
"""

import random
from typing import List, Optional

from .data_models import GameConfig, Obstacle, Vec2


def row_y(config: GameConfig, row: int) -> float:
    return config.obstacle_top_offset + row * (config.obstacle_height + config.obstacle_row_gap)


def generate_row(config: GameConfig, row: int, rng: random.Random) -> List[Obstacle]:
    """
    Tiles [0, field_width) with bricks separated by obstacle_brick_gap.
    Only the last brick of a row can be narrower than obstacle_min_width.
    """
    width_limit = config.field_width
    min_width = config.obstacle_min_width
    y = row_y(config, row)

    bricks: List[Obstacle] = []
    cursor = 0.0
    while cursor < width_limit:
        width = min_width + rng.random() * config.obstacle_width_range
        # Leave no sliver narrower than min_width at the end of the row
        if cursor + width + min_width > width_limit:
            width = width_limit - cursor

        bricks.append(Obstacle(
            pos=Vec2(cursor, y),
            size=Vec2(width, config.obstacle_height),
        ))
        cursor += width + config.obstacle_brick_gap
    return bricks


def generate_obstacles(config: GameConfig, rng: Optional[random.Random] = None) -> List[Obstacle]:
    """Builds every row, top to bottom. Each call produces a fresh layout."""
    rng = rng or random.Random()
    obstacles: List[Obstacle] = []
    for row in range(config.obstacle_rows):
        obstacles.extend(generate_row(config, row, rng))
    return obstacles
