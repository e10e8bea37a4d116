"""
physics_core.py: The shared, deterministic collision logic.
"""

from .data_models import Ball, Vec2


class PhysicsCore:
    """
    Collision tests used by the game engine. Pure: nothing here mutates
    the entities it is given.
    """

    @staticmethod
    def circle_intersects_rect(center: Vec2, radius: float, rect_pos: Vec2, rect_size: Vec2) -> bool:
        """
        Clamped-distance circle vs axis-aligned rectangle test.

        Works on the per-axis distance between the circle center and the
        rectangle center, so every quadrant reduces to the same corner case.
        """
        half_w = rect_size.x / 2
        half_h = rect_size.y / 2
        dist_x = abs(center.x - (rect_pos.x + half_w))
        dist_y = abs(center.y - (rect_pos.y + half_h))

        # 1. Separating axis
        if dist_x > half_w + radius or dist_y > half_h + radius:
            return False

        # 2. Center inside the horizontal or vertical slab of the rectangle
        if dist_x <= half_w or dist_y <= half_h:
            return True

        # 3. Corner
        corner_x = dist_x - half_w
        corner_y = dist_y - half_h
        return corner_x * corner_x + corner_y * corner_y <= radius * radius

    def ball_hits(self, ball: Ball, rect_pos: Vec2, rect_size: Vec2) -> bool:
        return self.circle_intersects_rect(ball.center, ball.radius, rect_pos, rect_size)

    def ball_missed(self, ball: Ball, field_height: float) -> bool:
        """True once the bottom of the ball has passed the bottom of the field."""
        return ball.center.y + ball.radius > field_height
