"""
Classic Pong game entities: field, ball, paddles, scoreboard
"""

from dataclasses import dataclass

from classic_pong.core.collision import Rect
from classic_pong.core.collision import rects_overlap


@dataclass(frozen=True)
class Field:
    """Rectangular play area"""

    width: int
    height: int

    @property
    def center(self) -> tuple[int, int]:
        return (self.width // 2, self.height // 2)


class Ball:
    """Game ball, positioned by the top-left corner of its bounding box"""

    def __init__(
        self, x: int, y: int, diameter: int, x_velocity: int, y_velocity: int, field: Field
    ):
        self.x = x
        self.y = y
        self.diameter = diameter
        self.x_velocity = x_velocity
        self.y_velocity = y_velocity
        self.field = field

    def move(self) -> bool:
        """Advances the ball one tick, returns True if it bounced off the top or bottom wall"""
        self.x += self.x_velocity
        self.y += self.y_velocity

        # No reflection on the x axis, leaving the field sideways is a goal
        if self.y < 0 or self.y > self.field.height - self.diameter:
            self.y_velocity = -self.y_velocity
            return True
        return False

    def check_collision(self, paddle: "Paddle") -> bool:
        """Reverses horizontal velocity if the ball overlaps the paddle

        The ball is not pushed out of the paddle, so an overlap lasting
        several ticks reverses the velocity on each of them.
        """
        if rects_overlap(self.get_rect(), paddle.get_rect()):
            self.x_velocity = -self.x_velocity
            return True
        return False

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def set_x_velocity(self, velocity: int) -> None:
        self.x_velocity = velocity

    def set_y_velocity(self, velocity: int) -> None:
        self.y_velocity = velocity

    def get_rect(self) -> Rect:
        """Returns the bounding box (x, y, width, height)"""
        return (self.x, self.y, self.diameter, self.diameter)


class Paddle:
    """Player or AI paddle"""

    def __init__(self, x: int, y: int, width: int, height: int, field: Field):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.x_velocity = 0
        self.y_velocity = 0
        self.field = field

    @property
    def max_x(self) -> int:
        return self.field.width - self.width

    @property
    def max_y(self) -> int:
        return self.field.height - self.height

    def constrain_position(self) -> None:
        """Ensures the paddle stays inside the field"""
        self.x = max(0, min(self.max_x, self.x))
        self.y = max(0, min(self.max_y, self.y))

    def move(self) -> None:
        """Applies the current velocity, then clamps into the field"""
        self.y += self.y_velocity
        self.x += self.x_velocity
        self.constrain_position()

    def move_ai(self, ball: Ball, speed: int = 2) -> None:
        """Steps toward the ball by a fixed amount when it is above or below the paddle"""
        if ball.y < self.y:
            self.y -= speed
        elif ball.y > self.y + self.height:
            self.y += speed
        self.y = max(0, min(self.max_y, self.y))

    def set_x_velocity(self, velocity: int) -> None:
        self.x_velocity = velocity

    def set_y_velocity(self, velocity: int) -> None:
        self.y_velocity = velocity

    def get_rect(self) -> Rect:
        """Returns the collision rectangle properties (x, y, width, height)"""
        return (self.x, self.y, self.width, self.height)


class Scoreboard:
    """Points of the left and right players"""

    def __init__(self) -> None:
        self.left = 0
        self.right = 0

    def point_for_left(self) -> None:
        self.left += 1

    def point_for_right(self) -> None:
        self.right += 1

    def as_tuple(self) -> tuple[int, int]:
        return (self.left, self.right)


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of one frame for the renderer"""

    ball: Rect
    left_paddle: Rect
    right_paddle: Rect
    score: tuple[int, int]
    field: Field
    tick: int
