"""
Toolkit independent paddle input for Classic Pong
"""

from enum import Enum

from classic_pong.core.entities import Paddle


class Direction(Enum):
    """Movement directions a key can be bound to"""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# direction -> (axis, sign)
VELOCITY_TABLE: dict[Direction, tuple[str, int]] = {
    Direction.UP: ("y", -1),
    Direction.DOWN: ("y", 1),
    Direction.LEFT: ("x", -1),
    Direction.RIGHT: ("x", 1),
}


class InputController:
    """Turns key presses and releases into paddle velocity assignments

    Every call is a single attribute assignment on the paddle, so events
    may arrive from another thread than the one running the game loop.
    """

    def __init__(self, paddle: Paddle, speed: int = 5):
        self.paddle = paddle
        self.speed = speed

    def key_down(self, direction: Direction) -> None:
        """Sets the velocity for a pressed direction; key repeats set the same value"""
        axis, sign = VELOCITY_TABLE[direction]
        self._set_velocity(axis, sign * self.speed)

    def key_up(self, direction: Direction) -> None:
        """Stops movement on the released direction's axis"""
        axis, _ = VELOCITY_TABLE[direction]
        self._set_velocity(axis, 0)

    def _set_velocity(self, axis: str, velocity: int) -> None:
        if axis == "x":
            self.paddle.set_x_velocity(velocity)
        else:
            self.paddle.set_y_velocity(velocity)
