"""
Simulation state and per-tick update for Classic Pong
"""

import logging
from typing import Any

from classic_pong.core.entities import Ball, Field, GameSnapshot, Paddle, Scoreboard
from classic_pong.utils.config import GameConfig, game_config

logger = logging.getLogger(__name__)


class Simulation:
    """Owns the ball, both paddles and the score, and advances them one tick at a time"""

    def __init__(
        self,
        field: Field,
        ball: Ball,
        left_paddle: Paddle,
        right_paddle: Paddle,
        ai_speed: int = 2,
    ):
        self.field = field
        self.ball = ball
        self.left_paddle = left_paddle
        self.right_paddle = right_paddle
        self.ai_speed = ai_speed
        self.scoreboard = Scoreboard()
        self.tick_count = 0

    @classmethod
    def from_config(cls, config: GameConfig | None = None) -> "Simulation":
        """Builds the starting layout described by the configuration"""
        config = config or game_config
        field = Field(config.FIELD_WIDTH, config.FIELD_HEIGHT)
        ball = Ball(
            config.BALL_START_X,
            config.BALL_START_Y,
            config.BALL_DIAMETER,
            config.BALL_X_VELOCITY,
            config.BALL_Y_VELOCITY,
            field,
        )
        left_paddle = Paddle(
            config.LEFT_PADDLE_X,
            config.PADDLE_START_Y,
            config.PADDLE_WIDTH,
            config.PADDLE_HEIGHT,
            field,
        )
        right_paddle = Paddle(
            config.RIGHT_PADDLE_X,
            config.PADDLE_START_Y,
            config.PADDLE_WIDTH,
            config.PADDLE_HEIGHT,
            field,
        )
        return cls(field, ball, left_paddle, right_paddle, ai_speed=config.AI_SPEED)

    def tick(self) -> dict[str, list[Any]]:
        """Advances the game by one tick and returns what happened

        Order: ball motion, left then right paddle collision, AI paddle,
        player paddle, score check. Both paddles see the ball after its
        motion and collisions for this tick.
        """
        events: dict[str, list[Any]] = {
            "wall_bounces": [],
            "paddle_hits": [],
            "goals": [],
        }
        self.tick_count += 1

        if self.ball.move():
            events["wall_bounces"].append("top" if self.ball.y < 0 else "bottom")

        if self.ball.check_collision(self.left_paddle):
            events["paddle_hits"].append({"side": "left"})
        if self.ball.check_collision(self.right_paddle):
            events["paddle_hits"].append({"side": "right"})

        self.right_paddle.move_ai(self.ball, self.ai_speed)
        self.left_paddle.move()

        scorer = self.check_score()
        if scorer is not None:
            events["goals"].append({"side": scorer, "score": self.scoreboard.as_tuple()})

        return events

    def check_score(self) -> str | None:
        """Awards a point if the ball left the field sideways, returns the scoring side"""
        if self.ball.x < 0:
            self.scoreboard.point_for_right()
            scorer = "right"
        elif self.ball.x > self.field.width - self.ball.diameter:
            self.scoreboard.point_for_left()
            scorer = "left"
        else:
            return None

        logger.info("Point for %s player, score %d - %d", scorer, *self.scoreboard.as_tuple())
        self.reset_ball()
        return scorer

    def reset_ball(self) -> None:
        """Serves from the center with the horizontal direction reversed, vertical velocity kept"""
        self.ball.set_position(*self.field.center)
        self.ball.set_x_velocity(-self.ball.x_velocity)

    def get_snapshot(self) -> GameSnapshot:
        """Returns a read-only copy of the state for rendering"""
        return GameSnapshot(
            ball=self.ball.get_rect(),
            left_paddle=self.left_paddle.get_rect(),
            right_paddle=self.right_paddle.get_rect(),
            score=self.scoreboard.as_tuple(),
            field=self.field,
            tick=self.tick_count,
        )
