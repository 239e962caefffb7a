"""
Unit tests for the simulation

Tests the per-tick update including:
- Starting layout built from configuration
- Score boundaries and serve after a goal
- Tick ordering between ball, AI paddle and player paddle
"""

import logging

import pytest

from classic_pong.core.entities import Ball, Field, Paddle
from classic_pong.core.physics import Simulation
from classic_pong.utils.config import GameConfig


@pytest.fixture
def simulation():
    return Simulation.from_config(GameConfig())


def make_simulation(ball_x, ball_y, vx, vy, field=Field(600, 400)):
    """Simulation with the default paddles and a custom ball"""
    ball = Ball(ball_x, ball_y, 10, vx, vy, field)
    left = Paddle(50, 150, 10, 100, field)
    right = Paddle(540, 150, 10, 100, field)
    return Simulation(field, ball, left, right)


class TestSimulationSetup:
    """Test the starting layout"""

    def test_default_layout(self, simulation):
        assert simulation.field == Field(600, 400)
        assert simulation.ball.get_rect() == (300, 200, 10, 10)
        assert (simulation.ball.x_velocity, simulation.ball.y_velocity) == (5, 5)
        assert simulation.left_paddle.get_rect() == (50, 150, 10, 100)
        assert simulation.right_paddle.get_rect() == (540, 150, 10, 100)
        assert simulation.scoreboard.as_tuple() == (0, 0)
        assert simulation.ai_speed == 2
        assert simulation.tick_count == 0

    def test_layout_from_custom_config(self):
        config = GameConfig(FIELD_WIDTH=800, FIELD_HEIGHT=600, RIGHT_PADDLE_X=740, AI_SPEED=3)
        sim = Simulation.from_config(config)
        assert sim.field == Field(800, 600)
        assert sim.right_paddle.x == 740
        assert sim.ai_speed == 3
        assert sim.ball.field is sim.field
        assert sim.left_paddle.field is sim.field


class TestScoring:
    """Test check_score and reset_ball"""

    def test_left_exit_scores_for_right(self):
        """Ball at x=-1 on a 600 wide field: right scores, serve from (300, 200)"""
        sim = make_simulation(-1, 50, -5, -3)
        assert sim.check_score() == "right"
        assert sim.scoreboard.as_tuple() == (0, 1)
        assert (sim.ball.x, sim.ball.y) == (300, 200)
        assert sim.ball.x_velocity == 5
        assert sim.ball.y_velocity == -3

    def test_right_exit_scores_for_left(self):
        sim = make_simulation(591, 120, 5, 4)
        assert sim.check_score() == "left"
        assert sim.scoreboard.as_tuple() == (1, 0)
        assert (sim.ball.x, sim.ball.y) == (300, 200)
        assert sim.ball.x_velocity == -5
        assert sim.ball.y_velocity == 4

    @pytest.mark.parametrize("x", [0, 1, 300, 589, 590])
    def test_inside_does_not_score(self, x):
        """x == 0 and x == width - diameter are still in play"""
        sim = make_simulation(x, 200, -5, 5)
        assert sim.check_score() is None
        assert sim.scoreboard.as_tuple() == (0, 0)
        assert sim.ball.x == x

    def test_reset_ball_keeps_object(self):
        """The ball is repositioned, never recreated"""
        sim = make_simulation(-1, 50, -5, 2)
        ball = sim.ball
        sim.check_score()
        assert sim.ball is ball
        assert ball.diameter == 10

    def test_goal_is_logged(self, caplog):
        sim = make_simulation(-1, 50, -5, 2)
        with caplog.at_level(logging.INFO, logger="classic_pong.core.physics"):
            sim.check_score()
        assert "Point for right player" in caplog.text

    def test_scores_only_increase(self, simulation):
        previous = simulation.scoreboard.as_tuple()
        for _ in range(3000):
            simulation.tick()
            current = simulation.scoreboard.as_tuple()
            assert current[0] >= previous[0] and current[1] >= previous[1]
            previous = current


class TestTick:
    """Test the ordered tick"""

    def test_boundary_end_to_end(self):
        """Ball at (5, 200) moving left: x=0 after one tick is no goal, x=-5 after two is"""
        sim = make_simulation(5, 200, -5, 0)

        events = sim.tick()
        assert sim.ball.x == 0
        assert events["goals"] == []
        assert sim.scoreboard.as_tuple() == (0, 0)

        events = sim.tick()
        assert events["goals"] == [{"side": "right", "score": (0, 1)}]
        assert (sim.ball.x, sim.ball.y) == (300, 200)
        assert sim.ball.x_velocity == 5

    def test_paddle_hit_event(self):
        sim = make_simulation(65, 200, -5, 0)
        events = sim.tick()
        assert events["paddle_hits"] == [{"side": "left"}]
        assert sim.ball.x_velocity == 5

    def test_right_paddle_hit_event(self):
        sim = make_simulation(527, 200, 5, 0)
        events = sim.tick()
        assert events["paddle_hits"] == [{"side": "right"}]
        assert sim.ball.x_velocity == -5

    def test_wall_bounce_event(self):
        sim = make_simulation(300, 2, 5, -5)
        events = sim.tick()
        assert events["wall_bounces"] == ["top"]
        assert sim.ball.y_velocity == 5

        sim = make_simulation(300, 388, 5, 5)
        assert sim.tick()["wall_bounces"] == ["bottom"]

    def test_ai_sees_ball_after_motion(self):
        """The AI paddle reacts to where the ball is after this tick's move"""
        sim = make_simulation(300, 152, 5, -5)
        sim.tick()
        # ball.y is 147 after the move, above the paddle at 150
        assert sim.ball.y == 147
        assert sim.right_paddle.y == 148

    def test_player_paddle_uses_velocity(self):
        sim = make_simulation(300, 200, 5, 0)
        sim.left_paddle.set_y_velocity(-5)
        sim.left_paddle.set_x_velocity(5)
        sim.tick()
        assert (sim.left_paddle.x, sim.left_paddle.y) == (55, 145)

    def test_player_paddle_moves_after_collision(self):
        """The ball collides with the paddle position from before its move this tick"""
        sim = make_simulation(67, 200, -5, 0)
        sim.left_paddle.set_x_velocity(5)
        sim.tick()
        # ball at 62 does not touch the paddle at 50..60, the paddle then moves to 55
        assert sim.ball.x_velocity == -5
        assert sim.left_paddle.x == 55

    def test_tick_counter(self, simulation):
        for _ in range(5):
            simulation.tick()
        assert simulation.tick_count == 5
        assert simulation.get_snapshot().tick == 5

    def test_paddles_stay_in_field(self, simulation):
        simulation.left_paddle.set_y_velocity(5)
        simulation.left_paddle.set_x_velocity(-5)
        for _ in range(500):
            simulation.tick()
            for paddle in (simulation.left_paddle, simulation.right_paddle):
                assert 0 <= paddle.y <= 400 - paddle.height
                assert 0 <= paddle.x <= 600 - paddle.width


class TestSnapshot:
    """Test get_snapshot"""

    def test_snapshot_contents(self, simulation):
        simulation.scoreboard.point_for_left()
        snapshot = simulation.get_snapshot()
        assert snapshot.ball == (300, 200, 10, 10)
        assert snapshot.left_paddle == (50, 150, 10, 100)
        assert snapshot.right_paddle == (540, 150, 10, 100)
        assert snapshot.score == (1, 0)
        assert snapshot.field == Field(600, 400)

    def test_snapshot_is_a_copy(self, simulation):
        snapshot = simulation.get_snapshot()
        simulation.tick()
        assert snapshot.ball == (300, 200, 10, 10)
        with pytest.raises(AttributeError):
            snapshot.score = (9, 9)
