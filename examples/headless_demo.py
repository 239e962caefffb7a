"""
Runs Classic Pong without a window and prints what happened
"""

import logging

from classic_pong.core.game_loop import GameLoop
from classic_pong.core.physics import Simulation
from classic_pong.gui.headless_renderer import HeadlessRenderer
from classic_pong.utils.config import game_config


def run_headless(ticks: int = 3000) -> None:
    """Plays the given number of ticks as fast as possible, the left paddle never moves"""
    simulation = Simulation.from_config(game_config)
    renderer = HeadlessRenderer(max_frames=1)
    loop = GameLoop(simulation, renderer)

    hits = 0
    goals = 0
    for _ in range(ticks):
        events = loop.step()
        hits += len(events["paddle_hits"])
        goals += len(events["goals"])

    left, right = simulation.scoreboard.as_tuple()
    print(f"{ticks} ticks, {hits} paddle hits, {goals} goals")
    print(f"Final score: {left} - {right}")
    print(f"Last frame: {renderer.last_frame}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_headless()
