"""
Core module of Classic Pong game
"""

from classic_pong.core.entities import Ball
from classic_pong.core.entities import Field
from classic_pong.core.entities import GameSnapshot
from classic_pong.core.entities import Paddle
from classic_pong.core.entities import Scoreboard
from classic_pong.core.game_loop import GameLoop
from classic_pong.core.input import Direction
from classic_pong.core.input import InputController
from classic_pong.core.physics import Simulation

__all__ = [
    "Ball",
    "Paddle",
    "Field",
    "Scoreboard",
    "GameSnapshot",
    "Simulation",
    "GameLoop",
    "Direction",
    "InputController",
]
