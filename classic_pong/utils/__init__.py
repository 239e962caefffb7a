"""
Utility module of Classic Pong game
"""

from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import game_config

__all__ = ["game_config", "GameConfig"]
