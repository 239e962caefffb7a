"""
GUI module for Classic Pong - PyGame interface
"""

from classic_pong.gui.game_app import PongApp, main
from classic_pong.gui.headless_renderer import HeadlessRenderer
from classic_pong.gui.keyboard import KeyboardTranslator
from classic_pong.gui.pygame_renderer import PygameRenderer

__all__ = [
    "PygameRenderer",
    "HeadlessRenderer",
    "KeyboardTranslator",
    "PongApp",
    "main",
]
