"""
Classic Pong: a ball, two paddles and a reactive AI on a fixed playfield
"""

__version__ = "1.0.0"
