"""
Protocols for the collaborators of the game loop
"""

from classic_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["RendererProtocol"]
