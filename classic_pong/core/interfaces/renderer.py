"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Any, Protocol

from classic_pong.core.entities import GameSnapshot


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    Renderers only read the snapshot they are given; they never mutate the
    simulation. Enables a Pygame window and a headless recorder.
    """

    def render_frame(self, snapshot: GameSnapshot) -> None:
        """
        Render a single frame of the game.

        Args:
            snapshot: Ball box, both paddle boxes and the score for this tick
        """
        ...

    def handle_events(self) -> dict[str, Any]:
        """
        Process host events (window close, keys).

        Returns:
            Dictionary with event data (quit, ...)
        """
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...

    def is_active(self) -> bool:
        """Check if renderer is still active (window not closed)"""
        ...
