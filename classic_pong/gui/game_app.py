"""
Main game application with PyGame GUI
"""

import logging

from classic_pong.core.game_loop import GameLoop
from classic_pong.core.input import InputController
from classic_pong.core.interfaces.renderer import RendererProtocol
from classic_pong.core.physics import Simulation
from classic_pong.gui.keyboard import KeyboardTranslator
from classic_pong.gui.pygame_renderer import PygameRenderer
from classic_pong.utils.config import GameConfig, game_config

logger = logging.getLogger(__name__)


class PongApp:
    """Wires the simulation, the keyboard and a renderer into a fixed-rate loop

    The left paddle belongs to the keyboard player, the right paddle to the AI.
    """

    def __init__(
        self, config: GameConfig | None = None, renderer: RendererProtocol | None = None
    ) -> None:
        """Initialize the application, opening a pygame window unless a renderer is given"""
        self.config = config or game_config
        self.simulation = Simulation.from_config(self.config)

        self.renderer = renderer or PygameRenderer(self.config)

        self.input_controller = InputController(
            self.simulation.left_paddle, speed=self.config.PLAYER_SPEED
        )
        self.keyboard = KeyboardTranslator(
            self.input_controller, self.config.get_keyboard_layout()
        )
        self.loop = GameLoop.from_config(
            self.simulation, self.renderer, self.config, poll_input=self.poll_input
        )

    def poll_input(self) -> None:
        """Applies pending key events, stops the loop when the window is closed"""
        events = self.renderer.handle_events()
        if events.get("quit"):
            logger.info("Quit requested")
            self.loop.stop()
            return

        for event in events.get("key_events", []):
            self.keyboard.handle_event(event)

    def run(self, max_ticks: int | None = None) -> int:
        """Runs until the window is closed, returns the number of ticks played"""
        try:
            return self.loop.run(max_ticks)
        finally:
            left, right = self.simulation.scoreboard.as_tuple()
            logger.info("Final score %d - %d", left, right)
            self.renderer.cleanup()


def main() -> None:
    """Main entry point"""
    try:
        app = PongApp()
        app.run()
    except KeyboardInterrupt:
        print("\nUser interruption")


if __name__ == "__main__":
    main()
