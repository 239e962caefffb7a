"""
Pygame keyboard plumbing for the human paddle
"""

import pygame

from classic_pong.core.input import Direction, InputController
from classic_pong.utils.config import KeyboardLayout, game_config


class KeyboardTranslator:
    """Feeds pygame KEYDOWN/KEYUP events of the movement keys into an InputController"""

    def __init__(self, controller: InputController, layout: KeyboardLayout | None = None):
        """
        Initialize the translator

        Args:
            controller: Controller of the human paddle
            layout: Movement key layout, defaults to the configured one
        """
        self.controller = controller
        self.layout = layout or game_config.get_keyboard_layout()
        self.key_mapping: dict[int, Direction] = {
            getattr(pygame, key_name): Direction(direction)
            for direction, key_name in self.layout.movement_keys.items()
        }

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Applies a key event, returns False if it is not a movement key event"""
        direction = self.key_mapping.get(getattr(event, "key", None))
        if direction is None:
            return False

        if event.type == pygame.KEYDOWN:
            self.controller.key_down(direction)
        elif event.type == pygame.KEYUP:
            self.controller.key_up(direction)
        else:
            return False
        return True

    def get_control_info(self) -> dict[str, str]:
        """Get the key names to display for each direction"""
        return self.layout.display_names.copy()
