"""
PyGame renderer for Classic Pong game
"""

from typing import Any

import pygame

from classic_pong.core.entities import GameSnapshot
from classic_pong.utils.config import GameConfig, game_config


class PygameRenderer:
    """PyGame-based renderer for Classic Pong"""

    def __init__(self, config: GameConfig | None = None):
        """Initialize the PyGame renderer"""
        config = config or game_config
        self.width = config.FIELD_WIDTH
        self.height = config.FIELD_HEIGHT

        # Initialize PyGame
        pygame.init()

        # Fixed size window, not resizable
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(config.WINDOW_TITLE)

        # Colors
        self.background_color: tuple[int, int, int] = config.BACKGROUND_COLOR
        self.ball_color: tuple[int, int, int] = config.BALL_COLOR
        self.paddle_color: tuple[int, int, int] = config.PADDLE_COLOR
        self.line_color: tuple[int, int, int] = config.LINE_COLOR
        self.text_color: tuple[int, int, int] = config.SCORE_COLOR

        # Font for the score
        self.font = pygame.font.SysFont(config.SCORE_FONT, config.SCORE_FONT_SIZE, bold=True)

        self.active = True

    def clear_screen(self) -> None:
        """Clear the screen with background color"""
        self.screen.fill(self.background_color)

    def draw_center_line(self) -> None:
        """Draw the dashed center line"""
        center_x = self.width // 2 - 1
        for y in range(0, self.height, 20):
            pygame.draw.rect(self.screen, self.line_color, (center_x, y, 2, 10))

    def draw_score(self, score: tuple[int, int]) -> None:
        """Draw both scores on each side of the center line"""
        for value, x in ((score[0], self.width // 2 - 50), (score[1], self.width // 2 + 30)):
            text_surface = self.font.render(str(value), True, self.text_color)
            text_rect = text_surface.get_rect()
            text_rect.bottomleft = (x, 30)
            self.screen.blit(text_surface, text_rect)

    def draw_ball(self, rect: tuple[int, int, int, int]) -> None:
        """Draw the game ball inside its bounding box"""
        pygame.draw.ellipse(self.screen, self.ball_color, pygame.Rect(rect))

    def draw_paddle(self, rect: tuple[int, int, int, int]) -> None:
        """Draw a paddle"""
        pygame.draw.rect(self.screen, self.paddle_color, pygame.Rect(rect))

    def render_frame(self, snapshot: GameSnapshot) -> None:
        """Render and present a complete frame"""
        self.clear_screen()
        self.draw_center_line()
        self.draw_score(snapshot.score)
        self.draw_ball(snapshot.ball)
        self.draw_paddle(snapshot.left_paddle)
        self.draw_paddle(snapshot.right_paddle)
        pygame.display.flip()

    def handle_events(self) -> dict[str, Any]:
        """Drain the pygame event queue

        Returns:
            {"quit": True if the window was closed or ESC pressed,
             "key_events": the other KEYDOWN/KEYUP events}
        """
        result: dict[str, Any] = {"quit": False, "key_events": []}
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                result["quit"] = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                result["quit"] = True
            elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                result["key_events"].append(event)

        if result["quit"]:
            self.active = False
        return result

    def is_active(self) -> bool:
        return self.active

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        self.active = False
        pygame.quit()
