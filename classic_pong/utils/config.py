"""
Classic Pong game configuration with Pydantic validation
"""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator


@dataclass
class KeyboardLayout:
    """Movement keys of the left player, as pygame key constant names"""

    name: str
    movement_keys: dict[str, str]
    display_names: dict[str, str]


# Keyboard layouts definition
KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        movement_keys={"up": "K_w", "down": "K_s", "left": "K_a", "right": "K_d"},
        display_names={"up": "W", "down": "S", "left": "A", "right": "D"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        movement_keys={
            "up": "K_z",  # Z instead of W
            "down": "K_s",
            "left": "K_q",  # Q instead of A
            "right": "K_d",
        },
        display_names={"up": "Z", "down": "S", "left": "Q", "right": "D"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        movement_keys={"up": "K_w", "down": "K_s", "left": "K_a", "right": "K_d"},
        display_names={"up": "W", "down": "S", "left": "A", "right": "D"},
    ),
}


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    model_config = {"validate_assignment": True}

    # Field dimensions
    FIELD_WIDTH: int = Field(default=600, gt=0, description="Field width in pixels")
    FIELD_HEIGHT: int = Field(default=400, gt=0, description="Field height in pixels")

    # Ball
    BALL_DIAMETER: int = Field(default=10, gt=0, description="Ball diameter in pixels")
    BALL_START_X: int = Field(default=300, ge=0, description="Ball start x (top-left)")
    BALL_START_Y: int = Field(default=200, ge=0, description="Ball start y (top-left)")
    BALL_X_VELOCITY: int = Field(default=5, description="Ball x velocity in pixels per tick")
    BALL_Y_VELOCITY: int = Field(default=5, description="Ball y velocity in pixels per tick")

    # Paddles
    PADDLE_WIDTH: int = Field(default=10, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: int = Field(default=100, gt=0, description="Paddle height in pixels")
    LEFT_PADDLE_X: int = Field(default=50, ge=0, description="Left paddle start x")
    RIGHT_PADDLE_X: int = Field(default=540, ge=0, description="Right paddle start x")
    PADDLE_START_Y: int = Field(default=150, ge=0, description="Paddles start y")
    PLAYER_SPEED: int = Field(default=5, gt=0, description="Player paddle speed per tick")
    AI_SPEED: int = Field(default=2, gt=0, description="AI paddle speed per tick")

    # Loop
    TICK_INTERVAL_MS: int = Field(default=16, gt=0, description="Simulation tick period")

    # Keyboard layout
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Display
    WINDOW_TITLE: str = Field(default="Pong Game", description="Window caption")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    BALL_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    PADDLE_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    LINE_COLOR: tuple[int, int, int] = Field(default=(128, 128, 128), description="RGB color")
    SCORE_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    SCORE_FONT: str = Field(default="arial", description="System font for the score")
    SCORE_FONT_SIZE: int = Field(default=24, gt=0, description="Score font size")

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @model_validator(mode="after")
    def validate_layout_fits_field(self) -> "GameConfig":
        """Validate that the ball and paddles start inside the field"""
        if self.BALL_DIAMETER >= min(self.FIELD_WIDTH, self.FIELD_HEIGHT):
            raise ValueError("BALL_DIAMETER must be smaller than the field")
        if self.PADDLE_HEIGHT > self.FIELD_HEIGHT:
            raise ValueError("PADDLE_HEIGHT must not exceed FIELD_HEIGHT")

        max_paddle_x = self.FIELD_WIDTH - self.PADDLE_WIDTH
        for name in ("LEFT_PADDLE_X", "RIGHT_PADDLE_X"):
            if getattr(self, name) > max_paddle_x:
                raise ValueError(f"{name} must be at most {max_paddle_x} pixels")

        if self.PADDLE_START_Y > self.FIELD_HEIGHT - self.PADDLE_HEIGHT:
            raise ValueError(
                f"PADDLE_START_Y must be at most {self.FIELD_HEIGHT - self.PADDLE_HEIGHT} pixels"
            )
        if self.BALL_START_X > self.FIELD_WIDTH - self.BALL_DIAMETER:
            raise ValueError("BALL_START_X is outside the field")
        if self.BALL_START_Y > self.FIELD_HEIGHT - self.BALL_DIAMETER:
            raise ValueError("BALL_START_Y is outside the field")

        return self

    @property
    def tick_interval(self) -> float:
        """Tick period in seconds"""
        return self.TICK_INTERVAL_MS / 1000.0

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS.get(self.KEYBOARD_LAYOUT, KEYBOARD_LAYOUTS["qwerty"])

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "classic_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "classic_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        defaults = GameConfig()
        # Defaults are valid as a whole, skip per-field validation
        for field_name in type(self).model_fields.keys():
            object.__setattr__(self, field_name, getattr(defaults, field_name))


# Global configuration instance
game_config = GameConfig()


def load_config_from_file(filepath: str = "classic_pong_config.json") -> bool:
    """Load configuration from file into global game_config

    Returns False when the file does not exist. Invalid content raises.
    """
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        return False

    _change_values(game_config, **loaded_config.model_dump())
    return True


def _change_values(obj: GameConfig, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values, validating the result as a whole"""
    old_values = {name: getattr(obj, name) for name in kwargs}
    validated = type(obj).model_validate({**obj.model_dump(), **kwargs})
    # Individual assignments could transiently break the layout check
    for name in kwargs:
        object.__setattr__(obj, name, getattr(validated, name))
    return old_values


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        old_values = _change_values(game_config, **kwargs)
        yield
    finally:
        _change_values(game_config, **old_values)
