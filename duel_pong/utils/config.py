"""
Duel Pong game configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)


@dataclass
class KeyboardLayout:
    """Key names controlling both paddles for one keyboard layout"""

    name: str
    left_up: tuple[str, ...]
    left_down: tuple[str, ...]
    right_up: tuple[str, ...]
    right_down: tuple[str, ...]
    display_names: dict[str, str]


ARROW_UP = ("ArrowUp",)
ARROW_DOWN = ("ArrowDown",)

# Keyboard layouts definition
KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        left_up=("w", "W"),
        left_down=("s", "S"),
        right_up=ARROW_UP,
        right_down=ARROW_DOWN,
        display_names={"left_up": "W", "left_down": "S", "right_up": "↑", "right_down": "↓"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        left_up=("z", "Z"),  # Z instead of W
        left_down=("s", "S"),
        right_up=ARROW_UP,
        right_down=ARROW_DOWN,
        display_names={"left_up": "Z", "left_down": "S", "right_up": "↑", "right_down": "↓"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        left_up=("w", "W"),
        left_down=("s", "S"),
        right_up=ARROW_UP,
        right_down=ARROW_DOWN,
        display_names={"left_up": "W", "left_down": "S", "right_up": "↑", "right_down": "↓"},
    ),
}

PAUSE_KEYS = ("p", "P")
START_KEYS = (" ", "Enter")


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    # Allow mutation, validated on assignment
    model_config = {"validate_assignment": True}

    # Paddles
    PADDLE_WIDTH: float = Field(default=10.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=100.0, gt=0, description="Paddle height in pixels")
    PADDLE_SPEED: float = Field(default=0.4, gt=0, description="Paddle speed in px/ms")

    # Ball physics
    BALL_SIZE: float = Field(default=10.0, gt=0, description="Ball diameter in pixels")
    INITIAL_BALL_SPEED: float = Field(default=0.3, gt=0, description="Launch speed in px/ms")
    BALL_SPEED_INCREASE: float = Field(default=1.1, description="Speed factor per paddle hit")
    LAUNCH_ANGLE_DEGREES: float = Field(
        default=22.5, ge=0, lt=90, description="Max launch angle from horizontal"
    )
    NORMALIZE_BOUNCE_SPEED: bool = Field(
        default=False, description="Recompute horizontal velocity from speed on paddle hits"
    )
    MAX_BOUNCE_ANGLE_DEGREES: float = Field(
        default=75.0, gt=0, lt=90, description="Bounce angle limit when normalizing"
    )

    # Gameplay
    WIN_SCORE: int = Field(default=10, gt=0, description="Winning score")

    # Playfield
    ASPECT_WIDTH: int = Field(default=16, gt=0, description="Playfield aspect ratio width")
    ASPECT_HEIGHT: int = Field(default=9, gt=0, description="Playfield aspect ratio height")
    MIN_FIELD_WIDTH: float = Field(default=320.0, gt=0, description="Smallest playfield width")

    # Keyboard layout
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Display
    WINDOW_WIDTH: int = Field(default=960, gt=0, description="Initial window width")
    HUD_HEIGHT: int = Field(default=60, ge=0, description="Score band height in pixels")
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    CENTER_LINE_DASH: tuple[int, int] = Field(default=(5, 15), description="Dash and gap length")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    FOREGROUND_COLOR: tuple[int, int, int] = Field(
        default=(255, 255, 255), description="RGB color"
    )

    @field_validator("BALL_SPEED_INCREASE")
    @classmethod
    def validate_speed_increase(cls, v: float) -> float:
        """Paddle hits must never slow the ball down"""
        if v < 1.0:
            raise ValueError(f"BALL_SPEED_INCREASE ({v}) must be at least 1.0")
        return v

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @field_validator("CENTER_LINE_DASH")
    @classmethod
    def validate_dash(cls, v: tuple[int, int]) -> tuple[int, int]:
        if v[0] <= 0 or v[1] < 0:
            raise ValueError(f"CENTER_LINE_DASH {v} needs a positive dash and a non-negative gap")
        return v

    @model_validator(mode="after")
    def validate_field_dimensions(self) -> "GameConfig":
        """The smallest playfield must still fit a paddle"""
        if self.field_height_for(self.MIN_FIELD_WIDTH) < self.PADDLE_HEIGHT:
            raise ValueError(
                f"MIN_FIELD_WIDTH ({self.MIN_FIELD_WIDTH}) gives a playfield lower than "
                f"PADDLE_HEIGHT ({self.PADDLE_HEIGHT})"
            )
        return self

    def field_height_for(self, width: float) -> float:
        """Height of a playfield of the given width at the configured aspect ratio"""
        return width * self.ASPECT_HEIGHT / self.ASPECT_WIDTH

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS.get(self.KEYBOARD_LAYOUT, KEYBOARD_LAYOUTS["qwerty"])

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "duel_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        config_path = Path(filepath)

        with open(config_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "duel_pong_config.json") -> "GameConfig":
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
        for field_name in type(self).model_fields.keys():
            object.__setattr__(self, field_name, getattr(defaults, field_name))


# Global configuration instance with validation
game_config = GameConfig()


def load_config_from_file(filepath: str = "duel_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        return False
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error("Error loading config %s: %s", filepath, e)
        return False

    # Copied without per-field validation, the loaded model was validated as a whole
    for field_name in GameConfig.model_fields.keys():
        object.__setattr__(game_config, field_name, getattr(loaded_config, field_name))
    return True


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)

    Values are applied in the given order and restored in reverse order,
    so dependent fields can be changed together.
    """
    old_values: dict[str, Any] = {}
    try:
        for name, new_value in kwargs.items():
            old_values[name] = getattr(game_config, name)
            setattr(game_config, name, new_value)
        yield
    finally:
        for name, old_value in reversed(list(old_values.items())):
            setattr(game_config, name, old_value)
