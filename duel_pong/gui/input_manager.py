"""
Keyboard, mouse and window events for Duel Pong
"""

import logging
from typing import Protocol

import pygame

from duel_pong.core.entities import GamePhase
from duel_pong.core.game_engine import GameEngine
from duel_pong.utils.config import PAUSE_KEYS
from duel_pong.utils.config import START_KEYS
from duel_pong.utils.config import game_config

logger = logging.getLogger(__name__)

# Browser-style names for non printable keys
SPECIAL_KEY_NAMES = {
    pygame.K_UP: "ArrowUp",
    pygame.K_DOWN: "ArrowDown",
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
    pygame.K_SPACE: " ",
    pygame.K_RETURN: "Enter",
    pygame.K_KP_ENTER: "Enter",
    pygame.K_ESCAPE: "Escape",
}


class StartControl(Protocol):
    """Display side of the start control"""

    start_visible: bool

    def start_button_hit(self, pos: tuple[int, int]) -> bool: ...


def key_name(event: pygame.event.Event) -> str | None:
    """Name of the key of a KEYDOWN/KEYUP event, None for keys the game never uses"""
    if event.key in SPECIAL_KEY_NAMES:
        return SPECIAL_KEY_NAMES[event.key]

    # Pygame keycodes of printable keys are their ASCII character
    if 32 < event.key < 127:
        name = chr(event.key)
        if getattr(event, "mod", 0) & pygame.KMOD_SHIFT:
            name = name.upper()
        return name

    return None


class InputManager:
    """Routes pygame events to the game engine"""

    def __init__(self, engine: GameEngine, start_control: StartControl):
        self.engine = engine
        self.start_control = start_control

    def _can_start(self) -> bool:
        return self.engine.phase in (GamePhase.IDLE, GamePhase.FINISHED)

    def handle_event(self, event: pygame.event.Event) -> str | None:
        """
        Handle pygame events

        Returns:
            String naming the app-level action taken (quit, pause, start,
            resize) or None
        """
        if event.type == pygame.QUIT:
            return "quit"

        if event.type == pygame.KEYDOWN:
            name = key_name(event)
            if name is None:
                return None
            if name == "Escape":
                return "quit"
            if name in PAUSE_KEYS:
                self.engine.toggle_pause()
                return "pause"
            if name in START_KEYS and self._can_start():
                self.engine.start()
                return "start"
            self.engine.on_key_down(name)

        elif event.type == pygame.KEYUP:
            name = key_name(event)
            if name is not None:
                self.engine.on_key_up(name)

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if (
                self.start_control.start_visible
                and self._can_start()
                and self.start_control.start_button_hit(event.pos)
            ):
                self.engine.start()
                return "start"

        elif event.type == pygame.VIDEORESIZE:
            self.engine.on_resize(event.w, max(0, event.h - game_config.HUD_HEIGHT))
            return "resize"

        return None
