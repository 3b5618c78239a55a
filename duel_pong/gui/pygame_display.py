"""
PyGame display for Duel Pong game
"""

import math

import pygame

from duel_pong.core.interfaces.display import Color
from duel_pong.core.interfaces.display import Point
from duel_pong.utils.config import game_config


class PygameDisplay:
    """PyGame window holding a score band above the playfield surface"""

    def __init__(self, width: int | None = None, hud_height: int | None = None):
        """Initialize the PyGame display"""
        self.hud_height = hud_height if hud_height is not None else game_config.HUD_HEIGHT
        field_width = width or game_config.WINDOW_WIDTH
        field_height = game_config.field_height_for(field_width)

        # Initialize PyGame
        pygame.init()

        # Create the display
        self.window = pygame.display.set_mode(
            (int(field_width), int(field_height) + self.hud_height), pygame.RESIZABLE
        )
        pygame.display.set_caption("Duel Pong")
        self.surface = pygame.Surface((int(field_width), int(field_height)))

        self.background_color: Color = game_config.BACKGROUND_COLOR
        self.text_color: Color = game_config.FOREGROUND_COLOR
        self.button_color: Color = (60, 60, 60)

        # Font for text rendering
        self.font_large = pygame.font.Font(None, 64)
        self.font_medium = pygame.font.Font(None, 40)
        self.font_small = pygame.font.Font(None, 28)

        # UI state driven by the engine
        self.score_text = ""
        self.start_label = "Start"
        self.start_visible = True
        self.instructions_visible = True
        self.instruction_lines: list[str] = []
        self._start_rect: pygame.Rect | None = None

    @property
    def width(self) -> float:
        return float(self.window.get_width())

    @property
    def height(self) -> float:
        return float(max(0, self.window.get_height() - self.hud_height))

    def set_size(self, width: float, height: float) -> None:
        size = (int(width), int(height))
        if self.surface.get_size() == size:
            return
        self.surface = pygame.Surface(size)
        # Keep the window fitted to the playfield
        if self.window.get_size() != (size[0], size[1] + self.hud_height):
            self.window = pygame.display.set_mode(
                (size[0], size[1] + self.hud_height), pygame.RESIZABLE
            )

    # Drawing primitives

    def clear(self, color: Color) -> None:
        self.surface.fill(color)

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        rect = pygame.Rect(int(x), int(y), int(width), int(height))
        pygame.draw.rect(self.surface, color, rect)

    def fill_circle(self, center: Point, radius: float, color: Color) -> None:
        pos = (int(center[0]), int(center[1]))
        pygame.draw.circle(self.surface, color, pos, max(1, int(radius)))

    def draw_dashed_line(
        self, start: Point, end: Point, dash: tuple[int, int], color: Color
    ) -> None:
        x0, y0 = start
        x1, y1 = end
        length = math.hypot(x1 - x0, y1 - y0)
        if length == 0:
            return

        dx = (x1 - x0) / length
        dy = (y1 - y0) / length
        on, off = dash
        pos = 0.0
        while pos < length:
            seg_end = min(pos + on, length)
            pygame.draw.line(
                self.surface,
                color,
                (int(x0 + dx * pos), int(y0 + dy * pos)),
                (int(x0 + dx * seg_end), int(y0 + dy * seg_end)),
            )
            pos += on + off

    # UI signals

    def set_score_text(self, text: str) -> None:
        self.score_text = text

    def set_start_visible(self, visible: bool) -> None:
        self.start_visible = visible

    def set_start_label(self, label: str) -> None:
        self.start_label = label

    def set_instructions_visible(self, visible: bool) -> None:
        self.instructions_visible = visible

    def set_instructions(self, lines: list[str]) -> None:
        self.instruction_lines = list(lines)

    def start_button_hit(self, pos: tuple[int, int]) -> bool:
        """True if a click at ``pos`` (window coordinates) lands on the start control"""
        return self._start_rect is not None and self._start_rect.collidepoint(pos)

    # Frame presentation

    def _blit_centered(self, font: pygame.font.Font, text: str, center: tuple[int, int]) -> None:
        text_surface = font.render(text, True, self.text_color)
        text_rect = text_surface.get_rect()
        text_rect.center = center
        self.window.blit(text_surface, text_rect)

    def _draw_start_control(self, center_x: int, center_y: int) -> None:
        label_surface = self.font_medium.render(self.start_label, True, self.text_color)
        self._start_rect = label_surface.get_rect().inflate(40, 20)
        self._start_rect.center = (center_x, center_y)
        pygame.draw.rect(self.window, self.button_color, self._start_rect)
        pygame.draw.rect(self.window, self.text_color, self._start_rect, 2)
        self.window.blit(label_surface, label_surface.get_rect(center=self._start_rect.center))

    def _draw_overlay(self, alpha: int) -> None:
        overlay = pygame.Surface(self.surface.get_size())
        overlay.set_alpha(alpha)
        overlay.fill(self.background_color)
        self.window.blit(overlay, (0, self.hud_height))

    def present(self, paused: bool = False) -> None:
        """Composes score band, playfield and UI overlays, then flips"""
        self.window.fill(self.background_color)
        center_x = self.surface.get_width() // 2
        center_y = self.hud_height + self.surface.get_height() // 2

        if self.hud_height:
            self._blit_centered(self.font_large, self.score_text, (center_x, self.hud_height // 2))
        self.window.blit(self.surface, (0, self.hud_height))

        if paused:
            self._draw_overlay(128)
            self._blit_centered(self.font_large, "PAUSED", (center_x, center_y))
            self._blit_centered(
                self.font_small, "Press P to continue", (center_x, center_y + 50)
            )

        if self.start_visible or self.instructions_visible:
            self._draw_overlay(160)

        if self.start_visible:
            self._draw_start_control(center_x, center_y - 40)
        else:
            self._start_rect = None

        if self.instructions_visible:
            for i, line in enumerate(self.instruction_lines):
                self._blit_centered(self.font_small, line, (center_x, center_y + 20 + i * 28))

        pygame.display.flip()

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        pygame.quit()
