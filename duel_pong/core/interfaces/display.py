"""
Display protocol - defines the drawing surface the game engine renders to
"""

from typing import Protocol

Color = tuple[int, int, int]
Point = tuple[float, float]


class DisplayProtocol(Protocol):
    """
    Protocol for display implementations.

    The engine draws flat shapes onto a surface sized to the playfield and
    drives a few UI signals: the score line, the start control and the
    instructions panel. Pygame is the shipped backend; tests use an
    in-memory recorder.
    """

    @property
    def width(self) -> float:
        """Width available to the playfield (container width)"""
        ...

    @property
    def height(self) -> float:
        """Height available to the playfield"""
        ...

    def set_size(self, width: float, height: float) -> None:
        """
        Resize the drawing surface.

        Args:
            width: Playfield width in pixels
            height: Playfield height in pixels
        """
        ...

    def clear(self, color: Color) -> None:
        """Fill the whole surface with a color"""
        ...

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        """Draw a filled axis-aligned rectangle"""
        ...

    def fill_circle(self, center: Point, radius: float, color: Color) -> None:
        """Draw a filled circle"""
        ...

    def draw_dashed_line(
        self, start: Point, end: Point, dash: tuple[int, int], color: Color
    ) -> None:
        """
        Draw a straight line with a dash pattern.

        Args:
            start: First end point
            end: Second end point
            dash: (dash length, gap length) in pixels
            color: Stroke color
        """
        ...

    def set_score_text(self, text: str) -> None:
        """Show the running score, formatted "{left} - {right}" """
        ...

    def set_start_visible(self, visible: bool) -> None:
        """Show or hide the start control"""
        ...

    def set_start_label(self, label: str) -> None:
        """Change the start control label ("Start" / "Play Again")"""
        ...

    def set_instructions_visible(self, visible: bool) -> None:
        """Show or hide the instructions panel"""
        ...
