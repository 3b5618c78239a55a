"""
Duel Pong game entities: ball, paddles, score
"""

import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from duel_pong.utils.config import game_config


class GamePhase(Enum):
    """Lifecycle of a match"""

    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    FINISHED = "finished"


class PaddleSide(Enum):
    """Which side of the court a paddle defends"""

    LEFT = "left"
    RIGHT = "right"


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


class Ball:
    """Game ball

    ``speed`` is the nominal scalar speed. It matches the velocity magnitude
    after every reset; paddle bounces scale it and derive the vertical
    velocity from it.
    """

    def __init__(self, x: float = 0.0, y: float = 0.0, size: float | None = None):
        self.position = Vector2D(x, y)
        self.velocity = Vector2D(0.0, 0.0)
        self.speed = game_config.INITIAL_BALL_SPEED
        self.size = size if size is not None else game_config.BALL_SIZE

    @property
    def radius(self) -> float:
        return self.size / 2

    def update(self, dt: float) -> None:
        """Moves the ball along its velocity"""
        self.position += self.velocity * dt

    def reset_to_center(
        self,
        field_width: float,
        field_height: float,
        rng: np.random.Generator,
        direction: int | None = None,
        angle: float | None = None,
    ) -> None:
        """Puts the ball back at the center and launches it

        Without an explicit ``angle`` (radians) or ``direction`` (-1 left,
        1 right), both are drawn at random: the angle uniformly within the
        configured launch cone, the direction 50/50.
        """
        self.position = Vector2D(field_width / 2, field_height / 2)
        self.speed = game_config.INITIAL_BALL_SPEED

        if angle is None:
            max_angle = math.radians(game_config.LAUNCH_ANGLE_DEGREES)
            angle = float(rng.uniform(-max_angle, max_angle))
        if direction is None:
            direction = 1 if rng.random() < 0.5 else -1

        self.velocity = Vector2D(
            math.cos(angle) * self.speed * direction, math.sin(angle) * self.speed
        )

    def bounce_vertical(self) -> None:
        """Vertical bounce (top/bottom walls)"""
        self.velocity.y = -self.velocity.y

    def bounce_off_paddle(self, paddle: "Paddle") -> None:
        """Sends the ball back, faster, at an angle set by where it hit the paddle"""
        self.speed *= game_config.BALL_SPEED_INCREASE
        hit_fraction = (self.position.y - paddle.position.y) / paddle.height

        if not game_config.NORMALIZE_BOUNCE_SPEED:
            self.velocity.x = -self.velocity.x
            self.velocity.y = (hit_fraction - 0.5) * 2 * self.speed
            return

        # Keep |velocity| == speed, with a horizontal component left over
        max_ratio = math.sin(math.radians(game_config.MAX_BOUNCE_ANGLE_DEGREES))
        ratio = max(-max_ratio, min(max_ratio, (hit_fraction - 0.5) * 2))
        direction = -1.0 if self.velocity.x > 0 else 1.0
        self.velocity.y = ratio * self.speed
        self.velocity.x = direction * math.sqrt(self.speed**2 - self.velocity.y**2)


class Paddle:
    """Player paddle

    The horizontal position is set by the court layout; only the vertical
    position moves, driven by a velocity set from the keyboard.
    """

    def __init__(
        self,
        side: PaddleSide,
        x: float = 0.0,
        y: float = 0.0,
        width: float | None = None,
        height: float | None = None,
    ):
        self.side = side
        self.position = Vector2D(x, y)
        self.velocity = 0.0
        self.width = width if width is not None else game_config.PADDLE_WIDTH
        self.height = height if height is not None else game_config.PADDLE_HEIGHT

    def update(self, dt: float, field_height: float) -> None:
        """Moves the paddle and keeps it on the court"""
        self.position.y += self.velocity * dt
        self.constrain_position(field_height)

    def constrain_position(self, field_height: float) -> None:
        """Ensures the paddle stays within [0, field_height - height]"""
        max_y = max(0.0, field_height - self.height)
        self.position.y = max(0.0, min(max_y, self.position.y))

    def center_vertically(self, field_height: float) -> None:
        self.position.y = max(0.0, (field_height - self.height) / 2)
        self.velocity = 0.0

    def contains(self, point: Vector2D) -> bool:
        """True if the point lies inside the paddle box, edges included"""
        return (
            self.position.x <= point.x <= self.position.x + self.width
            and self.position.y <= point.y <= self.position.y + self.height
        )

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle properties (x, y, width, height)"""
        return (self.position.x, self.position.y, self.width, self.height)


@dataclass
class Score:
    """Points of both players"""

    left: int = 0
    right: int = 0

    def add_point(self, side: PaddleSide) -> None:
        if side is PaddleSide.LEFT:
            self.left += 1
        else:
            self.right += 1

    def reset(self) -> None:
        self.left = 0
        self.right = 0

    def leader_at(self, target: int) -> PaddleSide | None:
        """The side that reached ``target`` points, if any"""
        if self.left >= target:
            return PaddleSide.LEFT
        if self.right >= target:
            return PaddleSide.RIGHT
        return None

    def to_text(self) -> str:
        return f"{self.left} - {self.right}"

    def to_tuple(self) -> tuple[int, int]:
        return (self.left, self.right)
