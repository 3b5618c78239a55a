"""
Duel Pong main game engine
"""

import logging
from typing import Any

import numpy as np

from duel_pong.core.entities import Ball
from duel_pong.core.entities import GamePhase
from duel_pong.core.entities import Paddle
from duel_pong.core.entities import PaddleSide
from duel_pong.core.entities import Score
from duel_pong.core.interfaces.display import DisplayProtocol
from duel_pong.core.interfaces.scheduler import SchedulerProtocol
from duel_pong.utils.config import game_config

logger = logging.getLogger(__name__)

START_LABEL = "Start"
REMATCH_LABEL = "Play Again"


class GameEngine:
    """Owns the whole match: ball, paddles, score and the frame loop

    The host feeds it keyboard events and viewport sizes, and refreshes the
    scheduler. While playing, the engine registers one frame callback per
    refresh; each callback advances the simulation by the wall-clock time
    since the previous frame and redraws.
    """

    def __init__(
        self,
        display: DisplayProtocol,
        scheduler: SchedulerProtocol,
        rng: np.random.Generator | None = None,
    ):
        self.display = display
        self.scheduler = scheduler
        self.rng = rng if rng is not None else np.random.default_rng()

        # Game state
        self.phase = GamePhase.IDLE
        self.score = Score()
        self.winner: PaddleSide | None = None
        self.last_time = 0.0

        # Game objects
        self.ball = Ball()
        self.left_paddle = Paddle(PaddleSide.LEFT)
        self.right_paddle = Paddle(PaddleSide.RIGHT)

        self.field_width = 0.0
        self.field_height = 0.0

        self.display.set_score_text(self.score.to_text())
        self.display.set_start_label(START_LABEL)
        self.display.set_start_visible(True)
        self.display.set_instructions_visible(True)

        # Initial layout, also centers paddles and ball
        self.on_resize(display.width, display.height)

    @property
    def paddles(self) -> tuple[Paddle, Paddle]:
        """Both paddles, left first (collision order)"""
        return (self.left_paddle, self.right_paddle)

    # State transitions

    def start(self) -> None:
        """Starts a new match from Idle or Finished"""
        if self.phase not in (GamePhase.IDLE, GamePhase.FINISHED):
            logger.debug("Ignoring start while %s", self.phase.value)
            return

        self.score.reset()
        self.winner = None
        self.display.set_score_text(self.score.to_text())
        self.reset_positions()
        self.display.set_start_visible(False)
        self.display.set_instructions_visible(False)

        self.phase = GamePhase.PLAYING
        self.last_time = self.scheduler.now()
        self._request_frame()
        logger.info("Match started")

    def toggle_pause(self) -> None:
        """Pauses / resumes the match"""
        if self.phase is GamePhase.PLAYING:
            self.phase = GamePhase.PAUSED
            logger.info("Match paused")
        elif self.phase is GamePhase.PAUSED:
            self.phase = GamePhase.PLAYING
            # The paused interval must not count as elapsed time
            self.last_time = self.scheduler.now()
            self._request_frame()
            logger.info("Match resumed")
        else:
            logger.debug("Ignoring pause while %s", self.phase.value)

    def on_resize(self, width: float, height: float) -> None:
        """Lays the court out for a new container size

        The playfield takes the container width and derives its height from
        the configured aspect ratio; ``height`` is only informative.
        """
        field_width = max(float(width), game_config.MIN_FIELD_WIDTH)
        self.field_width = field_width
        self.field_height = game_config.field_height_for(field_width)
        self.display.set_size(self.field_width, self.field_height)
        logger.debug(
            "Playfield resized to %.0fx%.0f (container %sx%s)",
            self.field_width,
            self.field_height,
            width,
            height,
        )

        self.left_paddle.position.x = self.left_paddle.width * 2
        self.right_paddle.position.x = self.field_width - self.right_paddle.width * 3

        if self.phase in (GamePhase.IDLE, GamePhase.FINISHED):
            self.reset_positions()
            self.render()
        else:
            for paddle in self.paddles:
                paddle.constrain_position(self.field_height)
            if self.phase is GamePhase.PAUSED:
                self.render()

    def on_key_down(self, key: str) -> None:
        """Starts moving a paddle; unknown keys are ignored"""
        if self.phase is not GamePhase.PLAYING:
            return

        paddle, direction = self._paddle_for_key(key)
        if paddle is not None:
            paddle.velocity = direction * game_config.PADDLE_SPEED

    def on_key_up(self, key: str) -> None:
        """Stops the paddle driven by the released key"""
        if self.phase not in (GamePhase.PLAYING, GamePhase.PAUSED):
            return

        paddle, _ = self._paddle_for_key(key)
        if paddle is not None:
            paddle.velocity = 0.0

    def _paddle_for_key(self, key: str) -> tuple[Paddle | None, int]:
        layout = game_config.get_keyboard_layout()
        if key in layout.left_up:
            return self.left_paddle, -1
        if key in layout.left_down:
            return self.left_paddle, 1
        if key in layout.right_up:
            return self.right_paddle, -1
        if key in layout.right_down:
            return self.right_paddle, 1
        return None, 0

    # Frame loop

    def _request_frame(self) -> None:
        """Registers the next frame, the scheduler keeps at most one per callback"""
        self.scheduler.request_frame(self._on_frame)

    def _on_frame(self, timestamp: float) -> None:
        if self.phase is not GamePhase.PLAYING:
            return

        delta_time = max(0.0, timestamp - self.last_time)
        self.last_time = timestamp

        self.update(delta_time)
        self.render()

        if self.phase is GamePhase.PLAYING:
            self._request_frame()

    def update(self, delta_time: float) -> dict[str, Any]:
        """Advances the simulation by ``delta_time`` milliseconds

        Returns:
            Dictionary with events that occurred:
            {
                "wall_bounces": [...],
                "paddle_hits": [...],
                "goals": [...],
                "game_over": bool
            }
        """
        events: dict[str, Any] = {
            "wall_bounces": [],
            "paddle_hits": [],
            "goals": [],
            "game_over": False,
        }
        if self.phase is not GamePhase.PLAYING:
            return events

        # Move paddles and ball
        for paddle in self.paddles:
            paddle.update(delta_time, self.field_height)
        self.ball.update(delta_time)

        # Top and bottom walls, no positional correction
        if self.ball.position.y <= 0 or self.ball.position.y >= self.field_height:
            self.ball.bounce_vertical()
            events["wall_bounces"].append("top" if self.ball.position.y <= 0 else "bottom")

        # Paddles, left first, first hit wins
        for paddle in self.paddles:
            if paddle.contains(self.ball.position):
                self.ball.bounce_off_paddle(paddle)
                events["paddle_hits"].append({"side": paddle.side.value, "speed": self.ball.speed})
                break

        # Goals
        if self.ball.position.x <= 0:
            self._score_point(PaddleSide.RIGHT, events)
        elif self.ball.position.x >= self.field_width:
            self._score_point(PaddleSide.LEFT, events)

        events["game_over"] = self.phase is GamePhase.FINISHED
        return events

    def _score_point(self, side: PaddleSide, events: dict[str, Any]) -> None:
        self.score.add_point(side)
        self.display.set_score_text(self.score.to_text())
        events["goals"].append({"side": side.value, "score": self.score.to_tuple()})
        logger.info("Point for %s player: %s", side.value, self.score.to_text())

        self.reset_ball()
        self._check_winner()

    def _check_winner(self) -> None:
        winner = self.score.leader_at(game_config.WIN_SCORE)
        if winner is None:
            return

        self.phase = GamePhase.FINISHED
        self.winner = winner
        for paddle in self.paddles:
            paddle.velocity = 0.0
        self.display.set_start_label(REMATCH_LABEL)
        self.display.set_start_visible(True)
        self.display.set_instructions_visible(True)
        logger.info("%s player wins %s", winner.value.capitalize(), self.score.to_text())

    # Layout helpers

    def reset_ball(self, direction: int | None = None, angle: float | None = None) -> None:
        """Resets the ball to center with a random (or given) launch"""
        self.ball.reset_to_center(
            self.field_width, self.field_height, self.rng, direction=direction, angle=angle
        )

    def reset_positions(self) -> None:
        """Centers both paddles, stops them and relaunches the ball"""
        for paddle in self.paddles:
            paddle.center_vertically(self.field_height)
        self.reset_ball()

    # Rendering

    def render(self) -> None:
        """Draws the current state, without changing it"""
        background = game_config.BACKGROUND_COLOR
        foreground = game_config.FOREGROUND_COLOR

        self.display.clear(background)

        center_x = self.field_width / 2
        self.display.draw_dashed_line(
            (center_x, 0.0), (center_x, self.field_height), game_config.CENTER_LINE_DASH, foreground
        )

        for paddle in self.paddles:
            self.display.fill_rect(*paddle.get_rect(), foreground)

        self.display.fill_circle(self.ball.position.to_tuple(), self.ball.radius, foreground)

    def get_game_state(self) -> dict[str, Any]:
        """Returns the complete game state"""
        return {
            "phase": self.phase.value,
            "field_size": (self.field_width, self.field_height),
            "ball_position": self.ball.position.to_tuple(),
            "ball_velocity": self.ball.velocity.to_tuple(),
            "ball_speed": self.ball.speed,
            # Differs from ball_speed after paddle hits unless bounces are normalized
            "ball_velocity_magnitude": self.ball.velocity.magnitude(),
            "left_paddle_position": self.left_paddle.position.to_tuple(),
            "right_paddle_position": self.right_paddle.position.to_tuple(),
            "score": self.score.to_tuple(),
            "winner": self.winner.value if self.winner else None,
        }
