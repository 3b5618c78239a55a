"""
Tests for Duel Pong game entities
"""

import math

import numpy as np
import pytest

from duel_pong.core.entities import Ball
from duel_pong.core.entities import Paddle
from duel_pong.core.entities import PaddleSide
from duel_pong.core.entities import Score
from duel_pong.core.entities import Vector2D
from duel_pong.utils.config import game_config


class TestVector2D:
    """Tests for Vector2D class"""

    def test_creation(self) -> None:
        """Test vector creation"""
        v = Vector2D(3.0, 4.0)
        assert v.x == 3.0
        assert v.y == 4.0

    def test_in_place_addition(self) -> None:
        v = Vector2D(1.0, 2.0)
        same = v
        v += Vector2D(0.5, 0.5)
        assert same.to_tuple() == (1.5, 2.5)

    def test_scalar_multiplication(self) -> None:
        """Test scalar multiplication"""
        result = Vector2D(2.0, 3.0) * 2.5
        assert result.to_tuple() == (5.0, 7.5)

    def test_magnitude(self) -> None:
        """Test magnitude calculation"""
        assert Vector2D(3.0, 4.0).magnitude() == 5.0
        assert Vector2D(0.0, 0.0).magnitude() == 0.0


class TestBall:
    """Tests for Ball class"""

    def test_creation(self) -> None:
        """Test ball creation with configured defaults"""
        ball = Ball(100.0, 200.0)
        assert ball.position.to_tuple() == (100.0, 200.0)
        assert ball.velocity.to_tuple() == (0.0, 0.0)
        assert ball.speed == game_config.INITIAL_BALL_SPEED
        assert ball.radius == game_config.BALL_SIZE / 2

    def test_update_position(self) -> None:
        """Test position update, velocity is per millisecond"""
        ball = Ball(0.0, 0.0)
        ball.velocity = Vector2D(0.3, -0.1)
        ball.update(10)
        assert ball.position.to_tuple() == pytest.approx((3.0, -1.0))

    def test_bounce_vertical(self) -> None:
        """Test vertical bounce"""
        ball = Ball()
        ball.velocity = Vector2D(0.2, 0.1)
        ball.bounce_vertical()
        assert ball.velocity.to_tuple() == (0.2, -0.1)

    def test_reset_to_center(self) -> None:
        ball = Ball(3.0, 3.0)
        ball.speed = 2.0
        ball.reset_to_center(640, 360, np.random.default_rng(7))

        assert ball.position.to_tuple() == (320, 180)
        assert ball.speed == game_config.INITIAL_BALL_SPEED
        assert ball.velocity.magnitude() == pytest.approx(ball.speed)
        assert abs(math.atan2(ball.velocity.y, abs(ball.velocity.x))) <= math.pi / 8


class TestPaddle:
    """Tests for Paddle class"""

    def test_creation(self) -> None:
        paddle = Paddle(PaddleSide.RIGHT, 700.0, 100.0)
        assert paddle.side is PaddleSide.RIGHT
        assert paddle.position.to_tuple() == (700.0, 100.0)
        assert paddle.velocity == 0.0
        assert paddle.width == game_config.PADDLE_WIDTH
        assert paddle.height == game_config.PADDLE_HEIGHT

    def test_get_rect(self) -> None:
        """Test getting collision rectangle"""
        paddle = Paddle(PaddleSide.LEFT, 100.0, 200.0)
        assert paddle.get_rect() == (100.0, 200.0, paddle.width, paddle.height)

    @pytest.mark.parametrize(
        "point,inside",
        [
            ((20.0, 175.0), True),
            ((30.0, 275.0), True),
            ((25.0, 225.0), True),
            ((19.9, 225.0), False),
            ((25.0, 275.1), False),
        ],
    )
    def test_contains_edges(self, point, inside) -> None:
        paddle = Paddle(PaddleSide.LEFT, 20.0, 175.0, width=10.0, height=100.0)
        assert paddle.contains(Vector2D(*point)) is inside

    def test_update_clamps(self) -> None:
        paddle = Paddle(PaddleSide.LEFT, 20.0, 10.0)
        paddle.velocity = -0.4
        paddle.update(100, 450)
        assert paddle.position.y == 0.0

    def test_constrain_on_tiny_field(self) -> None:
        """A field lower than the paddle pins it to the top"""
        paddle = Paddle(PaddleSide.LEFT, 20.0, 30.0)
        paddle.constrain_position(50)
        assert paddle.position.y == 0.0

    def test_center_vertically_stops_paddle(self) -> None:
        paddle = Paddle(PaddleSide.RIGHT, 770.0, 0.0)
        paddle.velocity = 0.4
        paddle.center_vertically(450)
        assert paddle.position.y == 175.0
        assert paddle.velocity == 0.0


class TestScore:
    """Tests for Score class"""

    def test_add_point(self) -> None:
        score = Score()
        score.add_point(PaddleSide.RIGHT)
        score.add_point(PaddleSide.RIGHT)
        score.add_point(PaddleSide.LEFT)
        assert score.to_tuple() == (1, 2)
        assert score.to_text() == "1 - 2"

    def test_reset(self) -> None:
        score = Score(4, 9)
        score.reset()
        assert score.to_tuple() == (0, 0)

    @pytest.mark.parametrize(
        "left,right,expected",
        [
            (9, 9, None),
            (10, 3, PaddleSide.LEFT),
            (2, 10, PaddleSide.RIGHT),
        ],
    )
    def test_leader_at(self, left, right, expected) -> None:
        assert Score(left, right).leader_at(10) is expected
