"""
Core module of Duel Pong game
"""

from duel_pong.core.entities import Ball
from duel_pong.core.entities import GamePhase
from duel_pong.core.entities import Paddle
from duel_pong.core.entities import PaddleSide
from duel_pong.core.entities import Score
from duel_pong.core.entities import Vector2D
from duel_pong.core.game_engine import GameEngine
from duel_pong.core.scheduler import FrameScheduler

__all__ = [
    "Ball",
    "Paddle",
    "PaddleSide",
    "Score",
    "GamePhase",
    "Vector2D",
    "GameEngine",
    "FrameScheduler",
]
