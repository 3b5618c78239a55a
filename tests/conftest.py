"""
Shared fixtures: an in-memory display, a controllable clock and an engine
"""

import numpy as np
import pytest

from duel_pong.core.game_engine import GameEngine
from duel_pong.core.scheduler import FrameScheduler
from duel_pong.utils.config import game_config


class RecordingDisplay:
    """Display that records draw calls and UI signals instead of drawing"""

    def __init__(self, width: float = 800, height: float = 450):
        self._width = width
        self._height = height
        self.ops: list[tuple] = []
        self.score_text = ""
        self.start_label = ""
        self.start_visible = False
        self.instructions_visible = False
        self.start_hit = False

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def set_size(self, width, height):
        self._width = width
        self._height = height

    def clear(self, color):
        self.ops.append(("clear", color))

    def fill_rect(self, x, y, width, height, color):
        self.ops.append(("rect", (x, y, width, height), color))

    def fill_circle(self, center, radius, color):
        self.ops.append(("circle", center, radius, color))

    def draw_dashed_line(self, start, end, dash, color):
        self.ops.append(("dashed_line", start, end, dash, color))

    def set_score_text(self, text):
        self.score_text = text

    def set_start_visible(self, visible):
        self.start_visible = visible

    def set_start_label(self, label):
        self.start_label = label

    def set_instructions_visible(self, visible):
        self.instructions_visible = visible

    def start_button_hit(self, pos):
        return self.start_hit


class FakeClock:
    """Millisecond clock advanced by hand"""

    def __init__(self, start: float = 1000.0):
        self.time = start

    def __call__(self) -> float:
        return self.time

    def advance(self, ms: float) -> None:
        self.time += ms


@pytest.fixture(autouse=True)
def restore_game_config():
    """Every test starts and ends with the default configuration"""
    game_config.reset_to_defaults()
    yield
    game_config.reset_to_defaults()


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return FrameScheduler(clock=clock)


@pytest.fixture
def engine(display, scheduler):
    return GameEngine(display, scheduler, np.random.default_rng(1234))


@pytest.fixture
def playing_engine(engine):
    engine.start()
    return engine
