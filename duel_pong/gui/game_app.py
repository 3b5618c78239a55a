"""
Main game application with PyGame GUI
"""

import argparse
import logging
import sys

import numpy as np
import pygame

from duel_pong.core.entities import GamePhase
from duel_pong.core.game_engine import GameEngine
from duel_pong.core.scheduler import FrameScheduler
from duel_pong.gui.input_manager import InputManager
from duel_pong.gui.pygame_display import PygameDisplay
from duel_pong.utils.config import KEYBOARD_LAYOUTS
from duel_pong.utils.config import game_config
from duel_pong.utils.config import load_config_from_file
from duel_pong.utils.keyboard_layout import auto_configure_layout
from duel_pong.utils.keyboard_layout import controls_help_lines
from duel_pong.utils.keyboard_layout import set_preferred_layout

logger = logging.getLogger(__name__)


class DuelPongApp:
    """Hosts the engine: window, refresh loop and event delivery"""

    def __init__(self, width: int | None = None, seed: int | None = None) -> None:
        """Initialize the application"""
        self.display = PygameDisplay(width)
        self.display.set_instructions(controls_help_lines())

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()
        self.scheduler = FrameScheduler(clock=pygame.time.get_ticks)

        self.engine = GameEngine(self.display, self.scheduler, np.random.default_rng(seed))
        self.input_manager = InputManager(self.engine, self.display)
        self.running = True

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if self.input_manager.handle_event(event) == "quit":
                self.running = False

    def run(self) -> None:
        """Main application loop"""
        logger.info("Starting Duel Pong")

        try:
            while self.running:
                self.handle_events()

                # One display refresh: run the frame callbacks registered so far
                self.scheduler.run_frame()
                self.display.present(paused=self.engine.phase is GamePhase.PAUSED)

                # Control frame rate
                self.clock.tick(game_config.FPS)
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        logger.info("Cleaning up resources")
        self.scheduler.cancel_all()
        self.display.cleanup()


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"{value} is not a positive integer")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Two-player Pong")
    parser.add_argument(
        "--width", type=positive_int, default=None, help="Initial window width in pixels"
    )
    parser.add_argument(
        "--layout",
        choices=sorted(KEYBOARD_LAYOUTS),
        default=None,
        help="Keyboard layout, remembered for later runs (default: saved choice or system locale)",
    )
    parser.add_argument("--config", default=None, help="JSON configuration file")
    parser.add_argument("--fps", type=positive_int, default=None, help="Frame rate cap")
    parser.add_argument("--seed", type=int, default=None, help="Seed for ball launches")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point"""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config and not load_config_from_file(args.config):
        logger.error("Could not load configuration from %s", args.config)
        return 2

    if args.layout:
        if not set_preferred_layout(args.layout):
            logger.warning("Keyboard layout %s applied but not saved", args.layout)
    else:
        auto_configure_layout()
    if args.fps:
        game_config.FPS = args.fps

    try:
        app = DuelPongApp(args.width, args.seed)
        app.run()
    except KeyboardInterrupt:
        logger.info("User interruption")
    finally:
        # Ensure pygame is properly closed
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
