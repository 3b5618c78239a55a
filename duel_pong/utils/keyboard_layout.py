"""
Keyboard layout detection and management for Duel Pong
"""

import json
import locale
import logging
import os
from pathlib import Path

from duel_pong.utils.config import KEYBOARD_LAYOUTS
from duel_pong.utils.config import game_config

logger = logging.getLogger(__name__)

LOCALE_LAYOUTS = {"fr": "azerty", "de": "qwertz"}


def _layout_for_language(language: str) -> str:
    language = language.lower()
    for prefix, layout in LOCALE_LAYOUTS.items():
        if language.startswith(prefix):
            return layout
    return "qwerty"


def detect_system_layout() -> str:
    """
    Detect the most likely keyboard layout based on system locale

    Returns:
        Keyboard layout name (default to 'qwerty' if detection fails)
    """
    try:
        system_locale = locale.getlocale()[0]
    except ValueError:
        system_locale = None

    if system_locale:
        return _layout_for_language(system_locale)

    # Fallback to environment variables
    lang = os.environ.get("LANG", "")
    if lang:
        return _layout_for_language(lang)

    return "qwerty"


def get_config_file_path() -> Path:
    """Get the path to the user configuration file"""
    return Path.home() / ".config" / "duel_pong" / "user_config.json"


def load_user_preferences() -> dict:
    """Load user preferences from config file"""
    config_file = get_config_file_path()

    if config_file.exists():
        try:
            with open(config_file, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable preferences %s: %s", config_file, e)

    return {}


def save_user_preferences(preferences: dict) -> bool:
    """Save user preferences to config file, returns False if it could not be written"""
    config_file = get_config_file_path()

    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(preferences, f, indent=2, ensure_ascii=False)
    except OSError as e:
        logger.warning("Could not save preferences to %s: %s", config_file, e)
        return False
    return True


def get_preferred_layout() -> str:
    """
    Get the user's preferred keyboard layout

    Priority:
    1. User saved preference
    2. System detection
    3. Default configuration
    """
    user_prefs = load_user_preferences()
    layout = user_prefs.get("keyboard_layout")
    if layout in KEYBOARD_LAYOUTS:
        return layout

    detected = detect_system_layout()
    if detected in KEYBOARD_LAYOUTS:
        return detected

    return game_config.KEYBOARD_LAYOUT


def set_preferred_layout(layout: str) -> bool:
    """
    Set the user's preferred keyboard layout

    The layout is applied to the running game even when the preference
    file cannot be written.

    Args:
        layout: Layout name (must be in KEYBOARD_LAYOUTS)

    Returns:
        True if the layout was applied and stored, False otherwise
    """
    if layout not in KEYBOARD_LAYOUTS:
        return False

    game_config.KEYBOARD_LAYOUT = layout

    user_prefs = load_user_preferences()
    user_prefs["keyboard_layout"] = layout
    return save_user_preferences(user_prefs)


def auto_configure_layout() -> str:
    """
    Automatically configure the best keyboard layout

    Returns:
        The selected layout name
    """
    preferred = get_preferred_layout()
    game_config.KEYBOARD_LAYOUT = preferred
    logger.debug("Keyboard layout: %s", preferred)
    return preferred


def controls_help_lines() -> list[str]:
    """Instruction lines for the current layout"""
    layout = game_config.get_keyboard_layout()
    names = layout.display_names
    return [
        f"Left player: {names['left_up']} / {names['left_down']}",
        f"Right player: {names['right_up']} / {names['right_down']}",
        "P: pause",
        f"First to {game_config.WIN_SCORE} points wins",
    ]
