"""
Unit tests for configuration validation

Tests the configuration system including:
- Defaults and field constraints
- Cross-field validation
- JSON persistence
- Context manager for temporary config changes
"""

import json

import pytest
from pydantic import ValidationError

from duel_pong.utils.config import KEYBOARD_LAYOUTS
from duel_pong.utils.config import GameConfig
from duel_pong.utils.config import game_config
from duel_pong.utils.config import game_config_tmp
from duel_pong.utils.config import load_config_from_file


class TestGameConfigDefaults:
    """Test the default gameplay constants"""

    def test_default_values(self):
        config = GameConfig()

        assert config.PADDLE_WIDTH == 10
        assert config.PADDLE_HEIGHT == 100
        assert config.BALL_SIZE == 10
        assert config.PADDLE_SPEED == 0.4
        assert config.INITIAL_BALL_SPEED == 0.3
        assert config.BALL_SPEED_INCREASE == 1.1
        assert config.WIN_SCORE == 10
        assert config.LAUNCH_ANGLE_DEGREES == 22.5
        assert config.CENTER_LINE_DASH == (5, 15)
        assert not config.NORMALIZE_BOUNCE_SPEED

    def test_field_height_for(self):
        config = GameConfig()
        assert config.field_height_for(1600) == 900
        assert config.field_height_for(800) == 450

    @pytest.mark.parametrize("name", sorted(KEYBOARD_LAYOUTS))
    def test_get_keyboard_layout(self, name):
        config = GameConfig(KEYBOARD_LAYOUT=name)
        layout = config.get_keyboard_layout()
        assert layout is KEYBOARD_LAYOUTS[name]
        assert layout.right_up == ("ArrowUp",)


class TestGameConfigValidation:
    """Test configuration validation"""

    @pytest.mark.parametrize(
        "field,value",
        [
            ("PADDLE_WIDTH", 0),
            ("PADDLE_HEIGHT", -5),
            ("PADDLE_SPEED", 0),
            ("INITIAL_BALL_SPEED", -0.3),
            ("WIN_SCORE", 0),
            ("BALL_SPEED_INCREASE", 0.9),
            ("LAUNCH_ANGLE_DEGREES", 90),
            ("KEYBOARD_LAYOUT", "dvorak"),
            ("CENTER_LINE_DASH", (0, 15)),
        ],
    )
    def test_invalid_values_rejected(self, field, value):
        with pytest.raises(ValidationError):
            GameConfig(**{field: value})

    def test_assignment_is_validated(self):
        config = GameConfig()
        with pytest.raises(ValidationError):
            config.KEYBOARD_LAYOUT = "colemak"
        assert config.KEYBOARD_LAYOUT == "qwerty"

    def test_min_field_must_fit_paddle(self):
        with pytest.raises(ValidationError, match="PADDLE_HEIGHT"):
            GameConfig(MIN_FIELD_WIDTH=100)

    def test_taller_paddle_needs_wider_minimum(self):
        config = GameConfig(PADDLE_HEIGHT=200, MIN_FIELD_WIDTH=400)
        assert config.field_height_for(config.MIN_FIELD_WIDTH) >= config.PADDLE_HEIGHT


class TestConfigPersistence:
    """Test saving and loading configuration files"""

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "config.json"
        config = GameConfig(WIN_SCORE=5, KEYBOARD_LAYOUT="azerty")

        config.save_to_file(str(path))
        loaded = GameConfig.load_from_file(str(path))

        assert loaded.WIN_SCORE == 5
        assert loaded.KEYBOARD_LAYOUT == "azerty"
        assert loaded.CENTER_LINE_DASH == (5, 15)

    def test_load_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            GameConfig.load_from_file(str(tmp_path / "missing.json"))

    def test_load_into_global_config(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"WIN_SCORE": 3, "PADDLE_SPEED": 0.8}))

        assert load_config_from_file(str(path))
        assert game_config.WIN_SCORE == 3
        assert game_config.PADDLE_SPEED == 0.8

    def test_load_missing_into_global_config(self, tmp_path):
        assert not load_config_from_file(str(tmp_path / "missing.json"))
        assert game_config.WIN_SCORE == 10

    @pytest.mark.parametrize("content", ["{not json", json.dumps({"WIN_SCORE": -1})])
    def test_load_invalid_file(self, tmp_path, content):
        path = tmp_path / "config.json"
        path.write_text(content)

        assert not load_config_from_file(str(path))
        assert game_config.WIN_SCORE == 10

    def test_reset_to_defaults(self):
        config = GameConfig(WIN_SCORE=3, PADDLE_HEIGHT=200, MIN_FIELD_WIDTH=400)
        config.reset_to_defaults()
        assert config.WIN_SCORE == 10
        assert config.PADDLE_HEIGHT == 100
        assert config.MIN_FIELD_WIDTH == 320


class TestGameConfigTmp:
    """Test the temporary override context manager"""

    def test_values_restored(self):
        with game_config_tmp(WIN_SCORE=3, KEYBOARD_LAYOUT="qwertz"):
            assert game_config.WIN_SCORE == 3
            assert game_config.KEYBOARD_LAYOUT == "qwertz"
        assert game_config.WIN_SCORE == 10
        assert game_config.KEYBOARD_LAYOUT == "qwerty"

    def test_values_restored_on_error(self):
        with pytest.raises(RuntimeError):
            with game_config_tmp(PADDLE_SPEED=1.0):
                raise RuntimeError("boom")
        assert game_config.PADDLE_SPEED == 0.4

    def test_dependent_fields(self):
        """Fields are applied in order and restored in reverse order"""
        with game_config_tmp(MIN_FIELD_WIDTH=400, PADDLE_HEIGHT=200):
            assert game_config.PADDLE_HEIGHT == 200
        assert game_config.PADDLE_HEIGHT == 100
        assert game_config.MIN_FIELD_WIDTH == 320

    def test_invalid_value_rejected(self):
        with pytest.raises(ValidationError):
            with game_config_tmp(WIN_SCORE=2, KEYBOARD_LAYOUT="dvorak"):
                pass
        assert game_config.WIN_SCORE == 10
