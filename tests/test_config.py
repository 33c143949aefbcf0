"""
Unit tests for configuration defaults and validation.
"""

import pytest

from src.snake.config import (
    CFG, Config, DEFAULT_THEME, THEMES,
    FOOD_REWARD, GRID_SIZE, INITIAL_SNAKE_LENGTH, MAX_INTERVAL_MS, MIN_INTERVAL_MS,
)


class TestDefaults:

    def test_constants(self):
        assert GRID_SIZE == 24
        assert INITIAL_SNAKE_LENGTH == 3
        assert FOOD_REWARD == 10
        assert MIN_INTERVAL_MS == 60
        assert MAX_INTERVAL_MS == 240

    def test_default_config_valid(self):
        assert CFG.validate() == []
        assert CFG.speed_level == 6
        assert CFG.cell_size == 24

    def test_themes_complete(self):
        assert DEFAULT_THEME in THEMES
        for palette in THEMES.values():
            assert set(palette) == {"bg", "grid", "snake", "primary", "food", "text"}


class TestValidation:

    @pytest.mark.parametrize("kwargs", [
        {"grid_size": 3},
        {"initial_length": 0},
        {"food_reward": -1},
        {"min_interval_ms": 0},
        {"min_interval_ms": 300},
        {"speed_level": 11},
        {"start_head": (1, 4)},
        {"start_head": (6, 40)},
        {"max_spawn_attempts": -1},
        {"cell_size": 2},
    ])
    def test_rejects(self, kwargs):
        assert Config(**kwargs).validate()

    def test_small_grid_ok(self):
        assert Config(grid_size=2, initial_length=1, start_head=(0, 0)).validate() == []
