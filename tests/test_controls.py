"""
Unit tests for the input router and key bindings.
"""

import pygame  # type: ignore
import pytest

from src.snake.config import Config, UP, DOWN, LEFT, RIGHT
from src.snake.controls import (
    DIRECTION_KEYS, SPEED_KEYS, InputRouter, direction_from_name,
)
from src.snake.engine import Phase, SnakeEngine


@pytest.fixture
def router() -> InputRouter:
    eng = SnakeEngine(Config(seed=2))
    eng.reset()
    return InputRouter(eng)


class TestDirectionNames:

    @pytest.mark.parametrize("name,expected", [
        ("up", UP), ("down", DOWN), ("left", LEFT), ("right", RIGHT), (" Up ", UP),
    ])
    def test_known(self, name, expected):
        assert direction_from_name(name) == expected

    def test_unknown(self):
        assert direction_from_name("sideways") is None


class TestKeyBindings:

    def test_arrows_and_wasd(self):
        assert DIRECTION_KEYS[pygame.K_UP] == DIRECTION_KEYS[pygame.K_w] == UP
        assert DIRECTION_KEYS[pygame.K_a] == LEFT
        assert DIRECTION_KEYS[pygame.K_d] == RIGHT
        assert DIRECTION_KEYS[pygame.K_s] == DOWN

    def test_speed_digits(self):
        assert SPEED_KEYS[pygame.K_1] == 1
        assert SPEED_KEYS[pygame.K_9] == 9
        assert SPEED_KEYS[pygame.K_0] == 10


class TestRouter:

    def test_forwards_intent(self, router):
        assert router.on_direction_intent(UP) is True
        assert router.engine.state.pending == UP

    def test_reversal_dropped(self, router):
        assert router.on_direction_intent(LEFT) is False
        assert router.engine.state.pending == RIGHT

    def test_coalesces_to_latest(self, router):
        router.on_direction_name("up")
        router.on_direction_name("down")
        router.on_direction_name("left")   # reversal of current, ignored
        assert router.engine.state.pending == DOWN

    def test_unknown_name_ignored(self, router):
        assert router.on_direction_name("diagonal") is False
        assert router.engine.state.pending == RIGHT

    def test_pause_toggle(self, router):
        assert router.on_pause_toggle() is True
        assert router.engine.state.phase is Phase.PAUSED
        assert router.on_pause_toggle() is False
        assert router.engine.state.phase is Phase.RUNNING

    def test_non_unit_intent_dropped(self, router):
        assert router.on_direction_intent((0, 0)) is False
        assert router.on_direction_intent((2, 0)) is False
        assert router.engine.state.pending == RIGHT

    def test_pause_ignored_before_start(self):
        r = InputRouter(SnakeEngine(Config()))
        assert r.on_pause_toggle() is False
        assert r.engine.state.phase is Phase.READY
