"""
Unit tests for the pygame renderer, drawing onto an off-screen surface.
"""

import pygame  # type: ignore
import pytest

from src.snake.config import CELL_SIZE, GRID_SIZE, HUD_HEIGHT, THEMES, Config
from src.snake.engine import Phase, SnakeEngine
from src.snake.render import Hud, NullRenderer, PygameRenderer


@pytest.fixture(scope="module", autouse=True)
def fonts():
    pygame.font.init()
    yield
    pygame.font.quit()


@pytest.fixture
def renderer() -> PygameRenderer:
    surface = pygame.Surface((GRID_SIZE * CELL_SIZE, GRID_SIZE * CELL_SIZE + HUD_HEIGHT), 0, 32)
    return PygameRenderer(surface, pygame.font.Font(None, 20), GRID_SIZE)


@pytest.fixture
def engine() -> SnakeEngine:
    eng = SnakeEngine(Config(seed=4))
    eng.reset()
    eng.state.food = (12, 12)
    return eng


def pixel(renderer: PygameRenderer, gx: int, gy: int):
    return tuple(renderer.screen.get_at(renderer.cell_rect(gx, gy).center))[:3]


class TestPygameRenderer:

    def test_draws_head_body_and_food(self, renderer, engine):
        renderer.render(engine.state, False, Hud(best=30, speed_level=6))
        palette = THEMES["teal"]
        assert pixel(renderer, 6, 4) == palette["primary"]
        assert pixel(renderer, 5, 4) == palette["snake"]
        assert pixel(renderer, 12, 12) == palette["food"]
        assert pixel(renderer, 20, 20) == palette["bg"]

    def test_does_not_mutate_state(self, renderer, engine):
        before = engine.state.copy()
        renderer.render(engine.state, False)
        assert engine.state == before

    def test_theme_switch(self, renderer, engine):
        assert renderer.set_theme("ocean") is True
        renderer.render(engine.state, False)
        assert pixel(renderer, 20, 20) == THEMES["ocean"]["bg"]

    def test_unknown_theme_keeps_palette(self, renderer):
        assert renderer.set_theme("plaid") is False
        assert renderer.theme == "teal"

    def test_game_over_overlay_dims(self, renderer, engine):
        renderer.render(engine.state, False)
        lit = pixel(renderer, 20, 20)
        engine.state.phase = Phase.GAME_OVER
        renderer.render(engine.state, True)
        dimmed = pixel(renderer, 20, 20)
        assert sum(dimmed) < sum(lit)

    def test_board_without_food(self, renderer, engine):
        engine.state.food = None
        renderer.render(engine.state, True)


class TestNullRenderer:

    def test_counts_frames(self, engine):
        r = NullRenderer()
        r.render(engine.state, False)
        r.render(engine.state, True)
        assert r.frames == 2
        assert r.set_theme("pink") is True
        assert r.set_theme("plaid") is False
        assert r.theme == "pink"
