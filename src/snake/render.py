# render.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

import pygame  # type: ignore

from .config import CELL_SIZE, HUD_HEIGHT, THEMES, DEFAULT_THEME, Color
from .engine import GameState, Phase

logger = logging.getLogger(__name__)


@dataclass
class Hud:
    best: int = 0
    speed_level: int = 0


class Renderer(Protocol):
    def render(self, state: GameState, is_game_over: bool, hud: Optional[Hud] = None) -> None: ...
    def set_theme(self, name: str) -> bool: ...


class NullRenderer:
    """Renderer that draws nothing (headless runs)."""

    def __init__(self):
        self.frames = 0
        self.theme = DEFAULT_THEME

    def render(self, state: GameState, is_game_over: bool, hud: Optional[Hud] = None) -> None:
        self.frames += 1

    def set_theme(self, name: str) -> bool:
        if name not in THEMES:
            return False
        self.theme = name
        return True


class PygameRenderer:
    """
    Draws the board onto a pygame surface: HUD strip on top, grid below.
    Reads the state only.
    """

    def __init__(
        self,
        screen: pygame.Surface,
        font: pygame.font.Font,
        grid_size: int,
        cell_size: int = CELL_SIZE,
        theme: str = DEFAULT_THEME,
    ):
        self.screen = screen
        self.font = font
        self.grid_size = grid_size
        self.cell_size = cell_size
        self.theme = theme if theme in THEMES else DEFAULT_THEME
        self.palette = THEMES[self.theme]

    def set_theme(self, name: str) -> bool:
        if name not in THEMES:
            logger.debug("ignoring unknown theme %r", name)
            return False
        self.theme = name
        self.palette = THEMES[name]
        return True

    # ---------- Primitives ----------
    def cell_rect(self, gx: int, gy: int, pad: int = 1) -> pygame.Rect:
        cs = self.cell_size
        return pygame.Rect(gx * cs + pad, HUD_HEIGHT + gy * cs + pad, cs - pad * 2, cs - pad * 2)

    def draw_cell(self, gx: int, gy: int, color: Color) -> None:
        pygame.draw.rect(self.screen, color, self.cell_rect(gx, gy))

    def draw_grid(self) -> None:
        size = self.grid_size * self.cell_size
        for i in range(1, self.grid_size):
            p = i * self.cell_size
            pygame.draw.line(self.screen, self.palette["grid"], (p, HUD_HEIGHT), (p, HUD_HEIGHT + size))
            pygame.draw.line(self.screen, self.palette["grid"], (0, HUD_HEIGHT + p), (size, HUD_HEIGHT + p))

    # ---------- Frame ----------
    def render(self, state: GameState, is_game_over: bool, hud: Optional[Hud] = None) -> None:
        self.screen.fill(self.palette["bg"])
        self.draw_grid()
        if state.food is not None:
            self.draw_cell(state.food[0], state.food[1], self.palette["food"])
        for idx, (x, y) in enumerate(state.snake):
            self.draw_cell(x, y, self.palette["primary"] if idx == 0 else self.palette["snake"])
        self.draw_hud(state, hud)
        if is_game_over:
            self.draw_game_over(state)

    def draw_hud(self, state: GameState, hud: Optional[Hud]) -> None:
        parts = [f"Score: {state.score}"]
        if hud is not None:
            parts.append(f"Best: {hud.best}")
            parts.append(f"Speed: {hud.speed_level}")
        if state.paused:
            parts.append("PAUSED")
        elif state.phase is Phase.READY:
            parts.append("Press Enter to start")
        txt = self.font.render("   ".join(parts), True, self.palette["text"])
        self.screen.blit(txt, (8, (HUD_HEIGHT - txt.get_height()) // 2))

    def draw_game_over(self, state: GameState) -> None:
        width, height = self.screen.get_size()
        # Dim with translucent overlay
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 102))  # RGBA
        self.screen.blit(overlay, (0, 0))

        heading = "BOARD FULL" if state.phase is Phase.BOARD_FULL else "GAME OVER"
        title = self.font.render(heading, True, (255, 255, 255))
        sub   = self.font.render("Press Enter to restart", True, (230, 230, 230))
        sco   = self.font.render(f"Score: {state.score}", True, (230, 230, 230))

        center: Tuple[int, int] = (width // 2, height // 2)
        self.screen.blit(title, title.get_rect(center=(center[0], center[1] - 16)))
        self.screen.blit(sub, sub.get_rect(center=(center[0], center[1] + 16)))
        self.screen.blit(sco, sco.get_rect(center=(center[0], center[1] + 44)))
