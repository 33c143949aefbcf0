# controls.py
from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

import pygame  # type: ignore

from .config import DIRECTIONS, UP, DOWN, LEFT, RIGHT
from .engine import SnakeEngine

logger = logging.getLogger(__name__)

# ----- Keyboard bindings -----
DIRECTION_KEYS: Dict[int, Tuple[int, int]] = {
    pygame.K_UP: UP,    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,  pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,  pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}
PAUSE_KEYS = (pygame.K_SPACE,)
START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_r)
THEME_KEYS = (pygame.K_t,)
QUIT_KEYS = (pygame.K_ESCAPE,)
# 1..9 then 0 for level 10
SPEED_KEYS: Dict[int, int] = {
    **{getattr(pygame, f"K_{n}"): n for n in range(1, 10)},
    pygame.K_0: 10,
}


def direction_from_name(name: str) -> Optional[Tuple[int, int]]:
    return DIRECTIONS.get(str(name).strip().lower())


class InputRouter:
    """
    Funnels directional intents into the engine's single pending slot.

    Several intents between two steps simply overwrite each other, so only
    the latest valid one is applied by the next step.
    """

    def __init__(self, engine: SnakeEngine):
        self.engine = engine

    def on_direction_intent(self, direction: Tuple[int, int]) -> bool:
        accepted = self.engine.set_pending_direction(direction)
        if not accepted:
            logger.debug("rejected reversal %s while heading %s", direction, self.engine.state.direction)
        return accepted

    def on_direction_name(self, name: str) -> bool:
        direction = direction_from_name(name)
        if direction is None:
            logger.debug("ignoring unknown direction %r", name)
            return False
        return self.on_direction_intent(direction)

    def on_pause_toggle(self) -> bool:
        return self.engine.toggle_pause()
