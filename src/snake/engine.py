# engine.py
from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Tuple

import numpy as np  # type: ignore

from .config import CFG, Config, DIRECTIONS, RIGHT

logger = logging.getLogger(__name__)

Position = Tuple[int, int]
Direction = Tuple[int, int]
UNIT_DIRECTIONS = frozenset(DIRECTIONS.values())


# ---------- Helpers ----------
def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def in_bounds(pos: Position, grid_size: int) -> bool:
    return 0 <= pos[0] < grid_size and 0 <= pos[1] < grid_size

def initial_snake(head: Position, length: int) -> List[Position]:
    """Head-first body laid out to the left of ``head``."""
    hx, hy = head
    return [(hx - i, hy) for i in range(length)]


# ---------- State ----------
class Phase(enum.Enum):
    READY = "ready"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    BOARD_FULL = "board_full"


class StepOutcome(enum.Enum):
    IDLE = "idle"              # not advancing (ready, paused or over)
    MOVED = "moved"
    SCORED = "scored"
    DIED = "died"
    BOARD_FULL = "board_full"


@dataclass
class GameState:
    snake: List[Position]          # head at index 0
    direction: Direction
    pending: Direction
    food: Optional[Position]       # None only when no free cell is left
    score: int = 0
    phase: Phase = Phase.READY
    death_reason: Optional[str] = None   # "wall" | "self"

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def running(self) -> bool:
        return self.phase in (Phase.RUNNING, Phase.PAUSED)

    @property
    def paused(self) -> bool:
        return self.phase is Phase.PAUSED

    @property
    def alive(self) -> bool:
        return self.death_reason is None

    @property
    def is_over(self) -> bool:
        return self.phase in (Phase.GAME_OVER, Phase.BOARD_FULL)

    def copy(self) -> "GameState":
        return replace(self, snake=list(self.snake))


Listener = Callable[[StepOutcome, GameState], None]


# ---------- Engine ----------
class SnakeEngine:
    """
    Owns the GameState and is the only thing that advances it.

    The engine starts in READY with a board laid out but not moving;
    ``reset()`` starts (or restarts) a game. ``step()`` is the single
    state transition: adopt the pending direction, move the head, check
    walls and body, then either grow onto food or drop the tail.
    """

    def __init__(self, cfg: Config = CFG, rng: Optional[random.Random] = None):
        errors = cfg.validate()
        if errors:
            raise ValueError("invalid config: " + "; ".join(errors))
        self.cfg = cfg
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self._listeners: List[Listener] = []
        self.state = self._fresh_state()

    # ----- lifecycle -----
    def _fresh_state(self) -> GameState:
        snake = initial_snake(self.cfg.start_head, self.cfg.initial_length)
        return GameState(
            snake=snake,
            direction=RIGHT,
            pending=RIGHT,
            food=self.spawn_food(snake),
        )

    def reset(self) -> GameState:
        """Replace the state wholesale and start running."""
        self.state = self._fresh_state()
        self.state.phase = Phase.RUNNING
        logger.info("game started (grid=%d, length=%d)", self.cfg.grid_size, len(self.state.snake))
        return self.state

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    # ----- input side -----
    def set_pending_direction(self, direction: Direction) -> bool:
        """
        Overwrite the pending direction unless it reverses the current one.
        Only unit directions are accepted, and a finished game ignores input.
        """
        direction = tuple(direction)
        if direction not in UNIT_DIRECTIONS or self.state.is_over:
            return False
        if is_opposite(direction, self.state.direction):
            return False
        self.state.pending = direction
        return True

    def toggle_pause(self) -> bool:
        """Flip RUNNING <-> PAUSED; no-op in READY and terminal phases."""
        st = self.state
        if st.phase is Phase.RUNNING:
            st.phase = Phase.PAUSED
        elif st.phase is Phase.PAUSED:
            st.phase = Phase.RUNNING
        return st.paused

    # ----- food -----
    def spawn_food(self, snake: List[Position]) -> Optional[Position]:
        """
        Uniformly random empty cell, or None when the snake fills the board.

        Rejection sampling is tried first; after ``max_spawn_attempts`` misses
        the free cells are enumerated from an occupancy mask and one is picked.
        """
        n = self.cfg.grid_size
        if len(snake) >= n * n:
            return None
        occupied = set(snake)
        for _ in range(self.cfg.max_spawn_attempts):
            cell = (self.rng.randrange(n), self.rng.randrange(n))
            if cell not in occupied:
                return cell

        mask = np.zeros((n, n), dtype=bool)   # indexed [x, y]
        for x, y in snake:
            mask[x, y] = True
        free = np.argwhere(~mask)
        if len(free) == 0:
            return None
        fx, fy = free[self.rng.randrange(len(free))]
        return (int(fx), int(fy))

    # ----- stepping -----
    def step(self) -> StepOutcome:
        st = self.state
        if st.phase is not Phase.RUNNING:
            return StepOutcome.IDLE

        # Commit direction once per step
        st.direction = st.pending

        hx, hy = st.snake[0]
        dx, dy = st.direction
        new_head = (hx + dx, hy + dy)

        # Wall collision
        if not in_bounds(new_head, self.cfg.grid_size):
            return self._finish(StepOutcome.DIED, Phase.GAME_OVER, "wall")

        # Self collision (the tail cell counts: it has not moved yet)
        if new_head in st.snake:
            return self._finish(StepOutcome.DIED, Phase.GAME_OVER, "self")

        st.snake.insert(0, new_head)

        if new_head == st.food:
            st.score += self.cfg.food_reward
            logger.debug("food eaten at %s, score=%d", new_head, st.score)
            st.food = self.spawn_food(st.snake)
            if st.food is None:
                return self._finish(StepOutcome.BOARD_FULL, Phase.BOARD_FULL, None)
            outcome = StepOutcome.SCORED
        else:
            st.snake.pop()
            outcome = StepOutcome.MOVED

        self._notify(outcome)
        return outcome

    def _finish(self, outcome: StepOutcome, phase: Phase, reason: Optional[str]) -> StepOutcome:
        st = self.state
        st.phase = phase
        st.death_reason = reason
        if phase is Phase.BOARD_FULL:
            logger.info("board full, score=%d", st.score)
        else:
            logger.info("game over (%s), score=%d, length=%d", reason, st.score, len(st.snake))
        # scoring the last food still counts as a scored event
        if outcome is StepOutcome.BOARD_FULL:
            self._notify(StepOutcome.SCORED)
        self._notify(outcome)
        return outcome

    def _notify(self, outcome: StepOutcome) -> None:
        for listener in self._listeners:
            listener(outcome, self.state)
