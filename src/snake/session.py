# session.py
from __future__ import annotations

import logging
from typing import Optional

from .config import CFG, Config, THEMES, DEFAULT_THEME
from .controls import InputRouter
from .engine import GameState, SnakeEngine, StepOutcome
from .highscore import HighScoreBackend, MemoryHighScoreStore
from .render import Hud, NullRenderer, Renderer
from .scheduler import TickScheduler

logger = logging.getLogger(__name__)


class GameSession:
    """
    Control surface for one player: start, pause, steer, speed and theme.

    Wires the engine to its scheduler and input router, keeps the best score
    in sync with the store, and asks the renderer for a frame after every
    step and every reset.
    """

    def __init__(
        self,
        cfg: Config = CFG,
        renderer: Optional[Renderer] = None,
        store: Optional[HighScoreBackend] = None,
        engine: Optional[SnakeEngine] = None,
    ):
        self.cfg = cfg
        self.engine = engine if engine is not None else SnakeEngine(cfg)
        self.scheduler = TickScheduler(self.engine, cfg, on_step=self._after_step)
        self.router = InputRouter(self.engine)
        self.renderer: Renderer = renderer if renderer is not None else NullRenderer()
        self.store: HighScoreBackend = store if store is not None else MemoryHighScoreStore()
        self.high_score = self.store.load()
        self.theme = DEFAULT_THEME
        self.engine.add_listener(self._on_event)
        self.redraw()

    # ---------- Read side ----------
    @property
    def state(self) -> GameState:
        return self.engine.state

    @property
    def speed_level(self) -> int:
        return self.scheduler.level

    @property
    def interval_ms(self) -> int:
        return self.scheduler.interval_ms

    # ---------- Commands ----------
    def start(self, now_ms: Optional[float] = None) -> None:
        """Start a new game, replacing any game in progress."""
        self.engine.reset()
        self.scheduler.start(now_ms)
        self.redraw()

    def toggle_pause(self) -> bool:
        paused = self.router.on_pause_toggle()
        if self.engine.state.running:
            self.scheduler.on_pause_toggle()
        self.redraw()
        return paused

    def set_direction(self, name: str) -> bool:
        return self.router.on_direction_name(name)

    def set_speed_level(self, level: int) -> int:
        self.scheduler.set_speed_level(level)
        self.redraw()
        return self.scheduler.level

    def set_theme(self, name: str) -> bool:
        if name not in THEMES:
            logger.debug("ignoring unknown theme %r", name)
            return False
        self.theme = name
        self.renderer.set_theme(name)
        self.redraw()
        return True

    def cycle_theme(self) -> str:
        names = list(THEMES)
        idx = names.index(self.theme) if self.theme in names else -1
        self.set_theme(names[(idx + 1) % len(names)])
        return self.theme

    def tick(self, now_ms: float) -> bool:
        """Feed one time signal; True while the scheduler wants more."""
        return self.scheduler.on_signal(now_ms)

    # ---------- Collaborators ----------
    def redraw(self) -> None:
        hud = Hud(best=self.high_score, speed_level=self.scheduler.level)
        self.renderer.render(self.engine.state, self.engine.state.is_over, hud)

    def _after_step(self, outcome: StepOutcome) -> None:
        self.redraw()

    def _on_event(self, outcome: StepOutcome, state: GameState) -> None:
        if outcome is StepOutcome.SCORED and state.score > self.high_score:
            self.high_score = state.score
            self.store.save(self.high_score)
            logger.debug("new high score %d", self.high_score)
