# scheduler.py
from __future__ import annotations

import logging
from typing import Callable, Optional

from .config import (
    CFG, Config,
    MIN_SPEED_LEVEL, MAX_SPEED_LEVEL,
)
from .engine import SnakeEngine, StepOutcome

logger = logging.getLogger(__name__)


def clamp_level(level: int) -> int:
    return max(MIN_SPEED_LEVEL, min(MAX_SPEED_LEVEL, int(level)))

def interval_for_level(level: int, min_ms: int = CFG.min_interval_ms, max_ms: int = CFG.max_interval_ms) -> int:
    """
    Map a speed level onto a step interval in ms.

    Level 1 is the slowest (``max_ms``), level 10 the fastest (``min_ms``),
    linear in between with t = (level - 1) / 9.
    """
    level = clamp_level(level)
    t = (level - MIN_SPEED_LEVEL) / (MAX_SPEED_LEVEL - MIN_SPEED_LEVEL)
    return int(round(max_ms + (min_ms - max_ms) * t))


class TickScheduler:
    """
    Turns a continuous time signal (ms timestamps) into engine steps.

    ``on_signal`` is the only place the host driver hands control back:
    it steps the engine when at least one interval has elapsed since the
    last step and tells the host whether to keep calling. Time spent
    paused is dropped, never replayed as catch-up steps.
    """

    def __init__(
        self,
        engine: SnakeEngine,
        cfg: Config = CFG,
        on_step: Optional[Callable[[StepOutcome], None]] = None,
    ):
        self.engine = engine
        self.cfg = cfg
        self.on_step = on_step
        self.level = clamp_level(cfg.speed_level)
        self.interval_ms = interval_for_level(self.level, cfg.min_interval_ms, cfg.max_interval_ms)
        self.last_step_ms: Optional[float] = None
        self.armed = False

    def set_speed_level(self, level: int) -> int:
        """Clamp and apply a new level; used from the next scheduling decision on."""
        self.level = clamp_level(level)
        self.interval_ms = interval_for_level(
            self.level, self.cfg.min_interval_ms, self.cfg.max_interval_ms
        )
        logger.debug("speed level %d -> interval %d ms", self.level, self.interval_ms)
        return self.interval_ms

    def start(self, now_ms: Optional[float] = None) -> None:
        """Arm for a freshly reset game. The first signal sets the baseline."""
        self.last_step_ms = now_ms
        self.armed = True

    def on_pause_toggle(self) -> None:
        """Drop the baseline so the next signal after resuming starts a fresh interval."""
        self.last_step_ms = None

    def on_signal(self, now_ms: float) -> bool:
        """Handle one time signal; return True while it should be re-armed."""
        if not self.armed:
            return False
        st = self.engine.state
        if not st.running:
            # game over (or never started): stop re-arming
            self.armed = False
            return False
        if st.paused:
            # resume counts from the first signal after unpausing
            self.last_step_ms = None
            return True
        if self.last_step_ms is None:
            self.last_step_ms = now_ms
            return True

        elapsed = now_ms - self.last_step_ms
        if elapsed >= self.interval_ms:
            self.last_step_ms = now_ms
            outcome = self.engine.step()
            if self.on_step is not None:
                self.on_step(outcome)
            if self.engine.state.is_over:
                self.armed = False
                return False
        return True
