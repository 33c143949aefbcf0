# highscore.py
"""Best-effort persistence of the single best score."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, Union

logger = logging.getLogger(__name__)


class HighScoreBackend(Protocol):
    def load(self) -> int: ...
    def save(self, value: int) -> None: ...


class HighScoreStore:
    """
    Stores the best score as plain text in one file.

    Both operations are best-effort: a missing, unreadable or corrupt file
    loads as 0 and a failed write is dropped.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> int:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return 0
        except OSError as exc:
            logger.warning("could not read high score from %s: %s", self.path, exc)
            return 0
        try:
            value = int(text.strip() or "0")
        except ValueError:
            logger.warning("ignoring corrupt high score file %s", self.path)
            return 0
        return max(value, 0)

    def save(self, value: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(str(int(value)), encoding="utf-8")
        except OSError as exc:
            logger.warning("could not save high score to %s: %s", self.path, exc)


class MemoryHighScoreStore:
    """In-process store, handy for tests and headless runs."""

    def __init__(self, value: int = 0):
        self.value = value
        self.saves = 0

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = int(value)
        self.saves += 1
