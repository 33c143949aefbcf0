from dataclasses import dataclass, field
from typing import Dict, List, Tuple

# ----- Grid & window -----
GRID_SIZE = 24
CELL_SIZE = 24
HUD_HEIGHT = 32

# ----- Game rules -----
INITIAL_SNAKE_LENGTH = 3
START_HEAD = (6, 4)
FOOD_REWARD = 10

# ----- Speed (level 1..10 -> interval ms, inverted) -----
MIN_SPEED_LEVEL, MAX_SPEED_LEVEL = 1, 10
MIN_INTERVAL_MS = 60
MAX_INTERVAL_MS = 240
DEFAULT_SPEED_LEVEL = 6

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = {"up": UP, "down": DOWN, "left": LEFT, "right": RIGHT}

# ----- Themes -----
Color = Tuple[int, int, int]

THEMES: Dict[str, Dict[str, Color]] = {
    "teal":   {"bg": (16, 32, 36),   "grid": (28, 52, 58),   "snake": (38, 166, 154),
               "primary": (128, 222, 210), "food": (239, 83, 80),  "text": (224, 242, 241)},
    "dark":   {"bg": (20, 20, 24),   "grid": (36, 36, 42),   "snake": (80, 200, 80),
               "primary": (150, 240, 150), "food": (200, 70, 70),  "text": (220, 220, 230)},
    "light":  {"bg": (245, 245, 240), "grid": (222, 222, 215), "snake": (60, 140, 90),
               "primary": (30, 90, 60),    "food": (210, 60, 60),  "text": (40, 40, 40)},
    "sunset": {"bg": (44, 24, 40),   "grid": (66, 38, 58),   "snake": (255, 152, 67),
               "primary": (255, 206, 120), "food": (240, 70, 110), "text": (255, 230, 210)},
    "forest": {"bg": (22, 34, 22),   "grid": (36, 52, 34),   "snake": (104, 159, 56),
               "primary": (174, 213, 129), "food": (229, 115, 65), "text": (226, 236, 214)},
    "ocean":  {"bg": (10, 26, 48),   "grid": (22, 44, 74),   "snake": (41, 121, 255),
               "primary": (130, 177, 255), "food": (255, 202, 40), "text": (220, 232, 250)},
    "grape":  {"bg": (34, 20, 46),   "grid": (52, 34, 68),   "snake": (156, 39, 176),
               "primary": (206, 147, 216), "food": (124, 179, 66), "text": (240, 226, 246)},
    "black":  {"bg": (0, 0, 0),      "grid": (24, 24, 24),   "snake": (200, 200, 200),
               "primary": (255, 255, 255), "food": (255, 60, 60),  "text": (235, 235, 235)},
    "pink":   {"bg": (52, 22, 38),   "grid": (74, 36, 56),   "snake": (240, 98, 146),
               "primary": (248, 187, 208), "food": (255, 235, 59), "text": (252, 228, 236)},
}
DEFAULT_THEME = "teal"

# ----- Tunables -----
@dataclass
class Config:
    seed: int = 0
    grid_size: int = GRID_SIZE
    initial_length: int = INITIAL_SNAKE_LENGTH
    start_head: Tuple[int, int] = START_HEAD
    food_reward: int = FOOD_REWARD
    min_interval_ms: int = MIN_INTERVAL_MS
    max_interval_ms: int = MAX_INTERVAL_MS
    speed_level: int = DEFAULT_SPEED_LEVEL
    cell_size: int = CELL_SIZE
    max_spawn_attempts: int = 1000   # random food samples before scanning free cells
    highscore_file: str = field(default="snake_highscore.txt")
    fps: int = 60

    def validate(self) -> List[str]:
        errors = []
        if self.initial_length < 1:
            errors.append(f"initial_length must be >= 1, got {self.initial_length}")
        if self.grid_size < self.initial_length + 1:
            errors.append(
                f"grid_size must be > initial_length, got {self.grid_size} <= {self.initial_length}"
            )
        hx, hy = self.start_head
        if not (0 <= hy < self.grid_size):
            errors.append(f"start_head row {hy} is outside the grid")
        # body trails to the left of the head
        if not (self.initial_length - 1 <= hx < self.grid_size):
            errors.append(f"start_head column {hx} leaves no room for the body")
        if self.food_reward < 0:
            errors.append(f"food_reward must be >= 0, got {self.food_reward}")
        if self.min_interval_ms <= 0:
            errors.append(f"min_interval_ms must be > 0, got {self.min_interval_ms}")
        if self.max_interval_ms < self.min_interval_ms:
            errors.append(
                f"max_interval_ms ({self.max_interval_ms}) must be >= "
                f"min_interval_ms ({self.min_interval_ms})"
            )
        if not (MIN_SPEED_LEVEL <= self.speed_level <= MAX_SPEED_LEVEL):
            errors.append(f"speed_level must be in [1, 10], got {self.speed_level}")
        if self.cell_size < 3:
            errors.append(f"cell_size must be >= 3, got {self.cell_size}")
        if self.max_spawn_attempts < 0:
            errors.append(f"max_spawn_attempts must be >= 0, got {self.max_spawn_attempts}")
        return errors

CFG = Config()
