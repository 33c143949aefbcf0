# main.py
import argparse
import logging

import pygame  # type: ignore

from .config import Config, THEMES, DEFAULT_THEME, DEFAULT_SPEED_LEVEL, HUD_HEIGHT
from .controls import DIRECTION_KEYS, PAUSE_KEYS, START_KEYS, THEME_KEYS, QUIT_KEYS, SPEED_KEYS
from .highscore import HighScoreStore
from .render import PygameRenderer
from .scheduler import clamp_level
from .session import GameSession

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grid snake")
    parser.add_argument("--speed", type=int, default=DEFAULT_SPEED_LEVEL,
                        help="speed level 1 (slow) .. 10 (fast)")
    parser.add_argument("--theme", type=str, default=DEFAULT_THEME, choices=sorted(THEMES))
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument("--highscore-file", type=str, default=Config.highscore_file)
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def handle_event(session: GameSession, event: pygame.event.Event) -> bool:
    """Route one pygame event to the session. Return False to quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type != pygame.KEYDOWN:
        return True
    now = pygame.time.get_ticks()
    if event.key in QUIT_KEYS:
        return False
    if event.key in DIRECTION_KEYS:
        session.router.on_direction_intent(DIRECTION_KEYS[event.key])
    elif event.key in PAUSE_KEYS:
        session.toggle_pause()
    elif event.key in START_KEYS:
        session.start(now)
    elif event.key in SPEED_KEYS:
        session.set_speed_level(SPEED_KEYS[event.key])
    elif event.key in THEME_KEYS:
        session.cycle_theme()
    return True


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = Config(speed_level=clamp_level(args.speed), highscore_file=args.highscore_file)
    if args.seed is not None:
        cfg.seed = args.seed

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    board_px = cfg.grid_size * cfg.cell_size
    screen = pygame.display.set_mode((board_px, board_px + HUD_HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    renderer = PygameRenderer(screen, font, cfg.grid_size, cell_size=cfg.cell_size, theme=args.theme)
    session = GameSession(cfg, renderer=renderer, store=HighScoreStore(cfg.highscore_file))
    session.set_theme(args.theme)
    logger.info("loaded high score %d from %s", session.high_score, cfg.highscore_file)

    running = True
    while running:
        # 1) input
        for event in pygame.event.get():
            if not handle_event(session, event):
                running = False
                break

        # 2) time signal; movement is gated inside the scheduler
        session.tick(pygame.time.get_ticks())

        # 3) present whatever the session last drew
        pygame.display.flip()
        clock.tick(cfg.fps)

    pygame.quit()


if __name__ == "__main__":
    main()
