"""
Grid Snake
Classic single-player snake on a 40x30 wraparound board

Run with: python -m gridsnake
For headless testing: SDL_VIDEODRIVER=dummy python -m gridsnake --headless
"""

import argparse
import logging
import os
from typing import List, Optional

from .config import TICK_INTERVAL_MS

logger = logging.getLogger("gridsnake")


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Play Snake.")
    parser.add_argument("--headless", action="store_true",
                        default=os.environ.get('SDL_VIDEODRIVER') == 'dummy',
                        help="Run an autopilot game without a window")
    parser.add_argument("--ticks", type=positive_int, default=500,
                        help="Number of ticks to simulate in headless mode")
    parser.add_argument("--tick-ms", type=positive_int, default=TICK_INTERVAL_MS,
                        help="Milliseconds between simulation ticks")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for food placement")
    parser.add_argument("--name", default="", help="Pre-filled player name")
    parser.add_argument("--mute", action="store_true", help="Disable the eat sound")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point"""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Set SDL driver for headless mode before pygame init
    if args.headless:
        os.environ['SDL_VIDEODRIVER'] = 'dummy'
        os.environ['SDL_AUDIODRIVER'] = 'dummy'

    import pygame

    from .app import App, run_headless

    pygame.init()
    if args.headless:
        logger.info("Running in headless mode for %d ticks", args.ticks)
        session = run_headless(args.ticks, name=args.name, seed=args.seed)
        logger.info("Headless run complete. %s, length %d",
                    session.scoreline, len(session.state))
        pygame.quit()
    else:
        App(player_name=args.name, tick_ms=args.tick_ms, seed=args.seed, mute=args.mute).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
