"""
Main entry point for Henry's Fruit Rush.

Loads settings (environment / .env), configures logging and opens the
pygame window.
"""

import argparse
import asyncio
import logging
import random
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from fruitrush.game.difficulty import DifficultyLevel
from fruitrush.settings import Settings


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fruitrush",
        description="Help Henry eat enough fruit before the clock runs out.",
    )
    parser.add_argument("--debug", action="store_true", help="verbose logging and debug overlay")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible layouts")
    parser.add_argument(
        "--difficulty",
        choices=[level.value for level in DifficultyLevel],
        type=str.upper,
        default=None,
        help="skip the menu and start on this difficulty",
    )
    parser.add_argument("--scale", type=float, default=None, help="window scale factor")
    return parser


def make_settings(args: argparse.Namespace) -> Settings:
    """Apply command-line overrides on top of environment settings."""
    settings = Settings()
    overrides = {}
    if args.debug:
        overrides["debug"] = True
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.scale is not None:
        overrides["window_scale"] = args.scale
    return settings.model_copy(update=overrides) if overrides else settings


async def run_window(settings: Settings, difficulty: Optional[str] = None) -> None:
    """Run the desktop window."""
    from fruitrush.game.simulation import GameSimulation
    from fruitrush.simulator.window import GameWindow

    simulation = GameSimulation(settings, rng=random.Random(settings.seed))
    if difficulty:
        simulation.select_difficulty(difficulty)

    window = GameWindow(simulation=simulation, settings=settings)
    await window.run()


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point."""
    load_dotenv()

    args = build_parser().parse_args(argv)
    settings = make_settings(args)
    setup_logging(settings.debug)

    logger = logging.getLogger(__name__)
    logger.info("Fruit Rush starting...")
    if settings.seed is not None:
        logger.info(f"Using seed {settings.seed}")

    try:
        asyncio.run(run_window(settings, args.difficulty))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("Fruit Rush stopped")


if __name__ == "__main__":
    main()
