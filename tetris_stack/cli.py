from __future__ import annotations

import argparse
import sys

from loguru import logger

from .config import config
from .game import TetrisStack
from .menu import MenuLoop

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tetris Stack: circular queue of pieces")
    parser.add_argument(
        "--capacity",
        type=int,
        default=config.QUEUE_CAPACITY,
        help="Number of pieces the queue holds",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.SEED,
        help="Optional RNG seed to make piece generation reproducible",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=config.LOG_LEVEL,
        help="Loguru level for the stderr sink",
    )
    return parser


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(args=argv)
    if args.capacity < 1:
        parser.error("--capacity must be at least 1")
    if args.log_level not in LOG_LEVELS:
        parser.error(f"unknown log level {args.log_level!r}")
    configure_logging(args.log_level)
    logger.info(f"Starting Tetris Stack (capacity={args.capacity}, seed={args.seed})")
    game = TetrisStack(capacity=args.capacity, seed=args.seed)
    MenuLoop(game).run()
    return 0
