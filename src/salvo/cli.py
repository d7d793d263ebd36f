"""Command-line entry point: ``salvo`` or ``python -m salvo.cli``."""

from __future__ import annotations

import argparse
import logging
import random
from typing import Sequence

from . import config as _cfg
from .commands import MenuChoice
from .io_utils import ConsoleIO
from .session import GameSession

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Two-player console Battleship")
    parser.add_argument(
        "--mode",
        choices=["manual", "random"],
        help="Start a game straight away instead of showing the menu first",
    )
    parser.add_argument("--seed", type=int, default=_cfg.SEED, help="Seed for random ship placement")
    parser.add_argument("--p1", default=_cfg.P1_NAME, help="Name of player 1")
    parser.add_argument("--p2", default=_cfg.P2_NAME, help="Name of player 2")
    parser.add_argument(
        "--debug",
        action="store_true",
        default=_cfg.DEBUG,
        help="Enable debug logging.",
    )
    parser.add_argument("--log-file", default=_cfg.LOG_FILE, help="Write logs here instead of stderr")
    return parser


def configure_logging(debug: bool, log_file: str | None) -> None:
    # Game output owns stdout; logs go to stderr (or a file) and stay quiet unless debugging
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=_cfg.LOG_FORMAT,
        filename=log_file,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Interactive console game."""
    args = build_parser().parse_args(argv)
    configure_logging(args.debug, args.log_file)

    start_with = None
    if args.mode == "manual":
        start_with = MenuChoice.MANUAL
    elif args.mode == "random":
        start_with = MenuChoice.RANDOM

    session = GameSession(
        ConsoleIO(),
        names=(args.p1, args.p2),
        rng=random.Random(args.seed),
        start_with=start_with,
    )
    logger.debug("Starting session – names=%s seed=%s mode=%s", session.names, args.seed, args.mode)
    try:
        return session.run()
    except KeyboardInterrupt:
        logger.info("Exiting on interrupt")
        return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
