"""Application entry point for the Edutainment times-tables game."""

from __future__ import annotations

import argparse
import sys

from PySide6.QtWidgets import QApplication

from edutainment.core.game_manager import GameManager
from edutainment.ui.game_main_window import GameMainWindow
from edutainment.utils.logging_config import configure_logging


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Practise multiplication tables.")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the question generator, for a reproducible sequence.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging threshold (DEBUG, INFO, WARNING, ...).",
    )
    # Qt consumes its own options (e.g. -platform) from sys.argv.
    args, _unknown = parser.parse_known_args(argv)
    return args


def main() -> None:
    """Initialize logging and launch the Qt UI."""
    args = _parse_args(sys.argv[1:])
    logger = configure_logging(args.log_level)
    logger.info("Starting Edutainment")

    game_manager = GameManager(seed=args.seed)
    if args.seed is not None:
        logger.info("Using question seed %d", args.seed)

    app = QApplication(sys.argv)
    window = GameMainWindow(game_manager=game_manager)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
