"""Application entry point for QuizPlayer."""

from __future__ import annotations

import argparse
import sys

from quiz_player.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from quiz_player.constants.quiz_constants import DEFAULT_QUIZ_LOCATION
from quiz_player.core.quiz_session import QuizSession
from quiz_player.core.rules import DEFAULT_RULES, QuizRules
from quiz_player.utils.logging_config import configure_logging


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play a multiple-choice quiz.")
    parser.add_argument(
        "quiz",
        nargs="?",
        default=DEFAULT_QUIZ_LOCATION,
        help="Quiz JSON/text file or http(s) URL (default: %(default)s)",
    )
    parser.add_argument("--web", action="store_true", help="Serve the player in a browser instead of Qt.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument(
        "--single-choice",
        action="store_true",
        help="Require exactly one correct answer per question and allow one selection.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Initialize logging, build the session, and launch the chosen front end."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    logger = configure_logging()
    rules = QuizRules.single_choice() if args.single_choice else DEFAULT_RULES
    session = QuizSession(rules)
    logger.info(
        "Starting QuizPlayer (%s, %s)", rules.correctness.name, rules.selection.name
    )

    if args.web:
        from quiz_player.server.api_server import run_api_server

        logger.info("Web player available at http://%s:%d/", args.host, args.port)
        run_api_server(session, default_location=args.quiz, host=args.host, port=args.port)
        return

    from PySide6.QtWidgets import QApplication

    from quiz_player.ui.player_main_window import PlayerMainWindow

    app = QApplication(sys.argv[:1])
    window = PlayerMainWindow(session=session, default_location=args.quiz)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
