"""Qt UI components for the quiz player."""

from .dialog_helpers import (
    confirm_restart,
    show_error,
    show_info,
)
from .player_main_window import PlayerMainWindow
from .question_renderer import render_question

__all__ = [
    "PlayerMainWindow",
    "confirm_restart",
    "show_error",
    "show_info",
    "render_question",
]
