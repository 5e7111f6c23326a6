"""Qt UI components for the Edutainment game."""

from .dialog_helpers import (
    show_error,
    show_game_over,
    show_info,
    show_warning,
)
from .game_main_window import GameMainWindow

__all__ = [
    "GameMainWindow",
    "show_error",
    "show_game_over",
    "show_info",
    "show_warning",
]
