"""Color palette for the game supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    # Screen background behind both panels
    SCREEN_BACKGROUND = ThemeColors(
        light="#1E6FD9",      # Blue
        dark="#0E2F5C"        # Navy
    )

    SCREEN_TEXT = ThemeColors(
        light="#FFFFFF",
        dark="#F5F5F5"
    )

    # Card holding the form / question
    CARD_BACKGROUND = ThemeColors(
        light="#FFFFFF",
        dark="#1E1E1E"
    )

    CARD_TEXT = ThemeColors(
        light="#000000",
        dark="#F5F5F5"
    )

    BORDER_PRIMARY = ThemeColors(
        light="#D1D1D1",
        dark="#555555"
    )

    # Segmented control / start button
    ACCENT_PRIMARY = ThemeColors(
        light="#0078D4",
        dark="#4A9EFF"
    )

    ACCENT_TEXT = ThemeColors(
        light="#FFFFFF",
        dark="#000000"
    )

    RESTART_BUTTON_BG = ThemeColors(
        light="#FF9500",      # Orange
        dark="#E08400"
    )

    # Transient message colors
    SUCCESS = ThemeColors(
        light="#107C10",
        dark="#6FCF6F"
    )

    ERROR = ThemeColors(
        light="#D13438",
        dark="#FF6B6B"
    )

    WARNING = ThemeColors(
        light="#B07800",
        dark="#FFC83D"
    )
