"""Centralized styles and font definitions for the application."""

from edutainment.core.view_state import MessageKind

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT, ui_font_size: int = 12) -> str:
        return f"""
            QMainWindow, QStackedWidget, QStackedWidget > QWidget {{
                background-color: {ColorPalette.SCREEN_BACKGROUND.get(theme)};
            }}
            QLabel {{
                background: transparent;
                color: {ColorPalette.SCREEN_TEXT.get(theme)};
            }}
            QFrame#card {{
                background-color: {ColorPalette.CARD_BACKGROUND.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 10px;
            }}
            QFrame#card QLabel {{
                color: {ColorPalette.CARD_TEXT.get(theme)};
            }}
            QPushButton {{
                background-color: {ColorPalette.CARD_BACKGROUND.get(theme)};
                color: {ColorPalette.CARD_TEXT.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                padding: 6px 12px;
                font-size: {ui_font_size}pt;
            }}
            QPushButton:checked, QPushButton#startButton {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
                color: {ColorPalette.ACCENT_TEXT.get(theme)};
                border: 1px solid {ColorPalette.ACCENT_PRIMARY.get(theme)};
            }}
            QPushButton#restartButton {{
                background-color: {ColorPalette.RESTART_BUTTON_BG.get(theme)};
                color: #FFFFFF;
                border: none;
                font-weight: bold;
            }}
            QLineEdit, QComboBox {{
                background-color: {ColorPalette.CARD_BACKGROUND.get(theme)};
                color: {ColorPalette.CARD_TEXT.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
                font-size: {ui_font_size}pt;
            }}
        """

    @staticmethod
    def get_title_style(font_size: int) -> str:
        return f"font-size: {font_size + 10}pt; font-weight: bold;"

    @staticmethod
    def get_heading_style(font_size: int) -> str:
        return f"font-size: {font_size + 4}pt;"

    @staticmethod
    def get_question_style(font_size: int, scale: float = 1.0) -> str:
        return f"font-size: {round(font_size * 2 * scale)}pt; font-weight: bold;"

    @staticmethod
    def get_message_style(kind: MessageKind, font_size: int, theme: Theme = Theme.LIGHT) -> str:
        colors = {
            MessageKind.SUCCESS: ColorPalette.SUCCESS,
            MessageKind.ERROR: ColorPalette.ERROR,
            MessageKind.WARNING: ColorPalette.WARNING,
        }
        palette_entry = colors.get(kind)
        color = palette_entry.get(theme) if palette_entry else "transparent"
        return f"font-size: {font_size + 2}pt; color: {color};"
