"""Helper functions for common dialog patterns in the game UI."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QMessageBox, QWidget

from edutainment.constants.ui_constants import PLAY_AGAIN_BUTTON_TEXT


def _apply_optional_font(widget: QWidget, font_point_size: int | None) -> None:
    """Apply font size to a widget when requested."""
    if font_point_size is None or font_point_size <= 0:
        return

    font: QFont = widget.font()
    font.setPointSize(font_point_size)
    widget.setFont(font)


def show_error(parent: QWidget, title: str, message: str) -> None:
    """Show error dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Error message
    """
    QMessageBox.critical(parent, title, message)


def show_info(
    parent: QWidget,
    title: str,
    message: str,
    *,
    rich_text: bool = False,
    font_point_size: int | None = None,
) -> None:
    """Show information dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Information message, plain text or HTML when ``rich_text`` is set
    """
    msg_box = QMessageBox(parent)
    msg_box.setIcon(QMessageBox.Information)
    msg_box.setWindowTitle(title)
    msg_box.setTextFormat(Qt.RichText if rich_text else Qt.PlainText)
    msg_box.setText(message)
    msg_box.setStandardButtons(QMessageBox.Ok)
    _apply_optional_font(msg_box, font_point_size)
    msg_box.exec()


def show_game_over(
    parent: QWidget,
    title: str,
    message: str,
    *,
    details: str = "",
    font_point_size: int | None = None,
) -> None:
    """Show the end-of-game summary with a single "Play again?" button.

    ``details`` goes behind the "Show Details..." button when non-empty.
    Returns once the player dismisses the alert.
    """
    msg_box = QMessageBox(parent)
    msg_box.setIcon(QMessageBox.Information)
    msg_box.setWindowTitle(title)
    msg_box.setText(title)
    msg_box.setInformativeText(message)
    if details:
        msg_box.setDetailedText(details)
    msg_box.addButton(PLAY_AGAIN_BUTTON_TEXT, QMessageBox.AcceptRole)
    _apply_optional_font(msg_box, font_point_size)
    msg_box.exec()


def show_warning(parent: QWidget, title: str, message: str) -> None:
    """Show warning dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Warning message
    """
    QMessageBox.warning(parent, title, message)
