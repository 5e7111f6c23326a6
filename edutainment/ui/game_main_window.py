"""Qt main window switching between the settings screen and the game screen."""

from __future__ import annotations

import logging

from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from edutainment.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_MARKDOWN,
)
from edutainment.constants.ui_constants import WINDOW_TITLE
from edutainment.core.game_manager import GameManager
from edutainment.core.markdown_renderer import renderer
from edutainment.core.models import GamePhase, QuizConfiguration
from edutainment.core.view_state import GameViewState
from edutainment.styling.color_palette import Theme
from edutainment.styling.styles import Styles
from edutainment.ui.components.game_panel import GamePanel
from edutainment.ui.components.settings_panel import SettingsPanel
from edutainment.ui.dialog_helpers import show_error, show_game_over, show_info
from edutainment.ui.preferences_dialog import PreferencesDialog

logger = logging.getLogger(__name__)


class GameMainWindow(QMainWindow):
    """Main Qt window orchestrating the settings and game screens."""

    def __init__(self, game_manager: GameManager) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(420, 640)

        self.game_manager = game_manager

        self._ui_font_size: int = 12
        self._game_font_size: int = 18
        self._theme: Theme = Theme.LIGHT

        self._build_ui()
        self._apply_styles()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_menu_buttons(root_layout)

        self.screen_stack = QStackedWidget(self)

        self.settings_panel = SettingsPanel(
            on_start_game=self._handle_start_game,
            parent=self
        )
        self.game_panel = GamePanel(
            self.game_manager,
            on_restart=self._handle_restart,
            on_game_finished=self._handle_game_finished,
            parent=self
        )

        self.screen_stack.addWidget(self.settings_panel)
        self.screen_stack.addWidget(self.game_panel)

        root_layout.addWidget(self.screen_stack)

        self._sync_screen()

    def _build_menu_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.preferences_button = QPushButton("Preferences", self)
        self.preferences_button.clicked.connect(self._handle_preferences)
        button_row.addWidget(self.preferences_button)

        layout.addLayout(button_row)

    def _sync_screen(self) -> None:
        phase = self.game_manager.get_phase()
        if phase == GamePhase.CONFIGURING:
            self.screen_stack.setCurrentWidget(self.settings_panel)
        else:
            self.screen_stack.setCurrentWidget(self.game_panel)

    def _handle_start_game(self, config: QuizConfiguration) -> None:
        try:
            self.game_manager.start_game(config)
        except ValueError as exc:
            show_error(self, "Cannot start game", str(exc))
            return
        self._sync_screen()
        self.game_panel.start_game()

    def _handle_restart(self) -> None:
        self.game_manager.restart()
        self.game_panel.stop_game()
        config = self.game_manager.get_configuration()
        if config is not None:
            self.settings_panel.set_configuration(config)
        self._sync_screen()

    def _handle_game_finished(self, state: GameViewState) -> None:
        show_game_over(
            self,
            state.summary_title,
            state.summary_text,
            details=state.summary_details,
            font_point_size=self._ui_font_size,
        )
        self._handle_restart()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details, font_point_size=self._ui_font_size)

    def _handle_help(self) -> None:
        show_info(
            self,
            f"{APP_NAME} Help",
            renderer.render_fragment(HELP_MARKDOWN),
            rich_text=True,
            font_point_size=self._ui_font_size,
        )

    def _handle_preferences(self) -> None:
        dialog = PreferencesDialog(
            self,
            self._ui_font_size,
            self._game_font_size,
            self._theme,
        )
        if dialog.exec():
            self._ui_font_size = dialog.get_ui_font_size()
            self._game_font_size = dialog.get_game_font_size()
            self._theme = dialog.get_theme()
            logger.debug(
                "Preferences updated: ui=%dpt game=%dpt theme=%s",
                self._ui_font_size,
                self._game_font_size,
                self._theme.name.lower(),
            )
            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme, self._ui_font_size))
        self.settings_panel.apply_font_size(self._game_font_size)
        self.game_panel.set_theme(self._theme)
        self.game_panel.set_game_font_size(self._game_font_size)
