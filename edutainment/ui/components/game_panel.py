"""Component for the question loop: question, answer field, score and messages."""

from __future__ import annotations

from PySide6.QtCore import QEasingCurve, QPropertyAnimation, Qt, QTimer, QVariantAnimation
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsOpacityEffect,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from edutainment.constants.ui_constants import (
    ANSWER_ANIMATION_MS,
    ANSWER_CLEAR_DELAY_MS,
    ANSWER_PLACEHOLDER,
    CORRECT_SCALE_FACTOR,
    MESSAGE_DISPLAY_MS,
    RESTART_BUTTON_TEXT,
)
from edutainment.core.game_manager import GameManager
from edutainment.core.models import AnswerOutcome
from edutainment.core.view_state import GameViewState, build_view_state
from edutainment.styling.color_palette import Theme
from edutainment.styling.styles import Styles


class GamePanel(QWidget):
    """UI component that asks questions and reports correctness."""

    def __init__(
        self,
        game_manager: GameManager,
        on_restart: callable,
        on_game_finished: callable,
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self.game_manager = game_manager
        self.on_restart = on_restart
        self.on_game_finished = on_game_finished

        self._game_font_size: int = 18
        self._theme: Theme = Theme.LIGHT
        self._show_invalid_prompt: bool = False
        self._view_state: GameViewState | None = None

        self._build_ui()
        self._configure_timers()
        self._configure_animations()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel("", self)
        self.title_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.title_label)
        layout.addStretch()

        self.caption_label = QLabel("", self)
        self.caption_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.caption_label)

        card = QFrame(self)
        card.setObjectName("card")
        card_layout = QVBoxLayout()
        card.setLayout(card_layout)

        self.question_label = QLabel("", card)
        self.question_label.setAlignment(Qt.AlignCenter)
        self.question_effect = QGraphicsOpacityEffect(self.question_label)
        self.question_effect.setOpacity(1.0)
        self.question_label.setGraphicsEffect(self.question_effect)
        card_layout.addWidget(self.question_label)

        self.answer_edit = QLineEdit(card)
        self.answer_edit.setPlaceholderText(ANSWER_PLACEHOLDER)
        self.answer_edit.setAlignment(Qt.AlignCenter)
        self.answer_edit.returnPressed.connect(self._handle_submit)
        card_layout.addWidget(self.answer_edit)

        self.message_label = QLabel("", card)
        self.message_label.setAlignment(Qt.AlignCenter)
        card_layout.addWidget(self.message_label)

        layout.addWidget(card)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.score_label)

        self.remaining_label = QLabel("", self)
        self.remaining_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.remaining_label)
        layout.addStretch()

        self.restart_button = QPushButton(RESTART_BUTTON_TEXT, self)
        self.restart_button.setObjectName("restartButton")
        self.restart_button.clicked.connect(self._handle_restart_click)
        layout.addWidget(self.restart_button)

    def _configure_timers(self) -> None:
        # Restarting a single-shot timer drops the pending timeout, so an older
        # answer never hides the message of a newer one.
        self.message_timer = QTimer(self)
        self.message_timer.setSingleShot(True)
        self.message_timer.setInterval(MESSAGE_DISPLAY_MS)
        self.message_timer.timeout.connect(self._dismiss_message)

        self.clear_answer_timer = QTimer(self)
        self.clear_answer_timer.setSingleShot(True)
        self.clear_answer_timer.setInterval(ANSWER_CLEAR_DELAY_MS)
        self.clear_answer_timer.timeout.connect(self.answer_edit.clear)

    def _configure_animations(self) -> None:
        self.fade_animation = QPropertyAnimation(self.question_effect, b"opacity", self)
        self.fade_animation.setDuration(ANSWER_ANIMATION_MS)
        self.fade_animation.setStartValue(1.0)
        self.fade_animation.setKeyValueAt(0.5, 0.0)
        self.fade_animation.setEndValue(1.0)
        self.fade_animation.setEasingCurve(QEasingCurve.InOutQuad)

        self.scale_animation = QVariantAnimation(self)
        self.scale_animation.setDuration(ANSWER_ANIMATION_MS)
        self.scale_animation.setStartValue(1.0)
        self.scale_animation.setKeyValueAt(0.5, CORRECT_SCALE_FACTOR)
        self.scale_animation.setEndValue(1.0)
        self.scale_animation.setEasingCurve(QEasingCurve.InOutQuad)
        self.scale_animation.valueChanged.connect(self._apply_question_scale)

    # --- Public API ---

    def start_game(self) -> None:
        """Reset transient presentation state and show the first question."""
        self._stop_transients()
        self.answer_edit.clear()
        self.render()
        self.answer_edit.setFocus()

    def stop_game(self) -> None:
        self._stop_transients()
        self.answer_edit.clear()

    def render(self) -> GameViewState:
        state = build_view_state(self.game_manager, self._show_invalid_prompt)
        self._view_state = state
        self.title_label.setText(state.title)
        self.caption_label.setText(state.table_caption)
        self.question_label.setText(state.question_text)
        self.score_label.setText(state.score_text)
        self.remaining_label.setText(state.remaining_text)
        self.message_label.setText(state.message_text)
        self.message_label.setStyleSheet(
            Styles.get_message_style(state.message_kind, self._game_font_size, self._theme)
        )
        self.answer_edit.setEnabled(state.answer_enabled)
        return state

    def get_view_state(self) -> GameViewState | None:
        return self._view_state

    def set_game_font_size(self, font_size: int) -> None:
        self._game_font_size = font_size
        self.title_label.setStyleSheet(Styles.get_title_style(font_size))
        self.caption_label.setStyleSheet(Styles.get_heading_style(font_size))
        self._apply_question_scale(1.0)
        for label in (self.score_label, self.remaining_label):
            label.setStyleSheet(Styles.get_heading_style(font_size))
        self.answer_edit.setStyleSheet(Styles.get_question_style(font_size))
        self.render()

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme
        self.render()

    # --- Handlers ---

    def _handle_submit(self) -> None:
        if not self.game_manager.has_active_game():
            return

        result = self.game_manager.submit_answer(self.answer_edit.text())
        if result.outcome is AnswerOutcome.INVALID:
            self._show_invalid_prompt = True
            self.game_manager.dismiss_outcome()
            self.message_timer.start()
            self.render()
            return

        self._show_invalid_prompt = False
        self.clear_answer_timer.start()
        self.message_timer.start()
        self._play_answer_animation(result.outcome)
        state = self.render()

        if result.is_finished:
            self.on_game_finished(state)

    def _handle_restart_click(self) -> None:
        self.on_restart()

    def _dismiss_message(self) -> None:
        self.game_manager.dismiss_outcome()
        self._show_invalid_prompt = False
        self.render()

    # --- Animation helpers ---

    def _play_answer_animation(self, outcome: AnswerOutcome) -> None:
        self._stop_animations()
        if outcome is AnswerOutcome.CORRECT:
            self.scale_animation.start()
        else:
            self.fade_animation.start()

    def _apply_question_scale(self, factor: float) -> None:
        self.question_label.setStyleSheet(Styles.get_question_style(self._game_font_size, float(factor)))

    def _stop_animations(self) -> None:
        self.fade_animation.stop()
        self.scale_animation.stop()
        self.question_effect.setOpacity(1.0)
        self._apply_question_scale(1.0)

    def _stop_transients(self) -> None:
        self.message_timer.stop()
        self.clear_answer_timer.stop()
        self._stop_animations()
        self._show_invalid_prompt = False
