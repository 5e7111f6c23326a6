"""Component for choosing the times table and question count."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QButtonGroup,
    QComboBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from edutainment.constants.quiz_constants import (
    DEFAULT_QUESTION_COUNT,
    DEFAULT_TABLE_NUMBER,
    MAX_TABLE_NUMBER,
    MIN_TABLE_NUMBER,
    QUESTION_COUNT_CHOICES,
)
from edutainment.constants.ui_constants import (
    COUNT_SECTION_TITLE,
    SETTINGS_HEADING,
    START_BUTTON_TEXT,
    TABLE_OPTION_TEMPLATE,
    TABLE_SECTION_TITLE,
    WINDOW_TITLE,
)
from edutainment.core.models import QuizConfiguration
from edutainment.ui.dialog_helpers import show_warning
from edutainment.styling.styles import Styles


class SettingsPanel(QWidget):
    """UI component for the pre-game settings form."""

    def __init__(
        self,
        on_start_game: callable,
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self.on_start_game = on_start_game
        self._count_buttons: dict[int, QPushButton] = {}

        self._build_ui()
        self.set_configuration(QuizConfiguration(DEFAULT_TABLE_NUMBER, DEFAULT_QUESTION_COUNT))

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel(WINDOW_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.title_label)
        layout.addStretch()

        card = QFrame(self)
        card.setObjectName("card")
        card_layout = QVBoxLayout()
        card.setLayout(card_layout)

        self.heading_label = QLabel(SETTINGS_HEADING, card)
        card_layout.addWidget(self.heading_label)

        card_layout.addWidget(QLabel(TABLE_SECTION_TITLE, card))
        self.table_combo = QComboBox(card)
        for number in range(MIN_TABLE_NUMBER, MAX_TABLE_NUMBER + 1):
            self.table_combo.addItem(TABLE_OPTION_TEMPLATE.format(number=number), number)
        card_layout.addWidget(self.table_combo)

        card_layout.addWidget(QLabel(COUNT_SECTION_TITLE, card))
        count_row = QHBoxLayout()
        count_row.setSpacing(0)
        self.count_group = QButtonGroup(self)
        self.count_group.setExclusive(True)
        for count in QUESTION_COUNT_CHOICES:
            button = QPushButton(str(count), card)
            button.setCheckable(True)
            self.count_group.addButton(button, count)
            self._count_buttons[count] = button
            count_row.addWidget(button)
        card_layout.addLayout(count_row)

        layout.addWidget(card)
        layout.addStretch()

        self.start_button = QPushButton(START_BUTTON_TEXT, self)
        self.start_button.setObjectName("startButton")
        self.start_button.clicked.connect(self._handle_start_click)
        layout.addWidget(self.start_button, alignment=Qt.AlignHCenter)

    def _handle_start_click(self) -> None:
        try:
            config = self.get_configuration()
        except ValueError as exc:
            show_warning(self, "Check settings", str(exc))
            return
        self.on_start_game(config)

    def get_configuration(self) -> QuizConfiguration:
        return QuizConfiguration(
            table_number=self.table_combo.currentData(),
            question_count=self.count_group.checkedId(),
        )

    def set_configuration(self, config: QuizConfiguration) -> None:
        index = self.table_combo.findData(config.table_number)
        if index >= 0:
            self.table_combo.setCurrentIndex(index)
        button = self._count_buttons.get(config.question_count)
        if button is not None:
            button.setChecked(True)

    def apply_font_size(self, font_size: int) -> None:
        self.title_label.setStyleSheet(Styles.get_title_style(font_size))
        self.heading_label.setStyleSheet(Styles.get_heading_style(font_size))
