"""Pure mapping from game state to the text and flags shown on screen."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from edutainment.constants.ui_constants import (
    CORRECT_MESSAGE,
    INCORRECT_MESSAGE,
    INVALID_MESSAGE,
    MISSED_HEADING,
    MISSED_TEMPLATE,
    QUESTION_TEMPLATE,
    REMAINING_TEMPLATE,
    SCORE_TEMPLATE,
    SUMMARY_TEMPLATE,
    SUMMARY_TITLE,
    TABLE_OPTION_TEMPLATE,
    WINDOW_TITLE,
)
from edutainment.core.game_manager import GameManager
from edutainment.core.models import AnswerOutcome, GamePhase
from edutainment.core.services.quiz_session import QuizSession


class MessageKind(Enum):
    """Colour family of the transient message."""

    NONE = auto()
    SUCCESS = auto()
    ERROR = auto()
    WARNING = auto()


@dataclass(frozen=True, slots=True)
class GameViewState:
    """Everything the game panel displays, as plain values."""

    phase: GamePhase
    title: str
    table_caption: str = ""
    question_text: str = ""
    score_text: str = ""
    remaining_text: str = ""
    message_text: str = ""
    message_kind: MessageKind = MessageKind.NONE
    answer_enabled: bool = False
    summary_title: str = ""
    summary_text: str = ""
    summary_details: str = ""


def build_view_state(manager: GameManager, show_invalid_prompt: bool = False) -> GameViewState:
    """Build the view state for the manager's current game.

    ``show_invalid_prompt`` is a presentation flag set by the panel while the
    retry prompt for unparseable input is visible; it never comes from the
    session itself because invalid input does not touch game state.
    """
    session = manager.get_session()
    if session is None:
        return GameViewState(phase=manager.get_phase(), title=WINDOW_TITLE)

    outcome = session.get_last_outcome()
    if show_invalid_prompt:
        message_text, message_kind = INVALID_MESSAGE, MessageKind.WARNING
    elif outcome is AnswerOutcome.CORRECT:
        message_text, message_kind = CORRECT_MESSAGE, MessageKind.SUCCESS
    elif outcome is AnswerOutcome.INCORRECT:
        message_text, message_kind = INCORRECT_MESSAGE, MessageKind.ERROR
    else:
        message_text, message_kind = "", MessageKind.NONE

    finished = session.is_finished()
    return GameViewState(
        phase=manager.get_phase(),
        title=WINDOW_TITLE,
        table_caption=TABLE_OPTION_TEMPLATE.format(number=session.get_table_number()),
        question_text=QUESTION_TEMPLATE.format(
            table=session.get_table_number(),
            operand=session.get_current_operand(),
        ),
        score_text=SCORE_TEMPLATE.format(score=session.get_score()),
        remaining_text=REMAINING_TEMPLATE.format(remaining=session.get_remaining_questions()),
        message_text=message_text,
        message_kind=message_kind,
        answer_enabled=not finished,
        summary_title=SUMMARY_TITLE if finished else "",
        summary_text=(
            SUMMARY_TEMPLATE.format(score=session.get_score(), total=session.get_total_questions())
            if finished
            else ""
        ),
        summary_details=_missed_questions_text(session) if finished else "",
    )


def _missed_questions_text(session: QuizSession) -> str:
    missed = [
        MISSED_TEMPLATE.format(
            table=answered.table_number,
            operand=answered.operand,
            expected=answered.expected_answer,
            given=answered.given_answer,
        )
        for answered in session.get_history()
        if answered.outcome is AnswerOutcome.INCORRECT
    ]
    if not missed:
        return ""
    return "\n".join([MISSED_HEADING, *missed])
