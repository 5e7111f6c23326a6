"""Service holding the state of one times-tables play-through."""

from __future__ import annotations

import logging
import random

from edutainment.constants.quiz_constants import MAX_OPERAND, MIN_OPERAND
from edutainment.core.answer_parser import InvalidAnswerError, parse_answer
from edutainment.core.models import (
    AnsweredQuestion,
    AnswerOutcome,
    AnswerResult,
    QuizConfiguration,
)

logger = logging.getLogger(__name__)


class QuizFinishedError(RuntimeError):
    """Raised when an answer is submitted after the last question."""


class QuizSession:
    """Manages the state of an active game: operand, score and remaining count."""

    def __init__(self, config: QuizConfiguration, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._table_number: int = config.table_number
        self._total_questions: int = config.question_count
        self._remaining_questions: int = config.question_count
        self._score: int = 0
        self._last_outcome: AnswerOutcome | None = None
        self._finished: bool = False
        self._history: list[AnsweredQuestion] = []
        self._current_operand: int = self._rng.randint(MIN_OPERAND, MAX_OPERAND)

    @classmethod
    def start(cls, config: QuizConfiguration, rng: random.Random | None = None) -> "QuizSession":
        return cls(config, rng)

    def get_table_number(self) -> int:
        return self._table_number

    def get_total_questions(self) -> int:
        return self._total_questions

    def get_remaining_questions(self) -> int:
        return self._remaining_questions

    def get_current_operand(self) -> int:
        return self._current_operand

    def get_expected_answer(self) -> int:
        return self._table_number * self._current_operand

    def get_score(self) -> int:
        return self._score

    def get_last_outcome(self) -> AnswerOutcome | None:
        return self._last_outcome

    def get_history(self) -> tuple[AnsweredQuestion, ...]:
        return tuple(self._history)

    def is_finished(self) -> bool:
        return self._finished

    def submit_answer(self, raw_answer: str) -> AnswerResult:
        """Check an answer and advance to the next question.

        Text that is not a whole number leaves the session untouched and
        yields ``AnswerOutcome.INVALID``.
        """
        if self._finished:
            raise QuizFinishedError("All questions have already been answered.")

        try:
            given = parse_answer(raw_answer)
        except InvalidAnswerError:
            logger.debug("Ignoring unparseable answer %r", raw_answer)
            return AnswerResult(AnswerOutcome.INVALID, self._score, self._finished)

        expected = self.get_expected_answer()
        outcome = AnswerOutcome.CORRECT if given == expected else AnswerOutcome.INCORRECT
        self._history.append(
            AnsweredQuestion(
                table_number=self._table_number,
                operand=self._current_operand,
                given_answer=given,
                expected_answer=expected,
                outcome=outcome,
            )
        )

        self._last_outcome = outcome
        self._remaining_questions = max(0, self._remaining_questions - 1)
        if outcome is AnswerOutcome.CORRECT:
            self._score += 1

        if self._remaining_questions > 0:
            self._current_operand = self._draw_next_operand()
        else:
            self._finished = True

        return AnswerResult(outcome, self._score, self._finished)

    def dismiss_outcome(self) -> None:
        """Clear the transient outcome once its message has been shown."""
        self._last_outcome = None

    def _draw_next_operand(self) -> int:
        # Uniform over the operand range minus the previous value.
        candidate = self._rng.randint(MIN_OPERAND, MAX_OPERAND - 1)
        if candidate >= self._current_operand:
            candidate += 1
        return candidate
