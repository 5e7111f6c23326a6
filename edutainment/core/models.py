"""Domain models for the times-tables game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from edutainment.constants.quiz_constants import (
    MAX_TABLE_NUMBER,
    MIN_TABLE_NUMBER,
    QUESTION_COUNT_CHOICES,
)


class AnswerOutcome(Enum):
    """Result of processing one answer submission."""

    CORRECT = auto()
    INCORRECT = auto()
    INVALID = auto()


class GamePhase(Enum):
    """High-level phase of the game."""

    CONFIGURING = auto()
    IN_PROGRESS = auto()
    FINISHED = auto()


@dataclass(frozen=True, slots=True)
class QuizConfiguration:
    """Times table and question count chosen before a game starts."""

    table_number: int
    question_count: int

    def __post_init__(self) -> None:
        if not MIN_TABLE_NUMBER <= self.table_number <= MAX_TABLE_NUMBER:
            raise ValueError(
                f"Times table must be between {MIN_TABLE_NUMBER} and {MAX_TABLE_NUMBER}, "
                f"got {self.table_number}."
            )
        if self.question_count not in QUESTION_COUNT_CHOICES:
            choices = ", ".join(str(choice) for choice in QUESTION_COUNT_CHOICES)
            raise ValueError(f"Question count must be one of {choices}, got {self.question_count}.")


@dataclass(frozen=True, slots=True)
class AnswerResult:
    """Snapshot returned to the UI after an answer is submitted."""

    outcome: AnswerOutcome
    score: int
    is_finished: bool


@dataclass(frozen=True, slots=True)
class AnsweredQuestion:
    """One processed answer, kept for the end-of-game summary."""

    table_number: int
    operand: int
    given_answer: int
    expected_answer: int
    outcome: AnswerOutcome
