"""Business logic for moving between the settings screen and a running game."""

from __future__ import annotations

import logging
import random

from edutainment.core.models import AnswerOutcome, AnswerResult, GamePhase, QuizConfiguration
from edutainment.core.services.quiz_session import QuizSession

logger = logging.getLogger(__name__)


class GameManager:
    """Facade owning the current QuizSession and the game phase."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        self._phase = GamePhase.CONFIGURING
        self._session: QuizSession | None = None
        self._configuration: QuizConfiguration | None = None

    # --- State ---

    def get_phase(self) -> GamePhase:
        return self._phase

    def get_session(self) -> QuizSession | None:
        return self._session

    def get_configuration(self) -> QuizConfiguration | None:
        """Return the configuration of the current or most recent game."""
        return self._configuration

    def has_active_game(self) -> bool:
        return self._phase == GamePhase.IN_PROGRESS

    # --- Transitions ---

    def start_game(self, config: QuizConfiguration) -> QuizSession:
        if self._session is not None:
            logger.info("Replacing current game with a new one")
        self._configuration = config
        self._session = QuizSession.start(config, self._rng)
        self._phase = GamePhase.IN_PROGRESS
        logger.info(
            "Started game: %d times tables, %d questions",
            config.table_number,
            config.question_count,
        )
        return self._session

    def submit_answer(self, raw_answer: str) -> AnswerResult:
        if self._session is None:
            raise RuntimeError("No game is in progress.")

        result = self._session.submit_answer(raw_answer)
        if result.outcome is AnswerOutcome.INVALID:
            return result

        logger.info(
            "Answer %s; score %d, %d question(s) remaining",
            result.outcome.name.lower(),
            result.score,
            self._session.get_remaining_questions(),
        )
        if result.is_finished:
            self._phase = GamePhase.FINISHED
            logger.info(
                "Game finished with score %d out of %d",
                result.score,
                self._session.get_total_questions(),
            )
        return result

    def dismiss_outcome(self) -> None:
        if self._session is not None:
            self._session.dismiss_outcome()

    def restart(self) -> None:
        if self._session is not None:
            logger.info("Restarting from %s", self._phase.name.lower())
        self._session = None
        self._phase = GamePhase.CONFIGURING
