"""
Unit tests for the game view state builder.
"""
import unittest

from edutainment.core.game_manager import GameManager
from edutainment.core.models import GamePhase, QuizConfiguration
from edutainment.core.view_state import MessageKind, build_view_state


class TestBuildViewState(unittest.TestCase):
    """Test cases for build_view_state."""

    def setUp(self):
        self.manager = GameManager(seed=3)

    def _start(self, table=4, count=5):
        return self.manager.start_game(QuizConfiguration(table, count))

    def test_configuring_state_is_empty(self):
        state = build_view_state(self.manager)
        self.assertEqual(state.phase, GamePhase.CONFIGURING)
        self.assertEqual(state.title, "Edutainment Game")
        self.assertEqual(state.question_text, "")
        self.assertFalse(state.answer_enabled)

    def test_in_progress_texts(self):
        session = self._start()
        state = build_view_state(self.manager)

        self.assertEqual(state.phase, GamePhase.IN_PROGRESS)
        self.assertEqual(state.table_caption, "4 times tables")
        self.assertEqual(state.question_text, f"4 × {session.get_current_operand()}")
        self.assertEqual(state.score_text, "Score: 0")
        self.assertEqual(state.remaining_text, "Remaining Questions: 5")
        self.assertEqual(state.message_text, "")
        self.assertEqual(state.message_kind, MessageKind.NONE)
        self.assertTrue(state.answer_enabled)
        self.assertEqual(state.summary_text, "")

    def test_correct_and_incorrect_messages(self):
        session = self._start()
        self.manager.submit_answer(str(session.get_expected_answer()))
        state = build_view_state(self.manager)
        self.assertEqual(state.message_text, "Correct!")
        self.assertEqual(state.message_kind, MessageKind.SUCCESS)
        self.assertEqual(state.score_text, "Score: 1")
        self.assertEqual(state.remaining_text, "Remaining Questions: 4")

        self.manager.submit_answer("-1")
        state = build_view_state(self.manager)
        self.assertEqual(state.message_text, "Incorrect!")
        self.assertEqual(state.message_kind, MessageKind.ERROR)

        self.manager.dismiss_outcome()
        state = build_view_state(self.manager)
        self.assertEqual(state.message_text, "")
        self.assertEqual(state.message_kind, MessageKind.NONE)

    def test_invalid_prompt_flag(self):
        self._start()
        state = build_view_state(self.manager, show_invalid_prompt=True)
        self.assertEqual(state.message_text, "Please enter a whole number.")
        self.assertEqual(state.message_kind, MessageKind.WARNING)

    def test_invalid_prompt_wins_over_previous_outcome(self):
        session = self._start()
        self.manager.submit_answer(str(session.get_expected_answer()))
        state = build_view_state(self.manager, show_invalid_prompt=True)
        self.assertEqual(state.message_text, "Please enter a whole number.")
        self.assertEqual(state.message_kind, MessageKind.WARNING)

    def test_finished_state_has_summary(self):
        session = self._start(table=9, count=5)
        for index in range(5):
            answer = session.get_expected_answer() if index % 2 == 0 else 0
            self.manager.submit_answer(str(answer))

        state = build_view_state(self.manager)
        self.assertEqual(state.phase, GamePhase.FINISHED)
        self.assertFalse(state.answer_enabled)
        self.assertEqual(state.remaining_text, "Remaining Questions: 0")
        self.assertEqual(state.summary_title, "Well done!")
        self.assertEqual(state.summary_text, "Final score is 3 out of 5")

        missed = [a for a in session.get_history() if a.given_answer == 0]
        self.assertEqual(len(missed), 2)
        expected_lines = ["Questions to practise:"] + [
            f"9 × {a.operand} = {a.expected_answer} (you answered 0)" for a in missed
        ]
        self.assertEqual(state.summary_details, "\n".join(expected_lines))

    def test_no_details_when_every_answer_correct(self):
        session = self._start(table=2, count=5)
        for _ in range(5):
            self.manager.submit_answer(str(session.get_expected_answer()))
        state = build_view_state(self.manager)
        self.assertEqual(state.summary_text, "Final score is 5 out of 5")
        self.assertEqual(state.summary_details, "")

    def test_no_details_while_in_progress(self):
        self._start()
        self.manager.submit_answer("0")
        self.assertEqual(build_view_state(self.manager).summary_details, "")

    def test_is_deterministic(self):
        self._start()
        self.assertEqual(build_view_state(self.manager), build_view_state(self.manager))


if __name__ == "__main__":
    unittest.main()
