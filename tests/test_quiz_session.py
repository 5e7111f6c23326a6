"""
Unit tests for QuizSession question generation and scoring.
"""
import random
import unittest

from edutainment.core.models import AnswerOutcome, QuizConfiguration
from edutainment.core.services.quiz_session import QuizFinishedError, QuizSession


class ScriptedRandom:
    """Stand-in for random.Random that returns queued randint values."""

    def __init__(self, values):
        self._values = list(values)
        self.calls = []

    def randint(self, low, high):
        self.calls.append((low, high))
        return self._values.pop(0)


class TestQuizSessionStart(unittest.TestCase):
    """Test cases for the initial state of a session."""

    def test_start_for_every_valid_configuration(self):
        """A new session has a full question count and no score."""
        for table in range(1, 13):
            for count in (5, 10, 20):
                session = QuizSession.start(QuizConfiguration(table, count), random.Random(table))
                self.assertEqual(session.get_table_number(), table)
                self.assertEqual(session.get_total_questions(), count)
                self.assertEqual(session.get_remaining_questions(), count)
                self.assertEqual(session.get_score(), 0)
                self.assertIsNone(session.get_last_outcome())
                self.assertFalse(session.is_finished())
                self.assertTrue(1 <= session.get_current_operand() <= 12)

    def test_first_operand_drawn_from_full_range(self):
        rng = ScriptedRandom([12])
        session = QuizSession.start(QuizConfiguration(3, 5), rng)
        self.assertEqual(rng.calls, [(1, 12)])
        self.assertEqual(session.get_current_operand(), 12)


class TestQuizSessionAnswers(unittest.TestCase):
    """Test cases for answer processing."""

    def setUp(self):
        """Start a 4-times-table session whose first operand is 7."""
        self.rng = ScriptedRandom([7, 3, 3, 10, 1])
        self.session = QuizSession.start(QuizConfiguration(4, 5), self.rng)

    def test_correct_answer_scores_and_advances(self):
        result = self.session.submit_answer("28")

        self.assertEqual(result.outcome, AnswerOutcome.CORRECT)
        self.assertEqual(result.score, 1)
        self.assertFalse(result.is_finished)
        self.assertEqual(self.session.get_remaining_questions(), 4)
        self.assertEqual(self.session.get_last_outcome(), AnswerOutcome.CORRECT)

    def test_incorrect_answer_keeps_score(self):
        self.session.submit_answer("28")
        result = self.session.submit_answer("999")

        self.assertEqual(result.outcome, AnswerOutcome.INCORRECT)
        self.assertEqual(result.score, 1)
        self.assertEqual(self.session.get_remaining_questions(), 3)
        self.assertEqual(self.session.get_last_outcome(), AnswerOutcome.INCORRECT)

    def test_next_operand_skips_previous_value(self):
        """Draws at or above the previous operand shift up by one."""
        self.session.submit_answer("28")
        # Draw of 3 is below 7, kept as is.
        self.assertEqual(self.session.get_current_operand(), 3)
        self.assertEqual(self.rng.calls[-1], (1, 11))

        self.session.submit_answer("12")
        # Draw of 3 equals the previous operand and becomes 4.
        self.assertEqual(self.session.get_current_operand(), 4)

        self.session.submit_answer("16")
        # Draw of 10 is above 4 and becomes 11.
        self.assertEqual(self.session.get_current_operand(), 11)

    def test_invalid_answer_changes_nothing(self):
        operand = self.session.get_current_operand()
        result = self.session.submit_answer("abc")

        self.assertEqual(result.outcome, AnswerOutcome.INVALID)
        self.assertEqual(result.score, 0)
        self.assertFalse(result.is_finished)
        self.assertEqual(self.session.get_score(), 0)
        self.assertEqual(self.session.get_remaining_questions(), 5)
        self.assertEqual(self.session.get_current_operand(), operand)
        self.assertIsNone(self.session.get_last_outcome())
        self.assertEqual(self.session.get_history(), ())

    def test_invalid_answer_keeps_previous_outcome(self):
        self.session.submit_answer("28")
        self.session.submit_answer("")
        self.assertEqual(self.session.get_last_outcome(), AnswerOutcome.CORRECT)
        self.assertEqual(self.session.get_remaining_questions(), 4)

    def test_answer_with_surrounding_whitespace_is_accepted(self):
        result = self.session.submit_answer(" 28 ")
        self.assertEqual(result.outcome, AnswerOutcome.CORRECT)

    def test_session_finishes_after_last_question(self):
        for _ in range(5):
            result = self.session.submit_answer(str(self.session.get_expected_answer()))

        self.assertTrue(result.is_finished)
        self.assertTrue(self.session.is_finished())
        self.assertEqual(self.session.get_remaining_questions(), 0)
        self.assertEqual(self.session.get_score(), 5)
        # No draw happens after the final answer.
        self.assertEqual(len(self.rng.calls), 5)

    def test_answer_after_finish_raises(self):
        for _ in range(5):
            self.session.submit_answer("0")
        with self.assertRaises(QuizFinishedError):
            self.session.submit_answer("28")
        self.assertEqual(self.session.get_remaining_questions(), 0)

    def test_history_records_each_processed_answer(self):
        self.session.submit_answer("28")
        self.session.submit_answer("nope")
        self.session.submit_answer("5")

        history = self.session.get_history()
        self.assertEqual(len(history), 2)
        self.assertEqual(history[0].operand, 7)
        self.assertEqual(history[0].expected_answer, 28)
        self.assertEqual(history[0].outcome, AnswerOutcome.CORRECT)
        self.assertEqual(history[1].operand, 3)
        self.assertEqual(history[1].given_answer, 5)
        self.assertEqual(history[1].expected_answer, 12)
        self.assertEqual(history[1].outcome, AnswerOutcome.INCORRECT)

    def test_dismiss_outcome_only_clears_outcome(self):
        self.session.submit_answer("28")
        self.session.dismiss_outcome()

        self.assertIsNone(self.session.get_last_outcome())
        self.assertEqual(self.session.get_score(), 1)
        self.assertEqual(self.session.get_remaining_questions(), 4)
        self.assertEqual(self.session.get_current_operand(), 3)


class TestQuizSessionProperties(unittest.TestCase):
    """Properties that must hold for any sequence of answers."""

    def test_remaining_decreases_and_score_bounded(self):
        rng = random.Random(1234)
        for count in (5, 10, 20):
            session = QuizSession.start(QuizConfiguration(7, count), rng)
            previous_score = 0
            for step in range(count):
                guess = session.get_expected_answer() if rng.random() < 0.5 else -1
                result = session.submit_answer(str(guess))
                self.assertEqual(session.get_remaining_questions(), count - step - 1)
                self.assertGreaterEqual(result.score, previous_score)
                self.assertLessEqual(result.score, count)
                previous_score = result.score
            self.assertTrue(session.is_finished())

    def test_consecutive_operands_differ(self):
        rng = random.Random(99)
        for _ in range(50):
            session = QuizSession.start(QuizConfiguration(2, 20), rng)
            previous = session.get_current_operand()
            while not session.is_finished():
                session.submit_answer("1")
                if session.is_finished():
                    break
                current = session.get_current_operand()
                self.assertNotEqual(current, previous)
                self.assertTrue(1 <= current <= 12)
                previous = current


if __name__ == "__main__":
    unittest.main()
