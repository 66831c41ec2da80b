import unittest

from lms_backend.assessments.scoring import StatsAggregator
from lms_backend.common.exceptions import InvalidArgumentError
from lms_backend.domain.assessments.model import AssessmentExercise, SubmissionStats


def make_item(exercise_id, answer, user_answer):
    return AssessmentExercise(exercise_id=exercise_id, answer=answer, user_answer=user_answer)


class TestStatsAggregator(unittest.TestCase):
    """Test scoring of submitted answers."""

    def setUp(self):
        self.aggregator = StatsAggregator()

    def test_empty_submission(self):
        stats = self.aggregator.score_submission([])
        self.assertEqual(stats, SubmissionStats(total=0, correct=0))
        self.assertEqual(stats.to_dict(), {"total": 0, "correct": 0})

    def test_counts_total_and_correct(self):
        submitted = [
            make_item(1, "3", "3"),
            make_item(2, "True", "True"),
            make_item(3, "2, -2", "2"),
            make_item(4, "x", "x"),
            make_item(5, "7", "8"),
        ]
        stats = self.aggregator.score_submission(submitted)
        self.assertEqual(stats.to_dict(), {"total": 5, "correct": 3})

    def test_correct_never_exceeds_total(self):
        submitted = [make_item(i, "a", "a") for i in range(4)]
        stats = self.aggregator.score_submission(submitted)
        self.assertEqual(stats.total, 4)
        self.assertEqual(stats.correct, 4)

    def test_surrounding_whitespace_is_ignored(self):
        self.assertTrue(self.aggregator.is_correct(make_item(1, "42", "  42\n")))

    def test_case_sensitive_by_default(self):
        self.assertFalse(self.aggregator.is_correct(make_item(1, "True", "true")))

    def test_case_insensitive_mode(self):
        aggregator = StatsAggregator(case_sensitive=False)
        self.assertTrue(aggregator.is_correct(make_item(1, "True", "TRUE")))

    def test_missing_answer_is_incorrect(self):
        stats = self.aggregator.score_submission([make_item(1, "", None)])
        self.assertEqual(stats.to_dict(), {"total": 1, "correct": 0})

    def test_accepts_any_iterable(self):
        stats = self.aggregator.score_submission(make_item(i, "a", "a") for i in range(2))
        self.assertEqual(stats.to_dict(), {"total": 2, "correct": 2})

    def test_missing_payload_rejected(self):
        with self.assertRaises(InvalidArgumentError):
            self.aggregator.score_submission(None)

    def test_malformed_item_rejected(self):
        with self.assertRaises(InvalidArgumentError) as ctx:
            self.aggregator.score_submission([make_item(1, "a", "a"), {"answer": "a"}])
        self.assertEqual(ctx.exception.errors, {"index": 1})

    def test_result_has_exactly_two_keys(self):
        stats = self.aggregator.score_submission([make_item(1, "a", "b")])
        self.assertEqual(set(stats.to_dict()), {"total", "correct"})


if __name__ == "__main__":
    unittest.main()
