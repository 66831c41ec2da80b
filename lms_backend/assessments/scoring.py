"""
Stats Aggregator

Scores a batch of submitted answers against the correct answers they carry.
"""

from typing import Any, Iterable, Optional

from lms_backend.common.exceptions import InvalidArgumentError
from lms_backend.common.logger import app_logger
from lms_backend.domain.assessments.model import AssessmentExercise, SubmissionStats

logger = app_logger.getChild("assessments.scoring")


class StatsAggregator:
    """Pure reduction of submitted assessment exercises into summary counters."""

    def __init__(self, case_sensitive: bool = True):
        """
        Initialize the aggregator.

        Args:
            case_sensitive: Whether answers must match in letter case
        """
        self.case_sensitive = case_sensitive

    def _normalize(self, value: Any) -> str:
        text = str(value).strip()
        return text if self.case_sensitive else text.casefold()

    def is_correct(self, item: AssessmentExercise) -> bool:
        """
        Check a single submitted item.

        A missing user answer never counts as correct.
        """
        if item.user_answer is None:
            return False
        return self._normalize(item.user_answer) == self._normalize(item.answer)

    def score_submission(self, submitted: Optional[Iterable[AssessmentExercise]]) -> SubmissionStats:
        """
        Count attempted and correct answers.

        Args:
            submitted: Assessment exercises carrying the user's answers

        Returns:
            SubmissionStats with the total and correct counts

        Raises:
            InvalidArgumentError: If the payload or one of its items is malformed
        """
        if submitted is None:
            raise InvalidArgumentError("submission payload is missing")

        total = 0
        correct = 0
        for index, item in enumerate(submitted):
            if not isinstance(item, AssessmentExercise) or item.exercise_id is None:
                raise InvalidArgumentError(
                    f"submission item {index} is not an assessment exercise",
                    errors={"index": index}
                )
            total += 1
            if self.is_correct(item):
                correct += 1

        logger.debug(f"Scored submission: {correct}/{total} correct")
        return SubmissionStats(total=total, correct=correct)
