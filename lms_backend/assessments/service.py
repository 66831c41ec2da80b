"""
Assessment Service

This module exposes the assessment engine to callers: composing a sampled
exercise set for a course, scoring submissions, classifying assessments as
complete, and the pass-through operations on assessment records.
"""

import random
from typing import Dict, Iterable, List, Optional

from lms_backend.common.exceptions import InvalidArgumentError, NotFoundError
from lms_backend.common.logger import app_logger
from lms_backend.config import Settings
from lms_backend.domain.assessments.model import (
    Assessment,
    AssessmentDetails,
    AssessmentExercise,
)
from lms_backend.domain.assessments.repository import AssessmentRepository
from lms_backend.domain.catalog.gateway import CatalogGateway
from lms_backend.assessments.builder import ExerciseSetBuilder
from lms_backend.assessments.completeness import CompletenessEvaluator, get_policy
from lms_backend.assessments.sampler import QuestionSampler, seeded_random_factory
from lms_backend.assessments.scoring import StatsAggregator

logger = app_logger.getChild("assessments.service")


class AssessmentService:
    """
    Entry point of the assessment engine.

    The service holds no per-request state; concurrent calls for different
    courses or submissions do not interact.
    """

    def __init__(
        self,
        catalog: CatalogGateway,
        assessments: AssessmentRepository,
        sampler: Optional[QuestionSampler] = None,
        aggregator: Optional[StatsAggregator] = None,
        evaluator: Optional[CompletenessEvaluator] = None
    ):
        """
        Initialize the service.

        Args:
            catalog: Gateway to courses, topics, exercises and templates
            assessments: Repository of assessment records
            sampler: Question sampler, entropy-seeded by default
            aggregator: Submission scorer, case-sensitive by default
            evaluator: Completeness evaluator, ``all_topics_have_exercises`` by default
        """
        self.catalog = catalog
        self.assessments = assessments
        self.builder = ExerciseSetBuilder(catalog, assessments)
        self.sampler = sampler or QuestionSampler()
        self.aggregator = aggregator or StatsAggregator()
        self.evaluator = evaluator or CompletenessEvaluator(
            catalog, get_policy("all_topics_have_exercises")
        )

    async def compose_assessment_exercises(
        self,
        course_id: int,
        requested_count: int,
        rng: Optional[random.Random] = None
    ) -> List[AssessmentExercise]:
        """
        Build the exercise set of a course and sample it down to the requested size.

        Args:
            course_id: The course to compose an assessment for
            requested_count: Maximum number of exercises to return
            rng: Optional generator for the draw

        Returns:
            Sampled list of AssessmentExercise records

        Raises:
            InvalidArgumentError: If requested_count is negative
            NotFoundError: If the course has no assessment
            CompositionError: If a catalog lookup fails
        """
        logger.debug(f"Request to compose {requested_count} exercises for course : {course_id}")
        if isinstance(requested_count, bool) or not isinstance(requested_count, int) or requested_count < 0:
            raise InvalidArgumentError(
                f"requested count must be a non-negative integer, got {requested_count!r}",
                errors={"number_of_questions": requested_count}
            )

        candidates = await self.builder.build_exercise_set(course_id)
        return self.sampler.sample(candidates, requested_count, rng=rng)

    def score_submission(self, submitted_answers: Iterable[AssessmentExercise]) -> Dict[str, int]:
        """
        Score submitted answers.

        Returns:
            Mapping with the ``total`` and ``correct`` counts
        """
        logger.debug("Request to score assessment submission")
        return self.aggregator.score_submission(submitted_answers).to_dict()

    async def evaluate_completeness(self, assessment: Assessment) -> bool:
        """Classify an assessment as complete or not under the configured policy."""
        return await self.evaluator.is_complete(assessment)

    async def create_or_update_assessment(self, assessment: Assessment) -> Assessment:
        """
        Save an assessment record.

        Raises:
            NotFoundError: If the course does not exist
            InvalidArgumentError: If another assessment already exists for the course
        """
        logger.debug(f"Request to save Assessment : {assessment}")
        if await self.catalog.find_course_by_id(assessment.course_id) is None:
            raise NotFoundError("Course", assessment.course_id)
        existing = await self.assessments.find_by_course_id(assessment.course_id)
        if existing is not None and existing.id != assessment.id:
            raise InvalidArgumentError(
                f"course {assessment.course_id} already has assessment {existing.id}",
                errors={"course_id": assessment.course_id}
            )
        return await self.assessments.save(assessment)

    async def get_assessment(self, assessment_id: int) -> Assessment:
        """
        Get an assessment by ID.

        Raises:
            NotFoundError: If no assessment has the ID
        """
        logger.debug(f"Request to get Assessment : {assessment_id}")
        assessment = await self.assessments.find_by_id(assessment_id)
        if assessment is None:
            raise NotFoundError("Assessment", assessment_id)
        return assessment

    async def delete_assessment(self, assessment_id: int) -> None:
        """
        Delete an assessment by ID.

        Raises:
            NotFoundError: If no assessment has the ID
        """
        logger.debug(f"Request to delete Assessment : {assessment_id}")
        if not await self.assessments.delete(assessment_id):
            raise NotFoundError("Assessment", assessment_id)

    async def list_assessments(self) -> List[Assessment]:
        """Get all assessment records."""
        logger.debug("Request to get all Assessments")
        return await self.assessments.find_all()

    async def list_assessment_details(self) -> List[AssessmentDetails]:
        """Get all assessments together with their completeness verdicts."""
        details = []
        for assessment in await self.list_assessments():
            complete = await self.evaluate_completeness(assessment)
            details.append(AssessmentDetails.from_assessment(assessment, complete))
        return details


def create_assessment_service(
    catalog: CatalogGateway,
    assessments: AssessmentRepository,
    settings: Settings
) -> AssessmentService:
    """
    Build an AssessmentService configured from application settings.

    Args:
        catalog: Gateway to the course catalog
        assessments: Repository of assessment records
        settings: Application settings

    Returns:
        Configured AssessmentService

    Raises:
        ConfigurationError: If COMPLETENESS_POLICY names an unknown policy
    """
    return AssessmentService(
        catalog=catalog,
        assessments=assessments,
        sampler=QuestionSampler(seeded_random_factory(settings.SAMPLER_SEED)),
        aggregator=StatsAggregator(case_sensitive=settings.ANSWER_CASE_SENSITIVE),
        evaluator=CompletenessEvaluator(catalog, get_policy(settings.COMPLETENESS_POLICY)),
    )
