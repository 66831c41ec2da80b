"""
Exercise Set Builder

Joins a course's topics, their exercises and the exercises' templates into
the list of assessment exercises a practice test is drawn from.
"""

from typing import List, Set

from lms_backend.common.exceptions import CompositionError, NotFoundError
from lms_backend.common.logger import app_logger, with_context, log_execution_time
from lms_backend.domain.assessments.model import Assessment, AssessmentExercise
from lms_backend.domain.assessments.repository import AssessmentRepository
from lms_backend.domain.catalog.gateway import CatalogGateway

logger = app_logger.getChild("assessments.builder")


class ExerciseSetBuilder:
    """
    Builds the full candidate exercise list for a course.

    The builder is stateless; it reads through the catalog gateway and the
    assessment repository and never writes to either.
    """

    def __init__(self, catalog: CatalogGateway, assessments: AssessmentRepository):
        self.catalog = catalog
        self.assessments = assessments

    @log_execution_time(logger)
    async def build_exercise_set(self, course_id: int) -> List[AssessmentExercise]:
        """
        Assemble every exercise of a course into assessment exercises.

        Order follows topic order, then exercise order within each topic.

        Args:
            course_id: The course to build the exercise set for

        Returns:
            List of AssessmentExercise records, empty if the course has no topics

        Raises:
            NotFoundError: If the course does not exist or has no assessment
            CompositionError: If any catalog lookup fails or a template is missing
        """
        try:
            if await self.catalog.find_course_by_id(course_id) is None:
                raise NotFoundError("Course", course_id)
            assessment = await self.assessments.find_by_course_id(course_id)
            if assessment is None:
                raise NotFoundError("Assessment for course", course_id)
            return await self._assemble(course_id, assessment)
        except (NotFoundError, CompositionError):
            raise
        except Exception as e:
            logger.error(f"Exercise set composition failed for course {course_id}: {e}")
            raise CompositionError(
                f"catalog lookup failed for course {course_id}",
                course_id=course_id,
                original_exception=e
            ) from e

    async def _assemble(self, course_id: int, assessment: Assessment) -> List[AssessmentExercise]:
        log = with_context(logger.name, course_id=course_id, assessment_id=assessment.id)
        exercises: List[AssessmentExercise] = []
        seen: Set[int] = set()

        topics = await self.catalog.find_topics_by_course(course_id)
        for topic in topics:
            for exercise in await self.catalog.find_exercises_by_topic(topic.id):
                if exercise.id in seen:
                    log.warning(f"Exercise {exercise.id} listed again under topic {topic.id}, skipping")
                    continue

                template = await self.catalog.find_template_by_id(exercise.template_id)
                if template is None:
                    raise CompositionError(
                        f"template {exercise.template_id} of exercise {exercise.id} not found",
                        course_id=course_id,
                        original_exception=NotFoundError("Template", exercise.template_id)
                    )

                seen.add(exercise.id)
                exercises.append(AssessmentExercise.assemble(exercise, template, assessment))

        log.debug(f"Built {len(exercises)} exercises from {len(topics)} topics")
        return exercises
