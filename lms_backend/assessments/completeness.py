"""
Completeness Evaluator

Derives whether an assessment is complete. The predicate is a named policy
chosen through configuration:

* ``all_topics_have_exercises``: the course has at least one topic and every
  topic has at least one exercise.
* ``has_exercises``: at least one topic of the course has an exercise.
"""

import abc
from typing import Dict, Type

from lms_backend.common.exceptions import ConfigurationError, NotFoundError
from lms_backend.common.logger import app_logger
from lms_backend.domain.assessments.model import Assessment
from lms_backend.domain.catalog.gateway import CatalogGateway

logger = app_logger.getChild("assessments.completeness")


class CompletenessPolicy(abc.ABC):
    """A predicate deciding whether an existing course's assessment is complete."""

    name: str = ""

    @abc.abstractmethod
    async def evaluate(self, catalog: CatalogGateway, assessment: Assessment) -> bool:
        """
        Evaluate the policy for an assessment whose course exists.

        Args:
            catalog: Gateway used to inspect the course's topics and exercises
            assessment: The assessment to classify

        Returns:
            True if complete, False otherwise
        """
        pass


class AllTopicsHaveExercisesPolicy(CompletenessPolicy):
    name = "all_topics_have_exercises"

    async def evaluate(self, catalog: CatalogGateway, assessment: Assessment) -> bool:
        topics = await catalog.find_topics_by_course(assessment.course_id)
        if not topics:
            return False
        for topic in topics:
            if not await catalog.find_exercises_by_topic(topic.id):
                return False
        return True


class HasExercisesPolicy(CompletenessPolicy):
    name = "has_exercises"

    async def evaluate(self, catalog: CatalogGateway, assessment: Assessment) -> bool:
        for topic in await catalog.find_topics_by_course(assessment.course_id):
            if await catalog.find_exercises_by_topic(topic.id):
                return True
        return False


POLICIES: Dict[str, Type[CompletenessPolicy]] = {
    AllTopicsHaveExercisesPolicy.name: AllTopicsHaveExercisesPolicy,
    HasExercisesPolicy.name: HasExercisesPolicy,
}


def get_policy(name: str) -> CompletenessPolicy:
    """
    Instantiate a completeness policy by name.

    Raises:
        ConfigurationError: If no policy is registered under the name
    """
    try:
        return POLICIES[name]()
    except KeyError:
        raise ConfigurationError(
            f"unknown completeness policy '{name}', expected one of {sorted(POLICIES)}",
            config_key="COMPLETENESS_POLICY"
        ) from None


class CompletenessEvaluator:
    """Applies a completeness policy to assessments without side effects."""

    def __init__(self, catalog: CatalogGateway, policy: CompletenessPolicy):
        self.catalog = catalog
        self.policy = policy

    async def is_complete(self, assessment: Assessment) -> bool:
        """
        Classify an assessment as complete or not.

        Args:
            assessment: The assessment to classify

        Returns:
            The policy's verdict

        Raises:
            NotFoundError: If the assessment references a course that does not exist
        """
        course = await self.catalog.find_course_by_id(assessment.course_id)
        if course is None:
            raise NotFoundError("Course", assessment.course_id)

        complete = bool(await self.policy.evaluate(self.catalog, assessment))
        logger.debug(
            f"Assessment {assessment.id} for course {assessment.course_id} "
            f"complete={complete} under policy '{self.policy.name}'"
        )
        return complete
