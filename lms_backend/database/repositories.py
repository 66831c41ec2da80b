"""
SQL Repositories

SQLAlchemy-backed implementations of the catalog gateway and the assessment
repository. ORM rows are converted to domain records before they leave this
module.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from lms_backend.common.exceptions import InvalidArgumentError
from lms_backend.common.logger import app_logger
from lms_backend.database.models import (
    AssessmentModel,
    CourseModel,
    ExerciseModel,
    TemplateModel,
    TopicModel,
)
from lms_backend.domain.assessments.model import Assessment
from lms_backend.domain.assessments.repository import AssessmentRepository
from lms_backend.domain.catalog.gateway import CatalogGateway
from lms_backend.domain.catalog.model import Course, Exercise, Template, Topic

logger = app_logger.getChild("database.repositories")


def _to_course(row: CourseModel) -> Course:
    return Course(id=row.id, name=row.name or "")


def _to_topic(row: TopicModel) -> Topic:
    return Topic(id=row.id, course_id=row.course_id, name=row.name or "")


def _to_template(row: TemplateModel) -> Template:
    return Template(id=row.id, name=row.name or "", content=row.content or "")


def _to_exercise(row: ExerciseModel) -> Exercise:
    return Exercise(
        id=row.id,
        topic_id=row.topic_id,
        template_id=row.template_id,
        question=row.question or "",
        answer=row.answer or "",
    )


def _to_assessment(row: AssessmentModel) -> Assessment:
    return Assessment(id=row.id, course_id=row.course_id)


class SqlCatalogGateway(CatalogGateway):
    """Catalog lookups against the ``courses``/``topics``/``exercises``/``templates`` tables."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    async def find_course_by_id(self, course_id: int) -> Optional[Course]:
        async with self.session_factory() as session:
            row = await session.get(CourseModel, course_id)
            return _to_course(row) if row else None

    async def find_topics_by_course(self, course_id: int) -> List[Topic]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(TopicModel)
                .where(TopicModel.course_id == course_id)
                .order_by(TopicModel.id)
            )
            return [_to_topic(row) for row in result.scalars().all()]

    async def find_exercises_by_topic(self, topic_id: int) -> List[Exercise]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(ExerciseModel)
                .where(ExerciseModel.topic_id == topic_id)
                .order_by(ExerciseModel.id)
            )
            return [_to_exercise(row) for row in result.scalars().all()]

    async def find_template_by_id(self, template_id: int) -> Optional[Template]:
        async with self.session_factory() as session:
            row = await session.get(TemplateModel, template_id)
            return _to_template(row) if row else None


class SqlAssessmentRepository(AssessmentRepository):
    """Assessment records stored in the ``assessments`` table."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    async def save(self, assessment: Assessment) -> Assessment:
        async with self.session_factory() as session:
            try:
                row = None
                if assessment.id is not None:
                    row = await session.get(AssessmentModel, assessment.id)
                if row is None:
                    row = AssessmentModel(id=assessment.id, course_id=assessment.course_id)
                    session.add(row)
                else:
                    row.course_id = assessment.course_id
                await session.commit()
                await session.refresh(row)
            except IntegrityError as e:
                await session.rollback()
                logger.warning(f"Rejected assessment for course {assessment.course_id}: {e.orig}")
                raise InvalidArgumentError(
                    f"assessment for course {assessment.course_id} conflicts with a stored record",
                    errors={"course_id": assessment.course_id}
                ) from e
            except Exception as e:
                await session.rollback()
                logger.error(f"Failed to save assessment for course {assessment.course_id}: {e}")
                raise
            return _to_assessment(row)

    async def delete(self, assessment_id: int) -> bool:
        async with self.session_factory() as session:
            row = await session.get(AssessmentModel, assessment_id)
            if row is None:
                return False
            await session.delete(row)
            await session.commit()
            return True

    async def find_all(self) -> List[Assessment]:
        async with self.session_factory() as session:
            result = await session.execute(select(AssessmentModel).order_by(AssessmentModel.id))
            return [_to_assessment(row) for row in result.scalars().all()]

    async def find_by_id(self, assessment_id: int) -> Optional[Assessment]:
        async with self.session_factory() as session:
            row = await session.get(AssessmentModel, assessment_id)
            return _to_assessment(row) if row else None

    async def find_by_course_id(self, course_id: int) -> Optional[Assessment]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(AssessmentModel).where(AssessmentModel.course_id == course_id)
            )
            row = result.scalars().first()
            return _to_assessment(row) if row else None
