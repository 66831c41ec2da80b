"""
Assessment Domain Model Module

This module defines the assessment record, the transient assessment-exercise
view built for every composition request, and the derived result objects.
"""

from dataclasses import dataclass, asdict, replace
from typing import Any, Dict, Optional

from lms_backend.domain.catalog.model import Exercise, Template


@dataclass
class Assessment:
    """
    The one-per-course record that anchors a generated practice test.

    Attributes:
        id: Unique identifier, None until the record is first saved
        course_id: The course the assessment belongs to
    """
    course_id: int
    id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the assessment to a dictionary."""
        return {"id": self.id, "course_id": self.course_id}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Assessment':
        """Create an Assessment from a dictionary."""
        return cls(id=data.get("id"), course_id=data["course_id"])


@dataclass
class AssessmentExercise:
    """
    Join of an exercise, its template and the course's assessment.

    Instances are built fresh for a single request and never stored.
    ``user_answer`` is only populated on submission.

    Attributes:
        exercise_id: ID of the underlying exercise
        topic_id: Topic the exercise belongs to
        question: Question content of the exercise
        answer: Correct answer of the exercise
        template_id: ID of the rendering template
        template_name: Name of the rendering template
        template_content: Rendering content of the template
        assessment_id: ID of the course's assessment
        course_id: Course the assessment belongs to
        user_answer: Answer given by the user, if any
    """
    exercise_id: int
    topic_id: Optional[int] = None
    question: str = ""
    answer: str = ""
    template_id: Optional[int] = None
    template_name: str = ""
    template_content: str = ""
    assessment_id: Optional[int] = None
    course_id: Optional[int] = None
    user_answer: Optional[str] = None

    @classmethod
    def assemble(
        cls,
        exercise: Exercise,
        template: Template,
        assessment: Assessment
    ) -> 'AssessmentExercise':
        """
        Combine an exercise, its template and the assessment into one record.

        Args:
            exercise: The exercise to present
            template: The template resolved from ``exercise.template_id``
            assessment: The assessment of the exercise's course

        Returns:
            A new AssessmentExercise
        """
        return cls(
            exercise_id=exercise.id,
            topic_id=exercise.topic_id,
            question=exercise.question,
            answer=exercise.answer,
            template_id=template.id,
            template_name=template.name,
            template_content=template.content,
            assessment_id=assessment.id,
            course_id=assessment.course_id,
        )

    def with_answer(self, user_answer: Optional[str]) -> 'AssessmentExercise':
        """Return a copy carrying the given user answer."""
        return replace(self, user_answer=user_answer)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the assessment exercise to a dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AssessmentExercise':
        """Create an AssessmentExercise from a dictionary, ignoring unknown keys."""
        known = {name for name in cls.__dataclass_fields__}
        return cls(**{key: value for key, value in data.items() if key in known})


@dataclass(frozen=True)
class SubmissionStats:
    """
    Aggregate result of scoring one batch of submitted answers.

    Attributes:
        total: Number of answers submitted
        correct: Number of answers matching the correct answer
    """
    total: int = 0
    correct: int = 0

    def to_dict(self) -> Dict[str, int]:
        """Convert the stats to the metric mapping returned to callers."""
        return {"total": self.total, "correct": self.correct}


@dataclass
class AssessmentDetails:
    """
    Listing view of an assessment with its completeness verdict.

    Attributes:
        id: Assessment ID
        course_id: Course the assessment belongs to
        complete: Whether the assessment is complete under the active policy
    """
    id: Optional[int]
    course_id: int
    complete: bool = False

    @classmethod
    def from_assessment(cls, assessment: Assessment, complete: bool) -> 'AssessmentDetails':
        """Build the details view for an assessment."""
        return cls(id=assessment.id, course_id=assessment.course_id, complete=complete)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the details to a dictionary."""
        return {"id": self.id, "course_id": self.course_id, "complete": self.complete}
