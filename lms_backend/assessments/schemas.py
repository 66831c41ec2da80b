"""
Request and response models for the assessments API.
"""

from typing import Optional

from pydantic import BaseModel, Field

from lms_backend.domain.assessments.model import (
    Assessment,
    AssessmentDetails,
    AssessmentExercise,
)


class AssessmentSchema(BaseModel):
    id: Optional[int] = Field(None, description="Assessment identifier, omitted on create")
    course_id: int = Field(..., description="Course the assessment belongs to")

    @classmethod
    def from_domain(cls, assessment: Assessment) -> 'AssessmentSchema':
        return cls(id=assessment.id, course_id=assessment.course_id)

    def to_domain(self) -> Assessment:
        return Assessment(id=self.id, course_id=self.course_id)


class AssessmentDetailsSchema(BaseModel):
    id: Optional[int] = None
    course_id: int
    complete: bool

    @classmethod
    def from_domain(cls, details: AssessmentDetails) -> 'AssessmentDetailsSchema':
        return cls(**details.to_dict())


class QuestionConfigRequest(BaseModel):
    """Which course to draw questions from, and how many."""
    course_id: int = Field(..., description="Course identifier")
    # Range is checked by the engine so a negative count is reported as 400
    number_of_questions: Optional[int] = Field(
        None, description="Number of questions to draw; defaults to the configured count"
    )


class AssessmentExerciseSchema(BaseModel):
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
    def from_domain(cls, exercise: AssessmentExercise) -> 'AssessmentExerciseSchema':
        return cls(**exercise.to_dict())

    def to_domain(self) -> AssessmentExercise:
        return AssessmentExercise.from_dict(self.model_dump())


class SubmissionStatsSchema(BaseModel):
    total: int = 0
    correct: int = 0
