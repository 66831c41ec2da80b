"""
Assessments API Router

REST endpoints for assessment records, exercise composition and submission
scoring.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from lms_backend.assessments.schemas import (
    AssessmentDetailsSchema,
    AssessmentExerciseSchema,
    AssessmentSchema,
    QuestionConfigRequest,
    SubmissionStatsSchema,
)
from lms_backend.assessments.service import AssessmentService
from lms_backend.api import HeaderUtil
from lms_backend.common.exceptions import InvalidArgumentError
from lms_backend.common.logger import app_logger
from lms_backend.config import Settings, settings as app_settings

logger = app_logger.getChild("assessments.router")

ENTITY_NAME = "assessment"

router = APIRouter()


def get_assessment_service(request: Request) -> AssessmentService:
    """Dependency returning the service created at application startup."""
    service = getattr(request.app.state, "assessment_service", None)
    if service is None:
        raise RuntimeError("Assessment service not initialized. Application startup may have failed.")
    return service


def get_settings(request: Request) -> Settings:
    """Dependency returning the settings the application was created with."""
    return getattr(request.app.state, "settings", None) or app_settings


async def _create(
    payload: AssessmentSchema,
    request: Request,
    response: Response,
    service: AssessmentService
) -> AssessmentSchema:
    if payload.id is not None:
        raise InvalidArgumentError(
            "A new assessment cannot already have an ID", errors={"id": "idexists"}
        )
    result = await service.create_or_update_assessment(payload.to_domain())
    response.status_code = status.HTTP_201_CREATED
    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{result.id}"
    response.headers.update(HeaderUtil.entity_creation_alert(ENTITY_NAME, str(result.id)))
    return AssessmentSchema.from_domain(result)


@router.post("/assessments", response_model=AssessmentSchema, status_code=status.HTTP_201_CREATED)
async def create_assessment(
    payload: AssessmentSchema,
    request: Request,
    response: Response,
    service: AssessmentService = Depends(get_assessment_service)
) -> AssessmentSchema:
    """Create a new assessment; 400 if the body already carries an ID."""
    logger.debug(f"REST request to save Assessment : {payload}")
    return await _create(payload, request, response, service)


@router.put("/assessments", response_model=AssessmentSchema)
async def update_assessment(
    payload: AssessmentSchema,
    request: Request,
    response: Response,
    service: AssessmentService = Depends(get_assessment_service)
) -> AssessmentSchema:
    """Update an existing assessment; a body without an ID creates one instead."""
    logger.debug(f"REST request to update Assessment : {payload}")
    if payload.id is None:
        return await _create(payload, request, response, service)
    result = await service.create_or_update_assessment(payload.to_domain())
    response.headers.update(HeaderUtil.entity_update_alert(ENTITY_NAME, str(result.id)))
    return AssessmentSchema.from_domain(result)


@router.get("/assessments", response_model=List[AssessmentDetailsSchema])
async def get_all_assessments(
    service: AssessmentService = Depends(get_assessment_service)
) -> List[AssessmentDetailsSchema]:
    """List every assessment with its completeness verdict."""
    logger.debug("REST request to get all Assessments")
    details = await service.list_assessment_details()
    return [AssessmentDetailsSchema.from_domain(item) for item in details]


@router.get("/assessments/{assessment_id}", response_model=AssessmentSchema)
async def get_assessment(
    assessment_id: int,
    service: AssessmentService = Depends(get_assessment_service)
) -> AssessmentSchema:
    logger.debug(f"REST request to get Assessment : {assessment_id}")
    return AssessmentSchema.from_domain(await service.get_assessment(assessment_id))


@router.delete("/assessments/{assessment_id}")
async def delete_assessment(
    assessment_id: int,
    service: AssessmentService = Depends(get_assessment_service)
) -> Response:
    logger.debug(f"REST request to delete Assessment : {assessment_id}")
    await service.delete_assessment(assessment_id)
    return Response(
        status_code=status.HTTP_200_OK,
        headers=HeaderUtil.entity_deletion_alert(ENTITY_NAME, str(assessment_id))
    )


@router.post("/assessments/exercises", response_model=List[AssessmentExerciseSchema])
async def get_exercises_for_assessment(
    config: QuestionConfigRequest,
    service: AssessmentService = Depends(get_assessment_service),
    settings: Settings = Depends(get_settings)
) -> List[AssessmentExerciseSchema]:
    """
    Draw a practice assessment for a course.

    Returns at most ``number_of_questions`` exercises picked at random from
    every exercise of the course; 404 if the course has no assessment.
    """
    count = config.number_of_questions
    if count is None:
        count = settings.DEFAULT_QUESTION_COUNT
    if count > settings.MAX_QUESTION_COUNT:
        raise InvalidArgumentError(
            f"at most {settings.MAX_QUESTION_COUNT} questions can be requested",
            errors={"number_of_questions": count}
        )

    logger.debug(f"REST request to get questions for assessment for course : {config.course_id}")
    exercises = await service.compose_assessment_exercises(config.course_id, count)
    return [AssessmentExerciseSchema.from_domain(item) for item in exercises]


@router.post("/assessments/submit", response_model=SubmissionStatsSchema)
async def submit_assessment(
    submitted: List[AssessmentExerciseSchema],
    service: AssessmentService = Depends(get_assessment_service)
) -> SubmissionStatsSchema:
    """
    Score submitted answers and return the total and correct counts.

    Each item is judged against the ``answer`` it carries, as returned by
    ``/assessments/exercises``; correct answers are visible to the client
    and scoring is a practice aid, not a graded exam.
    """
    logger.debug("REST request to store stats for assessment")
    stats = service.score_submission([item.to_domain() for item in submitted])
    return SubmissionStatsSchema(**stats)
