"""
Shared API utilities for the LMS backend.

This module provides:
- The standard response body shape
- Exception handlers mapping engine errors to HTTP status codes
- Entity alert headers for create/update/delete responses
"""

from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from lms_backend.common.exceptions import (
    CompositionError,
    InvalidArgumentError,
    NotFoundError,
)
from lms_backend.common.logger import app_logger

logger = app_logger.getChild("api")

APPLICATION_NAME = "lmsApp"


class APIResponse:
    """Standard API response structure"""

    @staticmethod
    def error(message: str, details: Optional[Any] = None,
              code: Optional[str] = None) -> Dict[str, Any]:
        """
        Build the error body shared by every non-2xx response.

        ``details`` and ``code`` are only included when given.
        """
        body: Dict[str, Any] = {"status": "error", "message": message}
        if details:
            body["details"] = details
        if code:
            body["code"] = code
        return body


class HeaderUtil:
    """Builds the alert headers attached to entity mutation responses."""

    @staticmethod
    def alert(message: str, param: str) -> Dict[str, str]:
        return {
            f"X-{APPLICATION_NAME}-alert": message,
            f"X-{APPLICATION_NAME}-params": param,
        }

    @classmethod
    def entity_creation_alert(cls, entity_name: str, param: str) -> Dict[str, str]:
        return cls.alert(f"{APPLICATION_NAME}.{entity_name}.created", param)

    @classmethod
    def entity_update_alert(cls, entity_name: str, param: str) -> Dict[str, str]:
        return cls.alert(f"{APPLICATION_NAME}.{entity_name}.updated", param)

    @classmethod
    def entity_deletion_alert(cls, entity_name: str, param: str) -> Dict[str, str]:
        return cls.alert(f"{APPLICATION_NAME}.{entity_name}.deleted", param)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Handle request body validation errors and return a standardized response.

    Args:
        request: The incoming request
        exc: The validation exception

    Returns:
        A JSON response with error details
    """
    error_details = []
    for error in exc.errors():
        error_details.append({
            "location": list(error.get("loc", [])),
            "message": error.get("msg", "Unknown validation error"),
            "type": error.get("type", "")
        })

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=APIResponse.error("Validation error", details=error_details)
    )


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=APIResponse.error(
            exc.message,
            details={"resource_type": exc.resource_type, "resource_id": exc.resource_id},
            code="not_found"
        )
    )


async def invalid_argument_handler(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=APIResponse.error(exc.message, details=exc.errors, code="bad_request")
    )


async def composition_error_handler(request: Request, exc: CompositionError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=APIResponse.error(
            "No assessment content available",
            details={"course_id": exc.course_id, "reason": exc.message},
            code="composition_failed"
        )
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers of the engine's error kinds on an application."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(InvalidArgumentError, invalid_argument_handler)
    app.add_exception_handler(CompositionError, composition_error_handler)
