"""
Common Exception Classes

Error kinds raised by the assessment engine. The HTTP layer maps each kind
to its own status code:

* ``NotFoundError`` -> 404
* ``InvalidArgumentError`` -> 400
* ``CompositionError`` -> 503

``ConfigurationError`` is raised while the application is being wired and
never reaches a request.
"""

from typing import Optional, Any


class BaseError(Exception):
    """Root of the backend's exceptions; keeps the message and the causing error."""

    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.original_exception = original_exception


class NotFoundError(BaseError):
    """A course, assessment or template the caller referenced does not exist."""

    def __init__(self, resource_type: str, resource_id: Any):
        super().__init__(f"{resource_type} with ID {resource_id} not found")
        self.resource_type = resource_type
        self.resource_id = resource_id


class InvalidArgumentError(BaseError):
    """
    A client-supplied value the engine cannot accept.

    Args:
        message: What was wrong
        errors: Offending field names mapped to the rejected value or a reason
    """

    def __init__(self, message: str, errors: Optional[dict] = None):
        super().__init__(f"Invalid argument: {message}")
        self.errors = errors or {}


class CompositionError(BaseError):
    """
    Building a course's exercise set failed part way.

    Args:
        message: What failed
        course_id: Course whose exercise set could not be built
        original_exception: The lookup failure or missing-template error that aborted the build
    """

    def __init__(
        self,
        message: str,
        course_id: Any = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(f"Composition failed: {message}", original_exception)
        self.course_id = course_id


class ConfigurationError(BaseError):
    """A setting holds a value the application cannot be built with."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(f"Configuration error: {message}")
        self.config_key = config_key
