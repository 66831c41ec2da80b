"""
Common Components for the LMS backend

Key components:
1. Logging - Centralized logging configuration
2. Exceptions - Error kinds shared by the engine and the HTTP layer
"""

from lms_backend.common.logger import app_logger, get_logger, log_execution_time
from lms_backend.common.exceptions import (
    BaseError, NotFoundError, InvalidArgumentError, CompositionError, ConfigurationError
)

__all__ = [
    # Logging
    'app_logger', 'get_logger', 'log_execution_time',

    # Exceptions
    'BaseError', 'NotFoundError', 'InvalidArgumentError',
    'CompositionError', 'ConfigurationError',
]
