"""
Assessment Repository Module

This module defines the repository interface for storing Assessment records.
"""

import abc
from typing import List, Optional

from .model import Assessment


class AssessmentRepository(abc.ABC):
    """
    Abstract base class for assessment repositories.

    At most one assessment exists per course; ``find_by_course_id`` returns
    it or None.
    """

    @abc.abstractmethod
    async def save(self, assessment: Assessment) -> Assessment:
        """
        Save an assessment.

        An assessment without an ID is created and assigned one; otherwise the
        stored record with that ID is created or replaced.

        Args:
            assessment: The Assessment to save

        Returns:
            The saved Assessment, with its ID populated
        """
        pass

    @abc.abstractmethod
    async def delete(self, assessment_id: int) -> bool:
        """
        Delete an assessment by its ID.

        Args:
            assessment_id: The ID of the assessment to delete

        Returns:
            True if the assessment was deleted, False if it did not exist
        """
        pass

    @abc.abstractmethod
    async def find_all(self) -> List[Assessment]:
        """
        Get all assessments, ordered by ID.

        Returns:
            List of Assessment records
        """
        pass

    @abc.abstractmethod
    async def find_by_id(self, assessment_id: int) -> Optional[Assessment]:
        """
        Get an assessment by its ID.

        Args:
            assessment_id: The ID of the assessment to retrieve

        Returns:
            The Assessment if found, None otherwise
        """
        pass

    @abc.abstractmethod
    async def find_by_course_id(self, course_id: int) -> Optional[Assessment]:
        """
        Get the assessment of a course.

        Args:
            course_id: The ID of the course

        Returns:
            The course's Assessment if one exists, None otherwise
        """
        pass
