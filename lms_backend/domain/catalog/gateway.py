"""
Catalog Gateway Module

This module defines the interface through which the assessment engine reads
courses, topics, exercises and templates. Storage and pagination of those
entities belong to the implementations.
"""

import abc
from typing import List, Optional

from .model import Course, Topic, Exercise, Template


class CatalogGateway(abc.ABC):
    """
    Abstract base class for exercise catalog lookups.

    Implementations may raise any exception on infrastructure failure; the
    engine treats such failures as fatal for the request in progress.
    """

    @abc.abstractmethod
    async def find_course_by_id(self, course_id: int) -> Optional[Course]:
        """
        Get a course by its ID.

        Args:
            course_id: The ID of the course to retrieve

        Returns:
            The Course if found, None otherwise
        """
        pass

    @abc.abstractmethod
    async def find_topics_by_course(self, course_id: int) -> List[Topic]:
        """
        Get the topics of a course, in storage order.

        Args:
            course_id: The ID of the owning course

        Returns:
            List of Topic entities, empty if the course has none
        """
        pass

    @abc.abstractmethod
    async def find_exercises_by_topic(self, topic_id: int) -> List[Exercise]:
        """
        Get the exercises of a topic, in storage order.

        Args:
            topic_id: The ID of the owning topic

        Returns:
            List of Exercise entities, empty if the topic has none
        """
        pass

    @abc.abstractmethod
    async def find_template_by_id(self, template_id: int) -> Optional[Template]:
        """
        Get a template by its ID.

        Args:
            template_id: The ID of the template to retrieve

        Returns:
            The Template if found, None otherwise
        """
        pass
