"""
Memory Catalog Gateway Module

This module provides an in-memory implementation of the CatalogGateway
interface for development and testing purposes.
"""

from typing import Dict, Iterable, List, Optional

from lms_backend.common.logger import app_logger
from .gateway import CatalogGateway
from .model import Course, Topic, Exercise, Template

logger = app_logger.getChild("catalog.memory")


class MemoryCatalogGateway(CatalogGateway):
    """
    In-memory implementation of the CatalogGateway.

    Topics and exercises are returned in insertion order, which stands in for
    the storage order of a real catalog.
    """

    def __init__(
        self,
        courses: Optional[Iterable[Course]] = None,
        topics: Optional[Iterable[Topic]] = None,
        exercises: Optional[Iterable[Exercise]] = None,
        templates: Optional[Iterable[Template]] = None
    ):
        self._courses: Dict[int, Course] = {}
        self._topics: Dict[int, Topic] = {}
        self._exercises: Dict[int, Exercise] = {}
        self._templates: Dict[int, Template] = {}

        for course in courses or []:
            self.add_course(course)
        for template in templates or []:
            self.add_template(template)
        for topic in topics or []:
            self.add_topic(topic)
        for exercise in exercises or []:
            self.add_exercise(exercise)

    async def find_course_by_id(self, course_id: int) -> Optional[Course]:
        return self._courses.get(course_id)

    async def find_topics_by_course(self, course_id: int) -> List[Topic]:
        return [topic for topic in self._topics.values() if topic.course_id == course_id]

    async def find_exercises_by_topic(self, topic_id: int) -> List[Exercise]:
        return [
            exercise for exercise in self._exercises.values()
            if exercise.topic_id == topic_id
        ]

    async def find_template_by_id(self, template_id: int) -> Optional[Template]:
        return self._templates.get(template_id)

    def add_course(self, course: Course) -> Course:
        """Add or replace a course."""
        self._courses[course.id] = course
        return course

    def add_topic(self, topic: Topic) -> Topic:
        """Add or replace a topic."""
        self._topics[topic.id] = topic
        return topic

    def add_exercise(self, exercise: Exercise) -> Exercise:
        """Add or replace an exercise."""
        self._exercises[exercise.id] = exercise
        return exercise

    def add_template(self, template: Template) -> Template:
        """Add or replace a template."""
        self._templates[template.id] = template
        return template

    def clear(self) -> None:
        """
        Clear all catalog data.

        This method is specific to the memory implementation and not part of
        the CatalogGateway interface.
        """
        self._courses.clear()
        self._topics.clear()
        self._exercises.clear()
        self._templates.clear()
        logger.debug("Cleared in-memory catalog")
