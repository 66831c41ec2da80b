"""
Catalog Domain Model Module

This module defines the read-only entities the assessment engine traverses:
a course owns topics, a topic owns exercises, and every exercise is rendered
through a shared template.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class Course:
    """
    Top-level grouping owning topics.

    Attributes:
        id: Unique identifier for the course
        name: Display name of the course
    """
    id: int
    name: str = ""


@dataclass(frozen=True)
class Topic:
    """
    A subject unit within a course.

    Attributes:
        id: Unique identifier for the topic
        course_id: The course the topic belongs to
        name: Display name of the topic
    """
    id: int
    course_id: int
    name: str = ""


@dataclass(frozen=True)
class Template:
    """
    Reusable question-rendering content, shared by any number of exercises.

    Attributes:
        id: Unique identifier for the template
        name: Short template name
        content: Rendering content (markup, placeholders)
    """
    id: int
    name: str = ""
    content: str = ""


@dataclass(frozen=True)
class Exercise:
    """
    A single question, rendered via a template.

    Attributes:
        id: Unique identifier for the exercise
        topic_id: The topic the exercise belongs to
        template_id: The template used to render the exercise
        question: The question content
        answer: The correct answer
    """
    id: int
    topic_id: int
    template_id: int
    question: str = ""
    answer: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert the exercise to a dictionary."""
        return asdict(self)
