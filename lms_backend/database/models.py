"""
Database Models

ORM tables backing the course catalog and the assessment records.
"""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from lms_backend.database.base import ModelBase


class TimestampMixin:
    """Mixin to add created_at and updated_at timestamps to models."""
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class CourseModel(ModelBase, TimestampMixin):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False, default="")


class TopicModel(ModelBase, TimestampMixin):
    __tablename__ = "topics"

    id = Column(Integer, primary_key=True)
    course_id = Column(Integer, ForeignKey("courses.id"), index=True, nullable=False)
    name = Column(String(255), nullable=False, default="")


class TemplateModel(ModelBase, TimestampMixin):
    __tablename__ = "templates"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False, default="")
    content = Column(Text, nullable=False, default="")


class ExerciseModel(ModelBase, TimestampMixin):
    __tablename__ = "exercises"

    id = Column(Integer, primary_key=True)
    topic_id = Column(Integer, ForeignKey("topics.id"), index=True, nullable=False)
    template_id = Column(Integer, ForeignKey("templates.id"), nullable=False)
    question = Column(Text, nullable=False, default="")
    answer = Column(Text, nullable=False, default="")


class AssessmentModel(ModelBase, TimestampMixin):
    __tablename__ = "assessments"

    id = Column(Integer, primary_key=True)
    # One assessment per course
    course_id = Column(Integer, ForeignKey("courses.id"), unique=True, nullable=False)
