"""
Assessment domain module.

This module contains the assessment record, the derived view-objects built by
the engine, and the repositories for storing assessments.
"""

from .model import Assessment, AssessmentExercise, AssessmentDetails, SubmissionStats
from .repository import AssessmentRepository
from .memory_repository import MemoryAssessmentRepository

__all__ = [
    'Assessment',
    'AssessmentExercise',
    'AssessmentDetails',
    'SubmissionStats',
    'AssessmentRepository',
    'MemoryAssessmentRepository',
]
