"""
Assessment Composition & Scoring Engine

This package gathers a course's exercises, samples them into a practice
assessment, scores submissions and classifies assessments as complete.
"""

from lms_backend.assessments.sampler import QuestionSampler, seeded_random_factory
from lms_backend.assessments.builder import ExerciseSetBuilder
from lms_backend.assessments.scoring import StatsAggregator
from lms_backend.assessments.completeness import (
    CompletenessEvaluator,
    CompletenessPolicy,
    AllTopicsHaveExercisesPolicy,
    HasExercisesPolicy,
    get_policy
)
from lms_backend.assessments.service import AssessmentService, create_assessment_service

__all__ = [
    'QuestionSampler',
    'seeded_random_factory',
    'ExerciseSetBuilder',
    'StatsAggregator',
    'CompletenessEvaluator',
    'CompletenessPolicy',
    'AllTopicsHaveExercisesPolicy',
    'HasExercisesPolicy',
    'get_policy',
    'AssessmentService',
    'create_assessment_service',
]
