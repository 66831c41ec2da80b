"""
Shared fixtures for the assessment engine tests.

The sample catalog:

* course 1 "Algebra": topic 10 (exercises 100, 101) and topic 11 (exercise 102);
  exercises 100 and 102 share template 1
* course 2 "Geometry": no topics
* course 3 "Statistics": topic 30 without exercises
* course 4 "Calculus": no topics and no assessment

Assessments exist for courses 1, 2 and 3.
"""

import pytest

from lms_backend.assessments.completeness import CompletenessEvaluator, get_policy
from lms_backend.assessments.sampler import QuestionSampler, seeded_random_factory
from lms_backend.assessments.scoring import StatsAggregator
from lms_backend.assessments.service import AssessmentService
from lms_backend.domain.assessments.memory_repository import MemoryAssessmentRepository
from lms_backend.domain.assessments.model import Assessment
from lms_backend.domain.catalog.memory_gateway import MemoryCatalogGateway
from lms_backend.domain.catalog.model import Course, Exercise, Template, Topic


@pytest.fixture
def catalog():
    """In-memory catalog with the sample courses."""
    return MemoryCatalogGateway(
        courses=[
            Course(id=1, name="Algebra"),
            Course(id=2, name="Geometry"),
            Course(id=3, name="Statistics"),
            Course(id=4, name="Calculus"),
        ],
        topics=[
            Topic(id=10, course_id=1, name="Linear equations"),
            Topic(id=11, course_id=1, name="Quadratics"),
            Topic(id=30, course_id=3, name="Distributions"),
        ],
        exercises=[
            Exercise(id=100, topic_id=10, template_id=1, question="Solve x + 2 = 5", answer="3"),
            Exercise(id=101, topic_id=10, template_id=2, question="Is x = 2 a solution of 2x = 4?", answer="True"),
            Exercise(id=102, topic_id=11, template_id=1, question="Roots of x^2 - 4", answer="2, -2"),
        ],
        templates=[
            Template(id=1, name="short-answer", content="<p>{question}</p>"),
            Template(id=2, name="true-false", content="<p>{question}</p><select/>"),
        ],
    )


@pytest.fixture
def assessments():
    """Assessment records for courses 1, 2 and 3."""
    return MemoryAssessmentRepository([
        Assessment(id=1, course_id=1),
        Assessment(id=2, course_id=2),
        Assessment(id=3, course_id=3),
    ])


@pytest.fixture
def service(catalog, assessments):
    """Assessment service over the sample catalog with a seeded sampler."""
    return AssessmentService(
        catalog=catalog,
        assessments=assessments,
        sampler=QuestionSampler(seeded_random_factory(42)),
        aggregator=StatsAggregator(),
        evaluator=CompletenessEvaluator(catalog, get_policy("all_topics_have_exercises")),
    )
