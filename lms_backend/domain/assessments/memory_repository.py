"""
Memory Assessment Repository Module

This module provides an in-memory implementation of the AssessmentRepository
interface for development and testing purposes.
"""

import itertools
from dataclasses import replace
from typing import Dict, List, Optional

from .model import Assessment
from .repository import AssessmentRepository


class MemoryAssessmentRepository(AssessmentRepository):
    """
    In-memory implementation of the AssessmentRepository.

    Records are copied on the way in and out so callers cannot mutate the
    stored state.
    """

    def __init__(self, initial_data: Optional[List[Assessment]] = None):
        self._assessments: Dict[int, Assessment] = {}
        self._ids = itertools.count(1)

        if initial_data:
            for assessment in initial_data:
                self._store(assessment)

    def _store(self, assessment: Assessment) -> Assessment:
        if assessment.id is None:
            assessment = replace(assessment, id=self._next_id())
        self._assessments[assessment.id] = replace(assessment)
        return replace(assessment)

    def _next_id(self) -> int:
        next_id = next(self._ids)
        while next_id in self._assessments:
            next_id = next(self._ids)
        return next_id

    async def save(self, assessment: Assessment) -> Assessment:
        return self._store(assessment)

    async def delete(self, assessment_id: int) -> bool:
        if assessment_id in self._assessments:
            del self._assessments[assessment_id]
            return True
        return False

    async def find_all(self) -> List[Assessment]:
        return [replace(self._assessments[key]) for key in sorted(self._assessments)]

    async def find_by_id(self, assessment_id: int) -> Optional[Assessment]:
        assessment = self._assessments.get(assessment_id)
        return replace(assessment) if assessment else None

    async def find_by_course_id(self, course_id: int) -> Optional[Assessment]:
        for key in sorted(self._assessments):
            assessment = self._assessments[key]
            if assessment.course_id == course_id:
                return replace(assessment)
        return None

    def clear(self) -> None:
        """
        Clear all assessments.

        This method is specific to the memory implementation and not part of
        the AssessmentRepository interface.
        """
        self._assessments.clear()
