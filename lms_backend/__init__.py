"""
LMS Assessment Backend

Assembles practice assessments for a course and records results:

1. Gathers every exercise of a course through its topics and templates
2. Draws a bounded random subset as a practice assessment
3. Scores submitted answers
4. Classifies assessments as complete under a configurable policy
"""
