#!/usr/bin/env python3
"""
Database initialization script.

Creates the schema in the configured database and, when SEED_DEMO_DATA is
"true", loads a small demo course with its assessment.

Usage:
    python -m lms_backend.scripts.init_db
"""

import os
import sys
import asyncio
from typing import List

from lms_backend.common.logger import app_logger
from lms_backend.config import settings
from lms_backend.database.init_db import (
    close_database,
    create_schema,
    get_session_factory,
    initialize_database,
)
from lms_backend.database.models import (
    AssessmentModel,
    CourseModel,
    ExerciseModel,
    TemplateModel,
    TopicModel,
)

logger = app_logger.getChild("scripts.init_db")

DEMO_DATA: List[tuple] = [
    (CourseModel, [{"id": 1, "name": "Introduction to Python"}]),
    (TemplateModel, [
        {"id": 1, "name": "short-answer", "content": "<p>{question}</p><input name='answer'/>"},
        {"id": 2, "name": "true-false", "content": "<p>{question}</p><select name='answer'><option>True</option><option>False</option></select>"},
    ]),
    (TopicModel, [
        {"id": 1, "course_id": 1, "name": "Built-in types"},
        {"id": 2, "course_id": 1, "name": "Control flow"},
    ]),
    (ExerciseModel, [
        {"id": 1, "topic_id": 1, "template_id": 1, "question": "What does len('abc') return?", "answer": "3"},
        {"id": 2, "topic_id": 1, "template_id": 2, "question": "Tuples are mutable.", "answer": "False"},
        {"id": 3, "topic_id": 2, "template_id": 1, "question": "Which keyword exits a loop early?", "answer": "break"},
        {"id": 4, "topic_id": 2, "template_id": 2, "question": "'else' may follow a 'for' loop.", "answer": "True"},
    ]),
    (AssessmentModel, [{"id": 1, "course_id": 1}]),
]


async def seed_demo_data() -> None:
    """Insert the demo catalog and assessment."""
    session_factory = get_session_factory()
    async with session_factory() as session:
        for model_class, rows in DEMO_DATA:
            for row in rows:
                session.add(model_class.from_dict(row))
            await session.flush()
        await session.commit()
    logger.info(f"Seeded demo data: {sum(len(rows) for _, rows in DEMO_DATA)} rows")


async def async_main():
    """Initialize the database."""
    try:
        engine = await initialize_database(
            database_url=settings.DATABASE_URL,
            echo=settings.SQL_ECHO,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT
        )
        await create_schema(engine)

        if os.environ.get("SEED_DEMO_DATA", "false").lower() == "true":
            await seed_demo_data()

        logger.info("Database initialized successfully")

    except Exception as e:
        logger.error(f"Error initializing database: {e}")
        sys.exit(1)
    finally:
        await close_database()


if __name__ == "__main__":
    asyncio.run(async_main())
