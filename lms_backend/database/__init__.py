"""
Database Module

This module provides the SQLAlchemy models, engine lifecycle and SQL-backed
repositories for the LMS backend.
"""

from lms_backend.database.base import Base, ModelBase, metadata

__all__ = ['Base', 'ModelBase', 'metadata']
