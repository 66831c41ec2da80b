"""
Catalog domain module.

This module contains the read-only course catalog entities and the gateway
interface the assessment engine uses to traverse them.
"""

from .model import Course, Topic, Exercise, Template
from .gateway import CatalogGateway
from .memory_gateway import MemoryCatalogGateway

__all__ = [
    'Course',
    'Topic',
    'Exercise',
    'Template',
    'CatalogGateway',
    'MemoryCatalogGateway',
]
