"""
Declarative base for the LMS ORM models.

Constraint names are generated from a fixed convention so the names in the
Alembic migration match what ``metadata.create_all`` produces.
"""

from typing import Any, Dict

from sqlalchemy import MetaData
from sqlalchemy.orm import declarative_base

metadata = MetaData(naming_convention={
    "pk": "pk_%(table_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ix": "ix_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
})

Base = declarative_base(metadata=metadata)


class ModelBase(Base):
    """Abstract parent of every table; builds rows from plain dicts."""

    __abstract__ = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ModelBase':
        """Create a row from a dict, dropping keys that are not columns of the table."""
        columns = cls.__table__.columns.keys()
        return cls(**{key: value for key, value in data.items() if key in columns})
