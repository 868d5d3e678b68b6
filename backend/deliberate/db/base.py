"""SQLAlchemy Declarative Base — shared base class for ORM models.

Invariants:
    - All models inherit from Base
    - Base.metadata is the target for Alembic autogenerate and test create_all
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all Deliberate ORM models."""
    pass
