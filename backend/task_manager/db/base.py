"""SQLAlchemy Declarative Base: shared base class for both document tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all Task Manager ORM models."""
    pass
