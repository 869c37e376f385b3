"""SQLAlchemy ORM models."""

from portal.models.base import Base
from portal.models.account import Faculty, Student

__all__ = ["Base", "Faculty", "Student"]
