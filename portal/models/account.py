"""ORM models for portal accounts: students and faculty."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, func

from portal.models.base import Base


class AccountMixin:
    """
    Columns shared by every account table.

    email is unique per table; the index is the guard against concurrent duplicate
    registrations, not the application-level lookup.
    """

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(320), nullable=False, unique=True, index=True)
    user_name = Column(String(255), nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class Student(AccountMixin, Base):
    """Student account. is_representative is set at registration and never changed."""

    __tablename__ = "students"

    is_representative = Column(Boolean, nullable=False, default=False)


class Faculty(AccountMixin, Base):
    """Faculty account; position is the email local part (ao, dean, ada, dsw)."""

    __tablename__ = "faculty"

    position = Column(String(64), nullable=False, default="Faculty")
