"""Account variants (student, faculty): one descriptor per table instead of duplicated services."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from portal.models import Faculty, Student
from portal.services.email_policy import derive_position
from portal.services.errors import AccountValidationError, Reason

if TYPE_CHECKING:
    from portal.core.config import Settings
    from portal.models.base import Base

# (email, is_representative, settings) -> extra column values for the new row
RegistrationHook = Callable[[str, bool | None, "Settings"], dict[str, Any]]


@dataclass(frozen=True)
class AccountVariant:
    """Everything that differs between student and faculty accounts."""

    name: str
    label: str
    model: type[Base]
    registration_hook: RegistrationHook
    duplicate_message: str
    registered_message: str
    unknown_email_message: str
    unknown_account_message: str

    @property
    def register_failed_message(self) -> str:
        return f"Failed to register {self.name}"

    @property
    def login_success_message(self) -> str:
        return f"{self.label} login successful"


def _student_fields(email: str, is_representative: bool | None, settings: "Settings") -> dict[str, Any]:
    return {"is_representative": bool(is_representative)}


def _faculty_fields(email: str, is_representative: bool | None, settings: "Settings") -> dict[str, Any]:
    position = derive_position(email, settings.FACULTY_POSITIONS)
    if position is None:
        raise AccountValidationError(Reason.INVALID_POSITION, "Invalid faculty email")
    return {"position": position}


STUDENT = AccountVariant(
    name="student",
    label="Student",
    model=Student,
    registration_hook=_student_fields,
    duplicate_message="Student email is already registered",
    registered_message="Student email registration is successful",
    unknown_email_message="Invalid student email",
    unknown_account_message="Invalid Student email",
)

FACULTY = AccountVariant(
    name="faculty",
    label="Faculty",
    model=Faculty,
    registration_hook=_faculty_fields,
    duplicate_message="Faculty email already exists",
    registered_message="Faculty email registration successful",
    unknown_email_message="Invalid faculty email",
    unknown_account_message="Invalid Faculty email",
)

VARIANTS: dict[str, AccountVariant] = {v.name: v for v in (STUDENT, FACULTY)}


def get_variant(name: str) -> AccountVariant:
    """Look up a variant by name ('student' or 'faculty'); KeyError otherwise."""
    return VARIANTS[name]
