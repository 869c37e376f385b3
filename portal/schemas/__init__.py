"""Pydantic request/response schemas."""

from portal.schemas.accounts import (
    ChangePasswordRequest,
    FacultyItem,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    StatusResponse,
    StudentItem,
)
from portal.schemas.auth import CurrentAccount
from portal.schemas.health import HealthResponse

__all__ = [
    "ChangePasswordRequest",
    "CurrentAccount",
    "FacultyItem",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "StatusResponse",
    "StudentItem",
]
