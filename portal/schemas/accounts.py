"""Request/response schemas for account endpoints (camelCase on the wire)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    """Accept both camelCase aliases and snake_case names; serialize by alias."""

    model_config = ConfigDict(populate_by_name=True)


class RegisterRequest(_WireModel):
    """Registration payload. Fields are optional so missing ones are reported together."""

    email: str | None = None
    password: str | None = None
    user_name: str | None = Field(default=None, alias="userName")
    is_representative: bool | None = Field(
        default=None,
        alias="isRepresentative",
        description="Students only; ignored for faculty",
    )


class LoginRequest(_WireModel):
    """Credentials for student, faculty or representative login."""

    email: str | None = None
    password: str | None = None


class ChangePasswordRequest(_WireModel):
    """Current and new password for an existing account."""

    email: str | None = None
    old_password: str | None = Field(default=None, alias="oldPassword")
    new_password: str | None = Field(default=None, alias="newPassword")


class StatusResponse(_WireModel):
    """Outcome of register / change-password, and of every rejected request."""

    is_success: bool = Field(..., alias="isSuccess")
    message: str


class LoginResponse(StatusResponse):
    """Successful login with the bearer token."""

    jwt_token: str = Field(..., description="JWT bearer token (Authorization: Bearer <jwt_token>)")


class StudentItem(_WireModel):
    """Student entry for the account list (no password hash)."""

    email: str
    user_name: str = Field(..., alias="userName")
    is_representative: bool = Field(..., alias="isRepresentative")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")


class FacultyItem(_WireModel):
    """Faculty entry for the account list (no password hash)."""

    email: str
    user_name: str = Field(..., alias="userName")
    position: str
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")
