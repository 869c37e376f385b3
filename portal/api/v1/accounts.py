"""Student, faculty and representative endpoints: register, login, change password, list."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from portal.api.v1.auth import get_current_account
from portal.core.config import Settings, get_settings
from portal.core.database import get_db
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
from portal.services import authentication, password_rotation, registration
from portal.services.credential_store import CredentialStore
from portal.services.errors import CredentialStoreError
from portal.services.variants import FACULTY, STUDENT, AccountVariant

router = APIRouter()


def get_store(db: Annotated[Session, Depends(get_db)]) -> CredentialStore:
    """Dependency: credential store bound to the request's DB session."""
    return CredentialStore(db)


Store = Annotated[CredentialStore, Depends(get_store)]
AppSettings = Annotated[Settings, Depends(get_settings)]


def _register(store: CredentialStore, variant: AccountVariant, settings: Settings, body: RegisterRequest) -> StatusResponse:
    message = registration.register(
        store,
        variant,
        settings,
        email=body.email,
        password=body.password,
        user_name=body.user_name,
        is_representative=body.is_representative if variant is STUDENT else None,
    )
    return StatusResponse(is_success=True, message=message)


def _login(store: CredentialStore, variant: AccountVariant, body: LoginRequest) -> LoginResponse:
    result = authentication.login(store, variant, body.email, body.password)
    return LoginResponse(is_success=True, message=result.message, jwt_token=result.token)


def _change_password(
    store: CredentialStore, variant: AccountVariant, settings: Settings, body: ChangePasswordRequest
) -> StatusResponse:
    message = password_rotation.change_password(
        store,
        variant,
        settings,
        email=body.email,
        old_password=body.old_password,
        new_password=body.new_password,
    )
    return StatusResponse(is_success=True, message=message)


def _list(store: CredentialStore, variant: AccountVariant, settings: Settings) -> list:
    if not settings.ACCOUNT_LISTING_ENABLED:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    try:
        return store.list_accounts(variant)
    except CredentialStoreError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to list {variant.name} accounts",
        ) from e


@router.post("/student/register", response_model=StatusResponse, status_code=201)
def register_student(body: RegisterRequest, store: Store, settings: AppSettings) -> StatusResponse:
    """Register a student (institutional email, password >= 8 chars, optional isRepresentative)."""
    return _register(store, STUDENT, settings, body)


@router.post("/faculty/register", response_model=StatusResponse, status_code=201)
def register_faculty(body: RegisterRequest, store: Store, settings: AppSettings) -> StatusResponse:
    """Register faculty; the email local part must be an allowed position (ao, dean, ada, dsw)."""
    return _register(store, FACULTY, settings, body)


@router.post("/student/login", response_model=LoginResponse)
def login_student(body: LoginRequest, store: Store) -> LoginResponse:
    return _login(store, STUDENT, body)


@router.post("/faculty/login", response_model=LoginResponse)
def login_faculty(body: LoginRequest, store: Store) -> LoginResponse:
    return _login(store, FACULTY, body)


@router.post("/representative/login", response_model=LoginResponse)
def login_representative(body: LoginRequest, store: Store) -> LoginResponse:
    """Student login that also requires the account to be flagged as representative."""
    result = authentication.representative_login(store, body.email, body.password)
    return LoginResponse(is_success=True, message=result.message, jwt_token=result.token)


@router.put("/student/change-password", response_model=StatusResponse)
def change_student_password(body: ChangePasswordRequest, store: Store, settings: AppSettings) -> StatusResponse:
    return _change_password(store, STUDENT, settings, body)


@router.put("/faculty/change-password", response_model=StatusResponse)
def change_faculty_password(body: ChangePasswordRequest, store: Store, settings: AppSettings) -> StatusResponse:
    return _change_password(store, FACULTY, settings, body)


@router.get("/students", response_model=list[StudentItem])
def list_students(
    store: Store,
    settings: AppSettings,
    _account: Annotated[CurrentAccount, Depends(get_current_account)],
) -> list[StudentItem]:
    """All students in registration order. Password hashes are never returned."""
    return [
        StudentItem(
            email=s.email,
            user_name=s.user_name,
            is_representative=s.is_representative,
            created_at=s.created_at,
            updated_at=s.updated_at,
        )
        for s in _list(store, STUDENT, settings)
    ]


@router.get("/faculty", response_model=list[FacultyItem])
def list_faculty(
    store: Store,
    settings: AppSettings,
    _account: Annotated[CurrentAccount, Depends(get_current_account)],
) -> list[FacultyItem]:
    """All faculty in registration order. Password hashes are never returned."""
    return [
        FacultyItem(
            email=f.email,
            user_name=f.user_name,
            position=f.position,
            created_at=f.created_at,
            updated_at=f.updated_at,
        )
        for f in _list(store, FACULTY, settings)
    ]
