"""Login for students, faculty and student representatives; issues JWT access tokens."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from portal.core.security import PasswordHashError, create_access_token, verify_password
from portal.services.errors import AuthError, CredentialStoreError, InternalError, Reason
from portal.services.registration import require_fields
from portal.services.variants import STUDENT

if TYPE_CHECKING:
    from portal.services.credential_store import CredentialStore
    from portal.services.variants import AccountVariant

logger = logging.getLogger(__name__)

INVALID_PASSWORD = "Invalid password"
LOGIN_FAILED = "Failed to log in"
REPRESENTATIVE_ROLE = "representative"


@dataclass(frozen=True)
class LoginResult:
    """Successful login: bearer token plus the message shown to the client."""

    token: str
    message: str


def _find(store: "CredentialStore", variant: "AccountVariant", email: str):
    try:
        return store.find_by_email(variant, email)
    except CredentialStoreError as e:
        logger.exception("Login lookup failed: variant=%s email=%s", variant.name, email)
        raise InternalError(LOGIN_FAILED) from e


def _password_matches(password: str, account, email: str) -> bool:
    try:
        return verify_password(password, account.password_hash)
    except PasswordHashError as e:
        logger.exception("Stored password hash unusable: email=%s", email)
        raise InternalError(LOGIN_FAILED) from e


def _issue(email: str, role: str) -> str:
    try:
        return create_access_token(email, role)
    except (TypeError, ValueError) as e:
        logger.exception("Token signing failed: role=%s email=%s", role, email)
        raise InternalError(LOGIN_FAILED) from e


def login(
    store: "CredentialStore",
    variant: "AccountVariant",
    email: str | None,
    password: str | None,
) -> LoginResult:
    """Verify email and password for a variant and return a token with role=variant.name."""
    require_fields(email=email, password=password)
    account = _find(store, variant, email)
    if account is None:
        logger.info("Login rejected (unknown email): variant=%s email=%s", variant.name, email)
        raise AuthError(Reason.INVALID_CREDENTIALS, variant.unknown_email_message)
    if not _password_matches(password, account, email):
        logger.info("Login rejected (bad password): variant=%s email=%s", variant.name, email)
        raise AuthError(Reason.INVALID_PASSWORD, INVALID_PASSWORD)

    logger.info("Login succeeded: variant=%s email=%s", variant.name, email)
    return LoginResult(token=_issue(email, variant.name), message=variant.login_success_message)


def representative_login(
    store: "CredentialStore",
    email: str | None,
    password: str | None,
) -> LoginResult:
    """
    Login against the student table that additionally requires is_representative.

    The flag is checked before the password, so a non-representative student never
    gets a representative token, whatever the password.
    """
    require_fields(email=email, password=password)
    student = _find(store, STUDENT, email)
    if student is None:
        logger.info("Representative login rejected (unknown email): email=%s", email)
        raise AuthError(Reason.INVALID_CREDENTIALS, "Invalid student representative email")
    if not student.is_representative:
        logger.info("Representative login rejected (not representative): email=%s", email)
        raise AuthError(
            Reason.NOT_REPRESENTATIVE,
            "Student email is not registered as representative email",
        )
    if not _password_matches(password, student, email):
        logger.info("Representative login rejected (bad password): email=%s", email)
        raise AuthError(Reason.INVALID_PASSWORD, INVALID_PASSWORD)

    logger.info("Representative login succeeded: email=%s", email)
    return LoginResult(
        token=_issue(email, REPRESENTATIVE_ROLE),
        message="Representative login successful",
    )
