"""Account registration: policy checks, uniqueness, hashing, insert."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from portal.core.security import (
    PASSWORD_MAX_BYTES,
    PasswordHashError,
    hash_password,
    password_too_long,
)
from portal.services.email_policy import validate_email_domain
from portal.services.errors import (
    AccountValidationError,
    ConflictError,
    CredentialStoreError,
    DuplicateAccountError,
    InternalError,
    Reason,
)

if TYPE_CHECKING:
    from portal.core.config import Settings
    from portal.services.credential_store import CredentialStore
    from portal.services.variants import AccountVariant

logger = logging.getLogger(__name__)

PASSWORD_TOO_SHORT = "Password is too short"


def require_fields(**fields: object) -> None:
    """Raise MISSING_FIELDS naming every field that is None or an empty string."""
    missing = [name for name, value in fields.items() if value is None or value == ""]
    if missing:
        raise AccountValidationError(
            Reason.MISSING_FIELDS,
            f"Missing required fields: {', '.join(missing)}",
        )


def check_password_strength(password: str, settings: "Settings", message: str) -> None:
    """Raise WEAK_PASSWORD unless the password has PASSWORD_MIN_LENGTH chars and fits bcrypt's 72 bytes."""
    if len(password) < settings.PASSWORD_MIN_LENGTH:
        raise AccountValidationError(Reason.WEAK_PASSWORD, message)
    if password_too_long(password):
        raise AccountValidationError(
            Reason.WEAK_PASSWORD,
            f"Password must be at most {PASSWORD_MAX_BYTES} bytes",
        )


def register(
    store: "CredentialStore",
    variant: "AccountVariant",
    settings: "Settings",
    email: str | None,
    password: str | None,
    user_name: str | None,
    is_representative: bool | None = None,
) -> str:
    """
    Create a student or faculty account and return the success message.

    Order of checks: required fields, institutional domain, variant hook
    (faculty position), existing email, password length. The unique index
    on email catches a concurrent registration that slips past the lookup.
    """
    require_fields(email=email, password=password, userName=user_name)
    validate_email_domain(email, settings)
    derived = variant.registration_hook(email, is_representative, settings)

    try:
        existing = store.find_by_email(variant, email)
    except CredentialStoreError as e:
        logger.exception("Registration lookup failed: variant=%s email=%s", variant.name, email)
        raise InternalError(variant.register_failed_message) from e
    if existing is not None:
        logger.info("Registration rejected (duplicate): variant=%s email=%s", variant.name, email)
        raise ConflictError(Reason.DUPLICATE_EMAIL, variant.duplicate_message)

    check_password_strength(password, settings, PASSWORD_TOO_SHORT)

    try:
        password_hash = hash_password(password, settings.BCRYPT_ROUNDS)
    except PasswordHashError as e:
        logger.exception("Password hashing failed: variant=%s email=%s", variant.name, email)
        raise InternalError(variant.register_failed_message) from e

    try:
        store.insert(
            variant,
            email=email,
            user_name=user_name,
            password_hash=password_hash,
            **derived,
        )
    except DuplicateAccountError as e:
        logger.info("Registration rejected (concurrent duplicate): variant=%s email=%s", variant.name, email)
        raise ConflictError(Reason.DUPLICATE_EMAIL, variant.duplicate_message) from e
    except CredentialStoreError as e:
        logger.exception("Registration insert failed: variant=%s email=%s", variant.name, email)
        raise InternalError(variant.register_failed_message) from e

    logger.info("Registered account: variant=%s email=%s", variant.name, email)
    return variant.registered_message
