"""Password change for an existing account: verify current, reject no-op, enforce length."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from portal.core.security import PasswordHashError, hash_password, verify_password
from portal.services.errors import (
    AccountValidationError,
    AuthError,
    CredentialStoreError,
    InternalError,
    Reason,
)
from portal.services.registration import check_password_strength, require_fields

if TYPE_CHECKING:
    from portal.core.config import Settings
    from portal.services.credential_store import CredentialStore
    from portal.services.variants import AccountVariant

logger = logging.getLogger(__name__)

UPDATE_FAILED = "Failed to update password"


def change_password(
    store: "CredentialStore",
    variant: "AccountVariant",
    settings: "Settings",
    email: str | None,
    old_password: str | None,
    new_password: str | None,
) -> str:
    """Replace the stored hash for email; the row is untouched on any rejection."""
    require_fields(email=email, oldPassword=old_password, newPassword=new_password)
    try:
        account = store.find_by_email(variant, email)
    except CredentialStoreError as e:
        logger.exception("Password change lookup failed: variant=%s email=%s", variant.name, email)
        raise InternalError(UPDATE_FAILED) from e
    if account is None:
        raise AuthError(Reason.INVALID_ACCOUNT, variant.unknown_account_message)

    current_hash = account.password_hash
    try:
        old_matches = verify_password(old_password, current_hash)
        # New password must not verify against the current hash.
        new_matches = verify_password(new_password, current_hash)
    except PasswordHashError as e:
        logger.exception("Stored password hash unusable: variant=%s email=%s", variant.name, email)
        raise InternalError(UPDATE_FAILED) from e

    if not old_matches:
        logger.info("Password change rejected (bad current password): variant=%s email=%s", variant.name, email)
        raise AuthError(Reason.INVALID_CURRENT_PASSWORD, "Invalid current password")
    if new_matches:
        raise AccountValidationError(
            Reason.SAME_PASSWORD,
            "New password must be different from the current password",
        )
    check_password_strength(new_password, settings, "New password is too short")

    try:
        new_hash = hash_password(new_password, settings.BCRYPT_ROUNDS)
        store.update(variant, email, password_hash=new_hash)
    except (PasswordHashError, CredentialStoreError) as e:
        logger.exception("Password change failed: variant=%s email=%s", variant.name, email)
        raise InternalError(UPDATE_FAILED) from e

    logger.info("Password updated: variant=%s email=%s", variant.name, email)
    return "Password updated"
