"""Account operation failures: a reason code plus the message shown to the caller."""

from enum import Enum


class Reason(str, Enum):
    """Machine-readable rejection reason for account operations."""

    MISSING_FIELDS = "MissingFields"
    INVALID_DOMAIN = "InvalidDomain"
    INVALID_POSITION = "InvalidPosition"
    DUPLICATE_EMAIL = "DuplicateEmail"
    WEAK_PASSWORD = "WeakPassword"
    INVALID_CREDENTIALS = "InvalidCredentials"
    INVALID_PASSWORD = "InvalidPassword"
    NOT_REPRESENTATIVE = "NotRepresentative"
    INVALID_ACCOUNT = "InvalidAccount"
    INVALID_CURRENT_PASSWORD = "InvalidCurrentPassword"
    SAME_PASSWORD = "SamePassword"
    INTERNAL_ERROR = "InternalError"


class AccountError(Exception):
    """Base for expected account-operation failures reported to the caller."""

    def __init__(self, reason: Reason, message: str) -> None:
        self.reason = reason
        self.message = message
        super().__init__(message)


class AccountValidationError(AccountError):
    """Missing fields, weak password, or an email outside the domain/position policy."""


class ConflictError(AccountError):
    """An account with this email already exists for the variant."""


class AuthError(AccountError):
    """Unknown email, wrong password, or missing representative role."""


class InternalError(AccountError):
    """Storage or hashing primitive failed; message is generic, detail goes to the log."""

    def __init__(self, message: str) -> None:
        super().__init__(Reason.INTERNAL_ERROR, message)


class CredentialStoreError(Exception):
    """Raised by the credential store when the database call fails."""


class DuplicateAccountError(CredentialStoreError):
    """Raised by the credential store when the unique email index rejects an insert."""
